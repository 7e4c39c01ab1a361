"""Shared pytest fixtures: an app wired to an in-memory Mongo double."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Iterable, Mapping

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from golf_api.app import create_app
from golf_api.config import Settings
from golf_api.db import DATABASE_NAME


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(STATIC_DIR=str(tmp_path / "no-static"))


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest.fixture
def app(settings, mongo_client):
    return create_app(settings=settings, mongo_client=mongo_client)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed(mongo_client) -> Callable[[str, Iterable[Mapping[str, Any]]], None]:
    """Insert raw documents straight into a collection."""

    def _seed(collection: str, documents: Iterable[Mapping[str, Any]]) -> None:
        docs = [dict(doc) for doc in documents]
        asyncio.run(mongo_client[DATABASE_NAME][collection].insert_many(docs))

    return _seed


@pytest.fixture
def stored(mongo_client) -> Callable[[str, Mapping[str, Any]], list]:
    """Read raw documents straight from a collection."""

    def _stored(collection: str, query: Mapping[str, Any] | None = None) -> list:
        cursor = mongo_client[DATABASE_NAME][collection].find(dict(query or {}))
        return asyncio.run(cursor.to_list(length=None))

    return _stored
