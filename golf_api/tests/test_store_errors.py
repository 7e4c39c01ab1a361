from __future__ import annotations

import bson
import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from golf_api.courses import CourseService, get_course_service
from golf_api.db import DocumentRepository
from golf_api.errors import CourseNotFound, StoreError
from golf_api.holes import HoleService, get_hole_service
from golf_api.players import PlayerService, get_player_service


class _FailingCollection:
    name = "failing"

    def __init__(self, message: str = "connection refused") -> None:
        self._message = message

    def _fail(self, *_args, **_kwargs):
        raise ServerSelectionTimeoutError(self._message)

    find = _fail

    async def find_one(self, *args, **kwargs):
        self._fail()

    async def insert_one(self, *args, **kwargs):
        self._fail()

    async def update_one(self, *args, **kwargs):
        self._fail()

    async def delete_one(self, *args, **kwargs):
        self._fail()


@pytest.fixture
def broken_client(app, client):
    repo = DocumentRepository(_FailingCollection(), "id")
    app.dependency_overrides[get_course_service] = lambda: CourseService(repo)
    app.dependency_overrides[get_player_service] = lambda: PlayerService(repo)
    app.dependency_overrides[get_hole_service] = lambda: HoleService(repo)
    yield client
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("GET", "/api/courses", None),
        ("GET", "/api/course/1", None),
        ("POST", "/api/courses", {"golf_course_id": 1}),
        ("PUT", "/api/courses/1", {"size": 9}),
        ("DELETE", "/api/courses/1", None),
        ("GET", "/api/players", None),
        ("GET", "/api/player/1", None),
        ("GET", "/api/playersforcourse/1", None),
        ("POST", "/api/players", {"id": 1}),
        ("PUT", "/api/players/1", {"name": "x"}),
        ("DELETE", "/api/players/1", None),
        ("GET", "/api/holes/1", None),
    ],
)
def test_store_failure_maps_to_500_with_raw_message(broken_client, method, path, body):
    resp = broken_client.request(method, path, json=body)
    assert resp.status_code == 500
    assert resp.json() == {"error": "connection refused"}


def test_welcome_route_does_not_touch_store(broken_client):
    assert broken_client.get("/api").status_code == 200


@pytest.mark.anyio
async def test_repository_wraps_driver_errors():
    repo = DocumentRepository(_FailingCollection("boom"), "id")
    with pytest.raises(StoreError) as excinfo:
        await repo.find_by_key(1)
    assert excinfo.value.message == "boom"
    assert isinstance(excinfo.value.__cause__, PyMongoError)


@pytest.mark.anyio
async def test_non_numeric_id_skips_store():
    service = CourseService(DocumentRepository(_FailingCollection(), "golf_course_id"))
    with pytest.raises(CourseNotFound) as excinfo:
        await service.get_course("abc")
    assert excinfo.value.message == "No golf course with id abc"


class _EncodingCollection:
    """Encodes documents the way the driver does before sending them."""

    name = "encoding"

    async def insert_one(self, document):
        bson.encode(document)
        raise AssertionError("document should not have encoded")


def test_oversized_body_id_maps_to_500_with_message(app, client):
    with pytest.raises(OverflowError) as expected:
        bson.encode({"golf_course_id": 10**20})

    repo = DocumentRepository(_EncodingCollection(), "golf_course_id")
    app.dependency_overrides[get_course_service] = lambda: CourseService(repo)
    app.dependency_overrides[get_player_service] = lambda: PlayerService(repo)
    try:
        course = client.post("/api/courses", json={"golf_course_id": 10**20})
        player = client.post("/api/players", json={"id": 10**20, "name": "Big"})
    finally:
        app.dependency_overrides.clear()

    for resp in (course, player):
        assert resp.status_code == 500
        assert resp.json() == {"error": str(expected.value)}
