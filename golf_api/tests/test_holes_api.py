from __future__ import annotations

from datetime import datetime

from bson import ObjectId

from golf_api.db import HOLES


def test_holes_for_course_filters_by_foreign_key(client, seed):
    seed(
        HOLES,
        [
            {"golf_course_fk": 1, "number": 1, "par": 4},
            {"golf_course_fk": 1, "number": 2, "par": 3},
            {"golf_course_fk": 2, "number": 1, "par": 5},
        ],
    )
    resp = client.get("/api/holes/1")
    assert resp.status_code == 200
    holes = resp.json()
    assert sorted(h["number"] for h in holes) == [1, 2]
    assert all(h["golf_course_fk"] == 1 for h in holes)
    assert all(isinstance(h["_id"], str) for h in holes)


def test_holes_for_unknown_course_is_empty_200(client):
    resp = client.get("/api/holes/55")
    assert resp.status_code == 200
    assert resp.json() == []


def test_holes_with_non_numeric_id_is_empty_200(client, seed):
    seed(HOLES, [{"golf_course_fk": None}])
    resp = client.get("/api/holes/abc")
    assert resp.status_code == 200
    assert resp.json() == []


def test_holes_render_bson_values_as_json(client, seed):
    course_ref = ObjectId()
    tee_ref = ObjectId()
    seed(
        HOLES,
        [
            {
                "golf_course_fk": 3,
                "course_ref": course_ref,
                "tees": [{"tee_ref": tee_ref, "length": 355}],
                "surveyed_at": datetime(2024, 5, 1, 12, 30),
            }
        ],
    )
    resp = client.get("/api/holes/3")
    assert resp.status_code == 200
    hole = resp.json()[0]
    assert hole["course_ref"] == str(course_ref)
    assert hole["tees"][0]["tee_ref"] == str(tee_ref)
    assert hole["surveyed_at"].startswith("2024-05-01T12:30")
    assert set(hole) == {"_id", "golf_course_fk", "course_ref", "tees", "surveyed_at"}
