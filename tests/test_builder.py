import json

import pytest

from prof import ProfileBuilder, SerializationError


def test_profile_builder_sets_fields() -> None:
    data = (
        ProfileBuilder()
        .name("John Doe")
        .email("john@example.com")
        .field("bio", "Software developer")
        .field("age", 30)
        .build()
    )

    assert data == {
        "name": "John Doe",
        "email": "john@example.com",
        "bio": "Software developer",
        "age": 30,
    }


def test_later_writes_win() -> None:
    data = ProfileBuilder().name("First").field("name", "Second").fields(age=1).fields(age=2).build()

    assert data["name"] == "Second"
    assert data["age"] == 2


def test_build_returns_independent_copy() -> None:
    builder = ProfileBuilder().name("A")
    data = builder.build()
    data["name"] = "changed"

    assert builder.build()["name"] == "A"


def test_payload_survives_json_round_trip() -> None:
    data = (
        ProfileBuilder()
        .name("A")
        .field("age", 42)
        .field("score", 1.5)
        .field("active", True)
        .field("tags", ["x", "y"])
        .field("meta", {"nested": None})
        .build()
    )

    assert json.loads(json.dumps(data)) == data


def test_rejects_non_json_values() -> None:
    with pytest.raises(SerializationError):
        ProfileBuilder().field("when", object())
