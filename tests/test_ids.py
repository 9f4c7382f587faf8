import pytest
from bson import ObjectId

from warmpaws_api.app.core.ids import (
    InvalidIdentifierError,
    is_valid_object_id,
    parse_object_id,
)


def test_canonical_object_id_is_valid():
    value = str(ObjectId())
    assert is_valid_object_id(value)
    assert parse_object_id(value) == ObjectId(value)


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "u1",
        "s1",
        12345,
        {"$gt": ""},
        "665F1C2E8A1B2C3D4E5F6A7B",  # upper case does not round-trip
        " 665f1c2e8a1b2c3d4e5f6a7b",
        "665f1c2e8a1b2c3d4e5f6a7z",
        "abcdefghijkl",  # 12 characters, accepted by some drivers as raw bytes
        ObjectId(),
    ],
)
def test_non_canonical_values_are_rejected(value):
    assert is_valid_object_id(value) is False


def test_parse_object_id_raises_invalid_identifier():
    with pytest.raises(InvalidIdentifierError) as excinfo:
        parse_object_id("not-an-id")
    assert "not-an-id" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)
