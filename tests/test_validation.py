# tests/test_validation.py
import pytest

from catalog.validation import ErrorKind, validate_create, validate_update


def test_valid_create_defaults_in_stock():
    result = validate_create({"name": "Desk", "price": 200})
    assert result.ok
    assert result.payload == {"name": "Desk", "price": 200, "inStock": True}


def test_create_drops_unknown_keys_and_id():
    result = validate_create({"id": "x", "name": "Desk", "price": 1.5, "color": "red"})
    assert result.payload == {"name": "Desk", "price": 1.5, "inStock": True}


def test_create_keeps_null_optional_strings():
    result = validate_create({"name": "Desk", "price": 1, "description": None})
    assert result.ok
    assert result.payload["description"] is None


@pytest.mark.parametrize(
    "payload, field, kind",
    [
        ({"price": 10}, "name", ErrorKind.MISSING_FIELD),
        ({"name": "A"}, "price", ErrorKind.MISSING_FIELD),
        ({"name": 5, "price": 10}, "name", ErrorKind.TYPE_MISMATCH),
        ({"name": "", "price": 10}, "name", ErrorKind.INVALID_VALUE),
        ({"name": "A", "price": "10"}, "price", ErrorKind.TYPE_MISMATCH),
        ({"name": "A", "price": True}, "price", ErrorKind.TYPE_MISMATCH),
        ({"name": "A", "price": 0}, "price", ErrorKind.INVALID_VALUE),
        ({"name": "A", "price": -3.5}, "price", ErrorKind.INVALID_VALUE),
        ({"name": "A", "price": float("inf")}, "price", ErrorKind.INVALID_VALUE),
        ({"name": "A", "price": float("nan")}, "price", ErrorKind.INVALID_VALUE),
        ({"name": "A", "price": 1, "description": 3}, "description", ErrorKind.TYPE_MISMATCH),
        ({"name": "A", "price": 1, "category": ["x"]}, "category", ErrorKind.TYPE_MISMATCH),
        ({"name": "A", "price": 1, "inStock": "yes"}, "inStock", ErrorKind.TYPE_MISMATCH),
        ({"name": "A", "price": 1, "inStock": 1}, "inStock", ErrorKind.TYPE_MISMATCH),
    ],
)
def test_create_reports_violation(payload, field, kind):
    result = validate_create(payload)
    assert not result.ok
    assert result.error.field == field
    assert result.error.kind is kind


def test_first_violation_in_field_order_wins():
    result = validate_create({"inStock": "no", "category": 1, "price": "x"})
    assert result.error.field == "name"
    assert result.error.message == "name is required"

    result = validate_create({"name": "A", "inStock": "no", "description": 7})
    assert result.error.field == "price"

    result = validate_create({"name": "A", "price": 2, "inStock": "no", "description": 7})
    assert result.error.field == "description"
    assert result.error.message == "description must be a string"


def test_update_allows_any_subset():
    assert validate_update({}).payload == {}
    assert validate_update({"price": 3}).payload == {"price": 3}
    assert validate_update({"inStock": False}).payload == {"inStock": False}


def test_update_does_not_default_in_stock():
    assert "inStock" not in validate_update({"name": "B"}).payload


def test_update_still_checks_present_fields():
    result = validate_update({"name": None})
    assert result.error.field == "name"
    assert result.error.kind is ErrorKind.TYPE_MISMATCH

    result = validate_update({"inStock": "false"})
    assert result.error.message == "inStock must be a boolean"


def test_non_object_payload_is_rejected():
    result = validate_create(["name", "price"])
    assert not result.ok
    assert result.error.field is None
    assert result.error.kind is ErrorKind.TYPE_MISMATCH
