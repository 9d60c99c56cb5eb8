"""Tests for the User entity."""

import uuid

import pytest

from user_core.models.user import User


@pytest.mark.unit
def test_new_user_generates_unique_uuid() -> None:
    """Test that User.new assigns a distinct UUID to every user."""
    first = User.new("Alice", "alice@example.com")
    second = User.new("Alice", "alice@example.com")

    assert first.id != second.id
    assert str(uuid.UUID(first.id)) == first.id
    assert first.name == "Alice"
    assert first.email == "alice@example.com"


@pytest.mark.unit
def test_with_id_keeps_given_id() -> None:
    user = User.with_id("user-123", "Jane Doe", "jane.doe@example.com")
    assert user.id == "user-123"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "email", "expected"),
    [
        ("Alice", "alice@example.com", True),
        ("", "alice@example.com", False),
        ("Alice", "", False),
        ("", "", False),
        ("Alice", "not-an-email", True),
    ],
)
def test_is_valid(name: str, email: str, expected: bool) -> None:
    """Test that validity only requires non-empty name and email."""
    assert User.new(name, email).is_valid() is expected


@pytest.mark.unit
def test_update_mutators_keep_id() -> None:
    """Test that update_name and update_email never touch the id."""
    user = User.with_id("user-1", "Alice", "alice@example.com")

    user.update_name("Alicia")
    user.update_email("alicia@example.com")

    assert user.id == "user-1"
    assert user.name == "Alicia"
    assert user.email == "alicia@example.com"


@pytest.mark.unit
def test_user_serializes_with_plain_field_names() -> None:
    user = User.with_id("user-1", "Alice", "alice@example.com")
    assert user.model_dump() == {"id": "user-1", "name": "Alice", "email": "alice@example.com"}
