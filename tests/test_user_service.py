"""Tests for user service."""

from uuid import uuid4

import pytest

from macro_journal.domain.errors import NotFoundError, ValidationError
from macro_journal.services.users import UserService
from tests.conftest import InMemoryUserRepository


def test_create_user_strips_name() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    user = service.create_user("  Sam ")

    assert user.name == "Sam"
    assert service.get_user(user.id) == user


def test_create_user_requires_name() -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(ValidationError):
        service.create_user("   ")


def test_get_missing_user_raises() -> None:
    service = UserService(InMemoryUserRepository())

    with pytest.raises(NotFoundError):
        service.get_user(uuid4())


def test_list_users_ordered_by_name() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)
    service.create_user("Zoe")
    service.create_user("Ana")

    assert [user.name for user in service.list_users()] == ["Ana", "Zoe"]
