"""Tests for request dependencies."""

import inspect
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from singsmart.api import deps
from singsmart.config import Settings
from singsmart.models.user import UserCreate
from singsmart.storage.memory import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def request_for(store):
    state = SimpleNamespace(store=store, settings=Settings())
    return SimpleNamespace(app=SimpleNamespace(state=state))


@pytest.mark.parametrize(
    "dependency",
    [deps.get_store, deps.get_app_settings, deps.get_optional_user, deps.get_current_user],
)
def test_dependencies_run_on_event_loop(dependency):
    assert inspect.iscoroutinefunction(dependency)


async def test_store_and_settings_come_from_app_state(request_for, store):
    assert await deps.get_store(request_for) is store
    settings = await deps.get_app_settings(request_for)
    assert settings.advancement_threshold == 70.0


async def test_active_user_without_header(store):
    first = store.create_user(UserCreate(name="Ana", experience_level="beginner"))
    store.create_user(UserCreate(name="Ben", experience_level="advanced"))
    user = await deps.get_optional_user(store=store, x_user_id=None)
    assert user.id == first.id


async def test_header_selects_user(store):
    store.create_user(UserCreate(name="Ana", experience_level="beginner"))
    other = store.create_user(UserCreate(name="Ben", experience_level="advanced"))
    user = await deps.get_optional_user(store=store, x_user_id=other.id)
    assert user.name == "Ben"


async def test_unknown_header_is_404(store):
    with pytest.raises(HTTPException) as exc_info:
        await deps.get_optional_user(store=store, x_user_id="nope")
    assert exc_info.value.status_code == 404


async def test_no_user_is_404():
    with pytest.raises(HTTPException) as exc_info:
        await deps.get_current_user(user=None)
    assert exc_info.value.status_code == 404
