"""Request-scoped dependencies: store, settings and the acting user."""

from fastapi import Depends, Header, HTTPException, Request

from singsmart.config import Settings
from singsmart.models.user import User
from singsmart.storage.memory import MemoryStore


async def get_store(request: Request) -> MemoryStore:
    return request.app.state.store


async def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_optional_user(
    store: MemoryStore = Depends(get_store),
    x_user_id: str | None = Header(default=None),
) -> User | None:
    """Resolve the acting user.

    An ``X-User-Id`` header selects that user explicitly; without it the
    store's active (first created) user acts.
    """
    if x_user_id:
        user = store.get_user(x_user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        return user
    return store.get_active_user()


async def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
