"""Song recommendations for the active user."""

from singsmart.models.catalog import Song
from singsmart.models.exercise import Difficulty
from singsmart.models.user import User
from singsmart.storage.memory import MemoryStore


def recommend_songs(store: MemoryStore, user: User | None, limit: int = 4) -> list[Song]:
    """Pick songs suited to the user's voice.

    Songs in the user's vocal range when any exist, otherwise the first
    ``limit`` catalog songs. Users without a vocal range (or no user at all)
    get the first ``limit`` easy songs.
    """
    if user is not None and user.vocal_range:
        matching = store.list_songs_by_vocal_range(user.vocal_range)
        if matching:
            return matching
        return store.list_songs()[:limit]
    return [s for s in store.list_songs() if s.difficulty == Difficulty.EASY][:limit]
