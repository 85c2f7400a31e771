"""
profile_store.py

Adapters for the player profile store the session commits to. Both apply a
`ProfileUpdate` as a single step: either the whole patch lands or, on an
exception, nothing does.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Protocol, Union

from pydantic import ValidationError

from core.errors import ConfigurationError
from core.settings import EngineSettings
from schemas.profile import ProfileUpdate, UserProfile

logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    async def load_profile(self, user_id: str) -> UserProfile:
        ...

    async def apply_session_result(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        ...


def apply_update(profile: UserProfile, update: ProfileUpdate) -> UserProfile:
    """Returns the profile with `update` applied; `profile` is not modified."""

    level_scores = dict(profile.level_scores)
    level_scores[update.ledger_key] = update.ledger_entry

    changes: Dict[str, Any] = {
        "experience": profile.experience + update.experience_gained,
        "total_score": profile.total_score + update.score_gained,
        "level_scores": level_scores,
        "play_streak": update.play_streak,
        "last_played_at": update.last_played_at,
    }
    if update.grade is not None:
        changes["grade"] = update.grade
    if update.level is not None:
        changes["level"] = update.level
    return profile.model_copy(update=changes)


class InMemoryProfileStore:
    """Keeps profiles in a dict. Unknown players get a fresh K1 profile."""

    def __init__(self):
        self._profiles: Dict[str, UserProfile] = {}
        self._lock = asyncio.Lock()

    def put(self, profile: UserProfile) -> None:
        self._profiles[profile.user_id] = profile

    async def load_profile(self, user_id: str) -> UserProfile:
        return self._profiles.get(user_id) or UserProfile(user_id=user_id)

    async def apply_session_result(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        async with self._lock:
            current = await self.load_profile(user_id)
            updated = apply_update(current, update)
            self._profiles[user_id] = updated
            return updated


class JsonProfileStore:
    """
    Persists every profile in one JSON file of the form
    {"profiles": {user_id: profile}}. Writes go to a temporary file in the
    same directory and are moved into place with `os.replace`. File access
    runs in a worker thread so the event loop keeps serving.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "JsonProfileStore":
        if settings.profile_path is None:
            raise ConfigurationError("profile_path is not set; no JSON profile store to open.")
        return cls(settings.profile_path)

    @property
    def path(self) -> Path:
        return self._path

    async def load_profile(self, user_id: str) -> UserProfile:
        profiles = await asyncio.to_thread(self._read_file)
        return self._parse(user_id, profiles.get(user_id))

    async def apply_session_result(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        async with self._lock:
            profiles = await asyncio.to_thread(self._read_file)
            current = self._parse(user_id, profiles.get(user_id))
            updated = apply_update(current, update)
            profiles[user_id] = updated.model_dump(mode="json")
            await asyncio.to_thread(self._write_file, profiles)
            logger.debug("Saved profile %r to %s", user_id, self._path)
            return updated

    @staticmethod
    def _parse(user_id: str, data: Any) -> UserProfile:
        if data is None:
            return UserProfile(user_id=user_id)
        try:
            return UserProfile.model_validate(data)
        except ValidationError:
            logger.warning("Stored profile for %r is malformed; starting fresh.", user_id)
            return UserProfile(user_id=user_id)

    def _read_file(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            store = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Profile file %s is not valid JSON; treating it as empty.", self._path)
            return {}
        profiles = store.get("profiles", {}) if isinstance(store, dict) else {}
        return profiles if isinstance(profiles, dict) else {}

    def _write_file(self, profiles: Dict[str, Any]) -> None:
        handle, temp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as temp_file:
                json.dump({"profiles": profiles}, temp_file, indent=2)
            os.replace(temp_name, self._path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise


def build_profile_store(settings: EngineSettings) -> Union[JsonProfileStore, InMemoryProfileStore]:
    """A JSON store at `settings.profile_path`, or an in-memory one when unset."""

    if settings.profile_path is None:
        logger.info("No profile path configured; profiles are kept in memory.")
        return InMemoryProfileStore()
    return JsonProfileStore.from_settings(settings)
