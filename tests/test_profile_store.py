"""
Tests for store.profile_store

Test Coverage:
- apply_update() patch semantics
- InMemoryProfileStore defaults and commits
- JsonProfileStore persistence, atomic writes and damaged files
- File access off the event loop thread, concurrent commits
- Building the store from EngineSettings
"""

import asyncio
import json
import threading
from datetime import datetime, timezone

import pytest

from core.errors import ConfigurationError
from core.settings import EngineSettings
from schemas.profile import ProfileUpdate, ScoreLedgerEntry, UserProfile
from store.profile_store import InMemoryProfileStore, JsonProfileStore, apply_update, build_profile_store

PLAYED_AT = datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


def _update(**overrides) -> ProfileUpdate:
    fields = dict(
        experience_gained=120,
        score_gained=6,
        ledger_key="P2-45",
        ledger_entry=ScoreLedgerEntry(high_score=16, last_played_at=PLAYED_AT, play_count=2),
        play_streak=3,
        last_played_at=PLAYED_AT,
        grade="P2",
        level=46,
    )
    fields.update(overrides)
    return ProfileUpdate(**fields)


class TestApplyUpdate:
    def test_adds_gains_and_replaces_position(self):
        profile = UserProfile(user_id="ana", grade="P2", level=45, experience=1000, total_score=50)

        updated = apply_update(profile, _update())

        assert updated.experience == 1120
        assert updated.total_score == 56
        assert updated.level == 46
        assert updated.play_streak == 3
        assert updated.level_scores["P2-45"].high_score == 16
        assert profile.experience == 1000
        assert profile.level_scores == {}

    def test_practice_update_keeps_grade_and_level(self):
        profile = UserProfile(user_id="ana", grade="P2", level=60)

        updated = apply_update(profile, _update(grade=None, level=None))

        assert (updated.grade, updated.level) == ("P2", 60)


def test_in_memory_store_round_trip():
    async def scenario():
        store = InMemoryProfileStore()
        fresh = await store.load_profile("ana")
        await store.apply_session_result("ana", _update())
        return fresh, await store.load_profile("ana")

    fresh, saved = asyncio.run(scenario())

    assert (fresh.grade, fresh.level, fresh.experience) == ("K1", 1, 0)
    assert saved.experience == 120
    assert saved.level == 46


class TestJsonProfileStore:
    def test_profile_survives_a_new_store_instance(self, tmp_path):
        path = tmp_path / "profiles.json"

        async def scenario():
            await JsonProfileStore(path).apply_session_result("ana", _update())
            return await JsonProfileStore(path).load_profile("ana")

        profile = asyncio.run(scenario())

        assert profile.experience == 120
        assert profile.level_scores["P2-45"].last_played_at == PLAYED_AT
        assert profile.last_played_at == PLAYED_AT

    def test_write_leaves_no_temporary_files(self, tmp_path):
        path = tmp_path / "profiles.json"

        asyncio.run(JsonProfileStore(path).apply_session_result("ana", _update()))

        assert [item.name for item in tmp_path.iterdir()] == ["profiles.json"]
        assert "ana" in json.loads(path.read_text(encoding="utf-8"))["profiles"]

    def test_damaged_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text("{not json", encoding="utf-8")

        profile = asyncio.run(JsonProfileStore(path).load_profile("ana"))

        assert profile == UserProfile(user_id="ana")

    def test_creates_missing_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "profiles.json"

        asyncio.run(JsonProfileStore(path).apply_session_result("ana", _update()))

        assert path.exists()

    def test_file_access_runs_off_the_event_loop_thread(self, tmp_path, monkeypatch):
        store = JsonProfileStore(tmp_path / "profiles.json")
        threads = []
        read_file, write_file = store._read_file, store._write_file

        def recording_read():
            threads.append(threading.get_ident())
            return read_file()

        def recording_write(profiles):
            threads.append(threading.get_ident())
            write_file(profiles)

        monkeypatch.setattr(store, "_read_file", recording_read)
        monkeypatch.setattr(store, "_write_file", recording_write)

        async def scenario():
            await store.apply_session_result("ana", _update())
            await store.load_profile("ana")
            return threading.get_ident()

        loop_thread = asyncio.run(scenario())

        assert len(threads) == 3
        assert loop_thread not in threads

    def test_concurrent_commits_keep_every_player(self, tmp_path):
        store = JsonProfileStore(tmp_path / "profiles.json")
        players = ["ana", "ben", "cai", "dev"]

        async def scenario():
            await asyncio.gather(*(store.apply_session_result(name, _update()) for name in players))
            return [await store.load_profile(name) for name in players]

        saved = asyncio.run(scenario())

        assert [profile.experience for profile in saved] == [120] * 4


class TestBuildProfileStore:
    def test_profile_path_opens_json_store(self, tmp_path):
        path = tmp_path / "data" / "profiles.json"
        store = build_profile_store(EngineSettings(profile_path=path))

        asyncio.run(store.apply_session_result("ana", _update()))

        assert isinstance(store, JsonProfileStore)
        assert store.path == path
        assert "ana" in json.loads(path.read_text(encoding="utf-8"))["profiles"]

    def test_without_profile_path_keeps_profiles_in_memory(self):
        store = build_profile_store(EngineSettings())

        assert isinstance(store, InMemoryProfileStore)

    def test_from_settings_requires_profile_path(self):
        with pytest.raises(ConfigurationError):
            JsonProfileStore.from_settings(EngineSettings())
