"""
Tests for core.session.GameController

Verifies:
1. A full session commits ledger, EXP, streak and progression in one update
2. Practice sessions report progression without moving the player
3. Submissions are single-flight
4. Exiting discards everything, even during the transition delay
5. A failed commit keeps the session and can be retried without recomputing
"""

import asyncio
import random
from datetime import datetime, timedelta, timezone

import pytest

from core.errors import PersistenceFailure, SessionStateError
from core.session import GameController, SessionState
from core.settings import EngineSettings
from schemas.profile import ScoreLedgerEntry, UserProfile
from store.profile_store import InMemoryProfileStore

NOW = datetime(2026, 3, 10, 8, 0, tzinfo=timezone.utc)


class FlakyStore(InMemoryProfileStore):
    """Fails the first `failures` commits and records every update it sees."""

    def __init__(self, failures: int = 0):
        super().__init__()
        self.failures = failures
        self.updates = []

    async def apply_session_result(self, user_id, update):
        self.updates.append(update)
        if self.failures:
            self.failures -= 1
            raise OSError("disk full")
        return await super().apply_session_result(user_id, update)


def _controller(store, delay: float = 0.0) -> GameController:
    return GameController(
        store,
        settings=EngineSettings(transition_delay=delay),
        rng=random.Random(2026),
        clock=lambda: NOW,
    )


async def _play(controller: GameController, correct: int) -> None:
    """Answers every remaining question, the first `correct` of them right."""

    answered = len(controller.session.answers)
    while controller.state is SessionState.PLAYING:
        question = controller.current_question
        answer = question.answer if answered < correct else question.answer + 1
        answered += 1
        await controller.submit_answer(answer, time_spent_seconds=1.5)


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(user_id="ana", grade="K1", level=1)


class TestCompletedSession:
    def test_perfect_first_session(self, profile):
        store = FlakyStore()
        store.put(profile)
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile)
            await _play(controller, correct=10)
            return await store.load_profile("ana")

        saved = asyncio.run(scenario())
        result = controller.last_result

        assert controller.state is SessionState.READY
        assert (result.score, result.total_questions, result.percentage) == (10, 10, 100)
        assert result.progression.direction == "increase"
        assert result.progression.applied
        assert result.exp.total == 10 * 10 + 100 + 50 + 10
        assert result.exp_awarded == result.exp.total
        assert len(result.answers) == 10
        assert all(record.is_correct for record in result.answers)

        assert saved.level == 2
        assert saved.experience == 260
        assert saved.total_score == 10
        assert saved.play_streak == 1
        assert saved.level_scores["K1-1"] == ScoreLedgerEntry(high_score=10, last_played_at=NOW, play_count=1)

    def test_replaying_a_mastered_level_adds_no_score(self):
        profile = UserProfile(
            user_id="ana",
            grade="P1",
            level=30,
            total_score=40,
            play_streak=2,
            last_played_at=NOW - timedelta(days=1),
            level_scores={"P1-30": ScoreLedgerEntry(high_score=19, play_count=3)},
        )
        store = FlakyStore()
        store.put(profile)
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile)
            await _play(controller, correct=12)
            return await store.load_profile("ana")

        saved = asyncio.run(scenario())
        result = controller.last_result

        assert result.percentage == 60
        assert result.score_difference.score_diff == 0
        assert result.progression.direction == "maintain"
        assert result.exp.breakdown.repeat_penalty_applied
        assert result.streak.play_streak == 3
        assert saved.total_score == 40
        assert saved.level == 30
        assert saved.level_scores["P1-30"].high_score == 19
        assert saved.level_scores["P1-30"].play_count == 4

    def test_boost_multiplies_awarded_exp(self, profile):
        store = FlakyStore()
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile, boost_multipliers=(1.5, 2.0))
            await _play(controller, correct=10)

        asyncio.run(scenario())

        assert controller.last_result.boost_multiplier == 2.0
        assert controller.last_result.exp_awarded == 2 * controller.last_result.exp.total
        assert store.updates[0].experience_gained == controller.last_result.exp_awarded

    def test_low_score_at_level_one_drops_a_grade(self):
        profile = UserProfile(user_id="ana", grade="P1", level=1)
        store = FlakyStore()
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile)
            await _play(controller, correct=3)
            return await store.load_profile("ana")

        saved = asyncio.run(scenario())

        assert controller.last_result.progression.grade_changed
        assert (saved.grade, saved.level) == ("K3", 100)


class TestPracticeSession:
    def test_progression_is_reported_but_not_applied(self):
        profile = UserProfile(user_id="ana", grade="K1", level=5)
        store = FlakyStore()
        store.put(profile)
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile, effective_level=3)
            await _play(controller, correct=10)
            return await store.load_profile("ana")

        saved = asyncio.run(scenario())
        result = controller.last_result

        assert result.is_practice
        assert result.level == 3
        assert result.progression.direction == "increase"
        assert result.progression.new_level == 4
        assert result.progression.applied is False
        assert (saved.grade, saved.level) == ("K1", 5)
        assert saved.level_scores["K1-3"].high_score == 10
        assert saved.experience > 0

    def test_effective_level_equal_to_stored_level_is_not_practice(self):
        profile = UserProfile(user_id="ana", grade="K1", level=5)
        controller = _controller(FlakyStore())

        controller.start_game(profile, effective_level=5)

        assert controller.session.is_practice is False


class TestSubmissionLock:
    def test_second_submission_in_flight_is_ignored(self, profile):
        controller = _controller(FlakyStore(), delay=0.05)

        async def scenario():
            controller.start_game(profile)
            answer = controller.current_question.answer
            return await asyncio.gather(
                controller.submit_answer(answer),
                controller.submit_answer(answer),
            )

        first, second = asyncio.run(scenario())

        assert first is not None and first.is_correct
        assert second is None
        assert controller.session.question_index == 1
        assert len(controller.session.answers) == 1
        assert controller.session.score == 1

    def test_garbled_typed_answer_is_recorded_as_wrong(self):
        controller = _controller(FlakyStore())

        async def scenario():
            controller.start_game(UserProfile(user_id="ana", grade="P1", level=10))
            return await controller.submit_answer("()")

        record = asyncio.run(scenario())

        assert record is not None
        assert record.is_correct is False
        assert controller.session.question_index == 1
        assert controller.session.score == 0

    def test_submitting_while_ready_is_an_error(self):
        controller = _controller(FlakyStore())

        with pytest.raises(SessionStateError):
            asyncio.run(controller.submit_answer(3))

    def test_starting_twice_is_an_error(self, profile):
        controller = _controller(FlakyStore())
        controller.start_game(profile)

        with pytest.raises(SessionStateError):
            controller.start_game(profile)


class TestExit:
    def test_exit_discards_session_without_saving(self, profile):
        store = FlakyStore()
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile)
            await controller.submit_answer(controller.current_question.answer)
            return controller.exit_game()

        assert asyncio.run(scenario()) is True
        assert controller.state is SessionState.READY
        assert controller.session is None
        assert controller.last_result is None
        assert store.updates == []

    def test_exit_during_transition_delay(self, profile):
        store = FlakyStore()
        controller = _controller(store, delay=0.05)

        async def scenario():
            controller.start_game(profile)
            task = asyncio.create_task(controller.submit_answer(controller.current_question.answer))
            await asyncio.sleep(0)
            exited = controller.exit_game()
            return exited, await task

        exited, record = asyncio.run(scenario())

        assert exited is True
        assert record is None
        assert controller.state is SessionState.READY
        assert controller.current_question is None
        assert store.updates == []

    def test_exit_when_idle_does_nothing(self):
        assert _controller(FlakyStore()).exit_game() is False


class TestPersistenceFailure:
    def test_failed_commit_keeps_session_and_retry_succeeds(self, profile):
        store = FlakyStore(failures=1)
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile)
            with pytest.raises(PersistenceFailure):
                await _play(controller, correct=9)

            assert controller.state is SessionState.FINALIZING
            assert controller.session is not None
            assert controller.session.score == 9
            assert controller.pending_result.score == 9
            assert controller.last_result is None

            result = await controller.retry_finalize()
            return result, await store.load_profile("ana")

        result, saved = asyncio.run(scenario())

        assert controller.state is SessionState.READY
        assert result.score == 9
        assert len(store.updates) == 2
        assert store.updates[0] is store.updates[1]
        assert saved.total_score == 9
        assert saved.experience == result.exp_awarded

    def test_exit_after_failed_commit_discards_result(self, profile):
        store = FlakyStore(failures=1)
        controller = _controller(store)

        async def scenario():
            controller.start_game(profile)
            with pytest.raises(PersistenceFailure):
                await _play(controller, correct=10)
            return controller.exit_game(), await store.load_profile("ana")

        exited, saved = asyncio.run(scenario())

        assert exited is True
        assert controller.pending_result is None
        assert saved.experience == 0

    def test_retry_without_failure_is_an_error(self):
        controller = _controller(FlakyStore())

        with pytest.raises(SessionStateError):
            asyncio.run(controller.retry_finalize())


def test_start_for_user_loads_profile_from_store():
    store = FlakyStore()
    store.put(UserProfile(user_id="ana", grade="M2", level=40))
    controller = _controller(store)

    question = asyncio.run(controller.start_for_user("ana"))

    assert question.grade == "M2"
    assert controller.session.total_questions == 20
    assert controller.session.level == 40


def test_controller_from_settings_commits_to_profile_file(tmp_path):
    path = tmp_path / "profiles.json"
    controller = GameController.from_settings(EngineSettings(profile_path=path, seed=7))

    async def scenario():
        await controller.start_for_user("ana")
        await _play(controller, correct=10)

    asyncio.run(scenario())

    assert controller.last_result.score == 10
    assert "ana" in path.read_text(encoding="utf-8")
