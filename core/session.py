"""
session.py

The play-through state machine.

    ready --start_game--> playing --last answer--> finalizing --saved--> ready
                             |                         |
                             +------exit_game----------+ (only after a failed save)

One `GameController` drives one player's sessions. Question generation is
synchronous; the only awaits are the optional transition delay between
questions and the profile store commit. Nothing reaches the store before the
last answer is in, so exiting a game never leaves a partial result behind.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple

from core.errors import PersistenceFailure, SessionStateError
from core.exp_economy import apply_boost, calculate_exp_gained
from core.ledger import calculate_score_difference, ledger_key, score_percentage, update_ledger_entry
from core.levels import get_question_count
from core.progression import evaluate_session
from core.settings import EngineSettings, load_settings
from core.streak import update_play_streak
from generators.registry import generate_validated_question
from generators.strategy import clamp_level
from schemas.profile import ProfileUpdate, UserProfile
from schemas.question import Question
from schemas.results import AnswerRecord, SessionResult
from store.profile_store import ProfileStore, build_profile_store
from validators.answer_validator import AnswerValidator

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    READY = "ready"
    PLAYING = "playing"
    FINALIZING = "finalizing"


@dataclass
class GameSession:
    """Mutable state of one play-through. Owned by exactly one controller."""

    profile: UserProfile
    grade: str
    level: int
    is_practice: bool
    total_questions: int
    boost_multipliers: Tuple[float, ...] = ()
    question_index: int = 0
    score: int = 0
    answers: List[AnswerRecord] = field(default_factory=list)
    current_question: Optional[Question] = None
    question_started: float = 0.0
    started_at: datetime = field(default_factory=lambda: datetime.now().astimezone())
    submitting: bool = False

    @property
    def boost_multiplier(self) -> float:
        return max(self.boost_multipliers, default=1.0)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class GameController:
    """
    Runs sessions for one player context.

    `submit_answer` is single-flight: a call made while another is still
    running (waiting out the transition delay or the store commit) is
    ignored and returns None.
    """

    def __init__(
        self,
        store: ProfileStore,
        *,
        settings: Optional[EngineSettings] = None,
        rng: Optional[random.Random] = None,
        validator: Optional[AnswerValidator] = None,
        clock: Callable[[], datetime] = _local_now,
    ):
        self._settings = settings or EngineSettings()
        self._store = store
        self._rng = rng or random.Random(self._settings.seed)
        self._validator = validator or AnswerValidator()
        self._clock = clock
        self._state = SessionState.READY
        self._session: Optional[GameSession] = None
        self._pending: Optional[Tuple[SessionResult, ProfileUpdate]] = None
        self._result: Optional[SessionResult] = None

    @classmethod
    def from_settings(cls, settings: Optional[EngineSettings] = None) -> "GameController":
        """Builds a controller over the store `settings.profile_path` points at."""

        settings = settings or load_settings()
        return cls(build_profile_store(settings), settings=settings)

    # ------------------------------------------------------------------ #
    # Read-only views
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def current_question(self) -> Optional[Question]:
        if self._session is None or self._state is not SessionState.PLAYING:
            return None
        return self._session.current_question

    @property
    def last_result(self) -> Optional[SessionResult]:
        """Result of the most recently committed session."""

        return self._result

    @property
    def pending_result(self) -> Optional[SessionResult]:
        """Result computed but not yet saved, after a PersistenceFailure."""

        return self._pending[0] if self._pending else None

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #

    def start_game(
        self,
        profile: UserProfile,
        effective_level: Optional[int] = None,
        boost_multipliers: Iterable[float] = (),
    ) -> Question:
        """
        ready -> playing. `effective_level` replays another level of the
        player's grade; when it differs from the stored level the session is
        practice and its progression is reported but never saved.
        """

        if self._state is not SessionState.READY:
            raise SessionStateError(f"Cannot start a game while {self._state.value}.")

        level = clamp_level(effective_level if effective_level is not None else profile.level)
        session = GameSession(
            profile=profile,
            grade=profile.grade,
            level=level,
            is_practice=level != profile.level,
            total_questions=get_question_count(profile.grade),
            boost_multipliers=tuple(boost_multipliers),
            started_at=self._clock(),
        )
        self._session = session
        self._result = None
        self._pending = None
        self._state = SessionState.PLAYING
        self._serve_next_question(session)

        logger.info(
            "Started %s level %s for %r (%s questions%s)",
            session.grade,
            session.level,
            profile.user_id,
            session.total_questions,
            ", practice" if session.is_practice else "",
        )
        return session.current_question

    async def start_for_user(
        self,
        user_id: str,
        effective_level: Optional[int] = None,
        boost_multipliers: Iterable[float] = (),
    ) -> Question:
        profile = await self._store.load_profile(user_id)
        return self.start_game(profile, effective_level, boost_multipliers)

    async def submit_answer(
        self,
        user_answer: Any,
        time_spent_seconds: Optional[float] = None,
    ) -> Optional[AnswerRecord]:
        """
        Records an answer to the current question and moves on. Returns the
        record, or None when the call was ignored: another submission was
        in flight, or the game was exited during the transition delay.

        Raises SessionStateError outside `playing` and PersistenceFailure when
        the final commit fails.
        """

        session = self._session
        if session is not None and session.submitting:
            logger.debug("Ignoring a submission while another is in flight.")
            return None
        if session is None or self._state is not SessionState.PLAYING:
            raise SessionStateError(f"Cannot submit an answer while {self._state.value}.")

        session.submitting = True
        try:
            record = self._record_answer(session, user_answer, time_spent_seconds)
            if session.question_index < session.total_questions:
                if self._settings.transition_delay > 0:
                    await asyncio.sleep(self._settings.transition_delay)
                if self._session is not session:
                    logger.debug("Session exited during the transition delay.")
                    return None
                self._serve_next_question(session)
                return record

            self._state = SessionState.FINALIZING
            self._pending = self._build_result(session)
            await self._commit(session)
            return record
        finally:
            session.submitting = False

    async def retry_finalize(self) -> SessionResult:
        """Re-attempts the commit that failed, reusing the computed update."""

        session = self._session
        if self._state is not SessionState.FINALIZING or session is None or self._pending is None:
            raise SessionStateError("There is no failed result to retry.")
        if session.submitting:
            raise SessionStateError("A save is already in progress.")

        session.submitting = True
        try:
            return await self._commit(session)
        finally:
            session.submitting = False

    def exit_game(self) -> bool:
        """
        Discards the current session without saving anything. Allowed while
        playing and after a failed save; returns False when idle.
        """

        session = self._session
        if session is None or self._state is SessionState.READY:
            return False
        if self._state is SessionState.FINALIZING and session.submitting:
            raise SessionStateError("Cannot exit while the result is being saved.")

        logger.info(
            "Exited %s level %s after %s of %s questions",
            session.grade,
            session.level,
            session.question_index,
            session.total_questions,
        )
        self._session = None
        self._pending = None
        self._state = SessionState.READY
        return True

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _serve_next_question(self, session: GameSession) -> None:
        session.current_question = generate_validated_question(session.grade, session.level, self._rng)
        session.question_started = time.monotonic()
        logger.debug(
            "Question %s/%s: %s",
            session.question_index + 1,
            session.total_questions,
            session.current_question.prompt,
        )

    def _record_answer(
        self,
        session: GameSession,
        user_answer: Any,
        time_spent_seconds: Optional[float],
    ) -> AnswerRecord:
        question = session.current_question
        if time_spent_seconds is None:
            time_spent_seconds = time.monotonic() - session.question_started
        is_correct = self._validator.is_correct(question.answer, user_answer)

        if user_answer is not None and not isinstance(user_answer, (int, str)):
            user_answer = str(user_answer)
        record = AnswerRecord(
            question=question,
            user_answer=user_answer,
            is_correct=is_correct,
            time_spent_seconds=max(0.0, time_spent_seconds),
        )
        session.answers.append(record)
        session.question_index += 1
        if is_correct:
            session.score += 1
        return record

    def _build_result(self, session: GameSession) -> Tuple[SessionResult, ProfileUpdate]:
        profile = session.profile
        finished_at = self._clock()
        percentage = score_percentage(session.score, session.total_questions)

        key = ledger_key(session.grade, session.level)
        prior = profile.level_scores.get(key)
        difference = calculate_score_difference(prior.high_score if prior else 0, session.score)
        entry = update_ledger_entry(prior, session.score, finished_at)

        progression = evaluate_session(session.grade, session.level, percentage)
        if session.is_practice:
            progression = progression.model_copy(update={"applied": False})

        streak = update_play_streak(profile.last_played_at, profile.play_streak, finished_at)
        exp = calculate_exp_gained(
            score=session.score,
            total_questions=session.total_questions,
            percentage=percentage,
            level=session.level,
            play_streak_days=streak.play_streak,
            is_first_session_today=streak.is_first_today,
            play_count_for_level=entry.play_count,
        )
        awarded = apply_boost(exp.total, session.boost_multipliers)

        update = ProfileUpdate(
            experience_gained=awarded,
            score_gained=difference.score_diff,
            ledger_key=key,
            ledger_entry=entry,
            play_streak=streak.play_streak,
            last_played_at=finished_at,
            grade=progression.new_grade if progression.applied else None,
            level=progression.new_level if progression.applied else None,
        )
        result = SessionResult(
            grade=session.grade,
            level=session.level,
            is_practice=session.is_practice,
            score=session.score,
            total_questions=session.total_questions,
            percentage=percentage,
            score_difference=difference,
            progression=progression,
            streak=streak,
            exp=exp,
            boost_multiplier=session.boost_multiplier,
            exp_awarded=awarded,
            answers=list(session.answers),
            started_at=session.started_at,
            finished_at=finished_at,
        )
        return result, update

    async def _commit(self, session: GameSession) -> SessionResult:
        result, update = self._pending
        try:
            await self._store.apply_session_result(session.profile.user_id, update)
        except Exception as exc:
            logger.error("Saving the %s level %s result failed: %s", session.grade, session.level, exc)
            raise PersistenceFailure(f"Could not save the session result: {exc}") from exc

        logger.info(
            "Finished %s level %s: %s/%s (%s%%), %s EXP, progression %s%s",
            session.grade,
            session.level,
            result.score,
            result.total_questions,
            result.percentage,
            result.exp_awarded,
            result.progression.direction,
            "" if result.progression.applied else " (not applied)",
        )
        self._result = result
        self._pending = None
        self._session = None
        self._state = SessionState.READY
        return result
