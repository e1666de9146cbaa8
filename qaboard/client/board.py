"""
Board controller.

Binds a BoardApiClient to an AppState: polls the current session's
questions and applies the results of student and instructor actions.

Dependencies: asyncio, qaboard.client
System role: Client-side orchestration and polling loop
"""

import asyncio
import logging

from qaboard.client.api_client import ApiResult, BoardApiClient
from qaboard.client.cards import QuestionCard
from qaboard.client.state import AppState
from qaboard.client.validators import validate_question_content, validate_student_name
from qaboard.configs import get_settings
from qaboard.core.question_status import StatusAction

logger = logging.getLogger(__name__)


class QuestionBoard:
    """Controller for one client's view of a session board."""

    def __init__(
        self,
        client: BoardApiClient,
        state: AppState,
        poll_interval: float | None = None,
    ) -> None:
        """
        Args:
            client: API client
            state: Application state, mutated in place
            poll_interval: Seconds between refreshes (defaults to QABOARD_CLIENT_POLL_INTERVAL)
        """
        self.client = client
        self.state = state
        self.poll_interval = poll_interval or get_settings().client.poll_interval

    @property
    def session_id(self) -> str | None:
        session = self.state.current_session
        return session.get("sessionId") if session else None

    def cards(self) -> list[QuestionCard]:
        return [QuestionCard.from_api(q) for q in self.state.questions]

    def _fail(self, result: ApiResult) -> ApiResult:
        self.state.set_error(result.message)
        if result.is_network_error:
            self.state.set_online_status(False)
        return result

    async def refresh(self) -> bool:
        """
        Poll the current session once using the state's filters.

        Returns:
            bool: True if the board was updated
        """
        session_id = self.session_id
        if session_id is None:
            return False

        filters = self.state.filters
        result = await self.client.get_session_questions(
            session_id,
            status=filters.status.value,
            student=filters.student or None,
        )
        if not result.success:
            self._fail(result)
            return False

        data = result.data or {}
        self.state.set_online_status(True)
        self.state.set_questions(data.get("questions", []))
        self.state.set_questions_by_student(data.get("groupedByStudent", {}))
        self.state.session_snapshot = data.get("session")
        return True

    async def post_question(self, content: str) -> ApiResult:
        """Post a question as the state's student to the current session."""
        error = (
            validate_student_name(self.state.student_name)
            or validate_question_content(content)
        )
        if error is None and self.session_id is None:
            error = "Join a session before posting"
        if error:
            return self._fail(ApiResult(success=False, message=error))

        self.state.set_loading(True)
        result = await self.client.post_question(
            self.session_id,
            self.state.student_name.strip(),
            content.strip(),
        )
        if not result.success:
            return self._fail(result)

        self.state.add_question(result.data)
        self.state.set_success(result.message)
        return result

    async def change_status(self, question_id: str, action: StatusAction | str) -> ApiResult:
        result = await self.client.update_question_status(question_id, action)
        if not result.success:
            return self._fail(result)
        self.state.update_question(result.data)
        return result

    async def delete_question(self, question_id: str) -> ApiResult:
        result = await self.client.delete_question(question_id)
        if not result.success:
            return self._fail(result)
        self.state.remove_question(question_id)
        self.state.set_success(result.message)
        return result

    async def end_session(self) -> ApiResult:
        if self.session_id is None:
            return self._fail(ApiResult(success=False, message="No session selected"))

        result = await self.client.end_session(self.session_id)
        if not result.success:
            return self._fail(result)
        self.state.update_current_session(result.data)
        self.state.set_success(result.message)
        return result

    async def run_polling(self, stop_event: asyncio.Event) -> int:
        """
        Refresh on a fixed interval until ``stop_event`` is set.

        Returns:
            int: Number of refreshes performed
        """
        polls = 0
        logger.info("Polling started", extra={"session_code": self.session_id, "interval": self.poll_interval})
        while not stop_event.is_set():
            await self.refresh()
            polls += 1
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.poll_interval)
            except asyncio.TimeoutError:
                continue
        logger.info("Polling stopped", extra={"session_code": self.session_id, "polls": polls})
        return polls
