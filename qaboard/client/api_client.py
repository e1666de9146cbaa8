"""
HTTP client for the board API.

Wraps httpx.AsyncClient and converts every outcome, including HTTP errors
and network failures, into an ApiResult instead of raising.

Dependencies: httpx, qaboard.configs
System role: Client-side API boundary
"""

import logging
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

import httpx

from qaboard.configs import get_settings
from qaboard.core.question_status import StatusAction

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."
DEFAULT_ERROR_MESSAGE = "An error occurred"

# Envelope keys reported next to ``data`` by listing endpoints
_META_KEYS = ("count", "total", "page", "pages", "totalQuestions")


@dataclass
class ApiResult:
    """Outcome of one API call."""

    success: bool
    data: Any = None
    message: str | None = None
    errors: list[dict] = field(default_factory=list)
    status: int = 0
    is_network_error: bool = False
    meta: dict[str, int] = field(default_factory=dict)

    @classmethod
    def network_error(cls) -> "ApiResult":
        return cls(success=False, message=NETWORK_ERROR_MESSAGE, is_network_error=True)


class BoardApiClient:
    """
    Async client for every board endpoint.

    Usage:
        async with BoardApiClient() as client:
            result = await client.get_session_questions("VV-7K2Q9A")
            if result.success:
                questions = result.data["questions"]
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root including the version prefix
                (defaults to QABOARD_CLIENT_BASE_URL)
            timeout: Per-request timeout in seconds (defaults to QABOARD_CLIENT_TIMEOUT)
            transport: Custom httpx transport, e.g. for tests
        """
        settings = get_settings().client
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "BoardApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        json: dict | None = None,
        params: dict | None = None,
    ) -> ApiResult:
        try:
            response = await self._client.request(method, url, json=json, params=params)
        except httpx.TransportError as e:
            logger.warning(
                "API request failed",
                extra={"method": method, "url": url, "error_type": type(e).__name__},
            )
            return ApiResult.network_error()

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        meta = {key: body[key] for key in _META_KEYS if key in body}
        if response.is_success:
            return ApiResult(
                success=True,
                data=body.get("data"),
                message=body.get("message"),
                status=response.status_code,
                meta=meta,
            )

        logger.info(
            "API error response",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        return ApiResult(
            success=False,
            data=body.get("data"),
            message=body.get("message") or DEFAULT_ERROR_MESSAGE,
            errors=body.get("errors") or [],
            status=response.status_code,
            meta=meta,
        )

    # Courses

    async def list_courses(self) -> ApiResult:
        return await self._request("GET", "/courses")

    async def get_course(self, course_id: UUID | str) -> ApiResult:
        return await self._request("GET", f"/courses/{course_id}")

    async def create_course(
        self,
        title: str,
        code: str,
        instructor: str,
        description: str | None = None,
    ) -> ApiResult:
        payload = {"title": title, "code": code, "instructor": instructor}
        if description is not None:
            payload["description"] = description
        return await self._request("POST", "/courses", json=payload)

    async def update_course(self, course_id: UUID | str, **fields: Any) -> ApiResult:
        """Send only the given fields (title, code, instructor, description)."""
        return await self._request("PUT", f"/courses/{course_id}", json=fields)

    async def delete_course(self, course_id: UUID | str) -> ApiResult:
        return await self._request("DELETE", f"/courses/{course_id}")

    # Sessions

    async def create_session(self, course_id: UUID | str, instructor: str) -> ApiResult:
        return await self._request(
            "POST",
            "/sessions",
            json={"courseId": str(course_id), "instructor": instructor},
        )

    async def get_session(self, session_id: str) -> ApiResult:
        return await self._request("GET", f"/sessions/{session_id}")

    async def end_session(self, session_id: str) -> ApiResult:
        return await self._request("PUT", f"/sessions/{session_id}/end")

    async def get_course_sessions(
        self,
        course_id: UUID | str,
        status: str = "all",
        page: int = 1,
        limit: int = 10,
    ) -> ApiResult:
        return await self._request(
            "GET",
            f"/sessions/course/{course_id}",
            params={"status": status, "page": page, "limit": limit},
        )

    async def get_active_session(self, course_id: UUID | str) -> ApiResult:
        return await self._request("GET", f"/sessions/course/{course_id}/active")

    # Questions

    async def post_question(self, session_id: str, student_name: str, content: str) -> ApiResult:
        return await self._request(
            "POST",
            "/questions",
            json={"sessionId": session_id, "studentName": student_name, "content": content},
        )

    async def get_session_questions(
        self,
        session_id: str,
        status: str = "all",
        student: str | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> ApiResult:
        params: dict[str, Any] = {"status": status, "page": page, "limit": limit}
        if student:
            params["student"] = student
        return await self._request("GET", f"/questions/session/{session_id}", params=params)

    async def get_questions_by_student(self, session_id: str, status: str = "all") -> ApiResult:
        return await self._request(
            "GET",
            f"/questions/session/{session_id}/by-student",
            params={"status": status},
        )

    async def update_question_status(
        self,
        question_id: UUID | str,
        action: StatusAction | str,
    ) -> ApiResult:
        action = action.value if isinstance(action, StatusAction) else action
        return await self._request(
            "PUT",
            f"/questions/{question_id}/status",
            json={"action": action},
        )

    async def delete_question(self, question_id: UUID | str) -> ApiResult:
        return await self._request("DELETE", f"/questions/{question_id}")

    async def mark_answered(self, question_id: UUID | str) -> ApiResult:
        return await self.update_question_status(question_id, StatusAction.MARK_ANSWERED)

    async def mark_important(self, question_id: UUID | str) -> ApiResult:
        return await self.update_question_status(question_id, StatusAction.MARK_IMPORTANT)

    async def toggle_answered(self, question_id: UUID | str) -> ApiResult:
        return await self.update_question_status(question_id, StatusAction.TOGGLE_ANSWERED)

    async def toggle_important(self, question_id: UUID | str) -> ApiResult:
        return await self.update_question_status(question_id, StatusAction.TOGGLE_IMPORTANT)
