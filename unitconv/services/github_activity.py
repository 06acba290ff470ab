# unitconv/services/github_activity.py
# =============================================================================
# GitHub user activity
#
# - GitHubApiClient: httpx 기반 REST 호출 + 상태 코드 -> GitHubApiError
# - GitHubActivityService: JSON -> GitHubEvent 파싱, 필터/limit
# - format_event(s): 사람이 읽는 한 줄 요약
# =============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from unitconv.core.config import settings
from unitconv.core.exceptions import GitHubApiError, GitHubServiceError
from unitconv.schemas.github import GitHubEvent

USER_EVENTS_ENDPOINT = "/users/{username}/events"
SERVER_ERROR_CODES = (500, 502, 503, 504)


# -----------------------------------------------------------------------------
# HTTP client
# -----------------------------------------------------------------------------
class GitHubApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout_s: Optional[float] = None,
        token: Optional[str] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent or settings.GITHUB_USER_AGENT,
        }
        token = token or settings.GITHUB_TOKEN
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=(base_url or settings.GITHUB_API_BASE_URL).rstrip("/"),
            headers=headers,
            timeout=httpx.Timeout(timeout_s or settings.GITHUB_TIMEOUT_S),
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GitHubApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get_user_events(self, username: str) -> Any:
        """Raw decoded JSON of the user's recent public events."""
        if not username or not username.strip():
            raise ValueError("Username cannot be null or empty.")

        path = USER_EVENTS_ENDPOINT.format(username=username.strip())
        try:
            response = self._client.get(path)
        except httpx.HTTPError as e:
            raise GitHubApiError(
                f"Network error while fetching user events for: {username}"
            ) from e

        return self._handle_response(response, username)

    @staticmethod
    def _handle_response(response: httpx.Response, username: str) -> Any:
        status = response.status_code
        logger.debug(f"GET {response.request.url} -> {status}")

        if status == 200:
            if not response.content.strip():
                return []
            try:
                return response.json()
            except ValueError as e:
                raise GitHubApiError("Failed to parse GitHub API response") from e
        if status == 404:
            raise GitHubApiError(f"User not found: {username}")
        if status == 403:
            if response.headers.get("X-RateLimit-Remaining") == "0":
                raise GitHubApiError("Access forbidden: API rate limit exceeded")
            raise GitHubApiError("Access forbidden")
        if status in SERVER_ERROR_CODES:
            raise GitHubApiError(f"GitHub API server error (status code: {status})")
        raise GitHubApiError(f"Unexpected HTTP status code: {status}")


# -----------------------------------------------------------------------------
# Service
# -----------------------------------------------------------------------------
class GitHubActivityService:
    def __init__(self, client: Optional[GitHubApiClient] = None) -> None:
        self.client = client or GitHubApiClient()

    def get_user_activity(self, username: Optional[str]) -> List[GitHubEvent]:
        if username is None or not username.strip():
            raise GitHubServiceError("Username cannot be null or empty")

        try:
            raw = self.client.get_user_events(username)
        except GitHubApiError as e:
            # 원인 메시지를 포함시켜야 CLI가 "User not found"/"rate limit" 힌트를 줄 수 있다
            raise GitHubServiceError(
                f"Failed to fetch user activity for: {username} ({e.message})"
            ) from e

        return self._parse_events(raw)

    @staticmethod
    def _parse_events(raw: Any) -> List[GitHubEvent]:
        if not raw:
            return []
        if not isinstance(raw, list):
            raise GitHubServiceError("Failed to parse GitHub API response")
        try:
            return [GitHubEvent.model_validate(item) for item in raw]
        except PydanticValidationError as e:
            raise GitHubServiceError("Failed to parse GitHub API response") from e

    @staticmethod
    def filter_events_by_type(
        events: Optional[List[GitHubEvent]], event_type: Optional[str]
    ) -> List[GitHubEvent]:
        if not events or not event_type or not event_type.strip():
            return []
        return [e for e in events if e.type == event_type]

    @staticmethod
    def limit_events(events: Optional[List[GitHubEvent]], limit: int) -> List[GitHubEvent]:
        if not events or limit <= 0:
            return []
        return list(events[:limit])


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------
def _payload_str(payload: Dict[str, Any], key: str, default: str) -> str:
    v = payload.get(key)
    return str(v) if v is not None else default


def format_event(event: GitHubEvent) -> str:
    actor = (event.actor.login if event.actor else None) or "Unknown"
    repo = (event.repo.name if event.repo else None) or "Unknown"
    payload = event.payload or {}
    kind = event.type

    if kind == "PushEvent":
        return f"{actor} pushed {_payload_str(payload, 'size', 'some')} commit(s) to {repo}"
    if kind == "CreateEvent":
        return f"{actor} created {_payload_str(payload, 'ref_type', 'repository')} {repo}"
    if kind == "WatchEvent":
        return f"{actor} starred {repo}"
    if kind == "ForkEvent":
        return f"{actor} forked {repo}"
    if kind == "IssuesEvent":
        return f"{actor} {_payload_str(payload, 'action', 'modified')} an issue in {repo}"
    if kind == "PullRequestEvent":
        return f"{actor} {_payload_str(payload, 'action', 'modified')} a pull request in {repo}"

    action = kind.replace("Event", "").lower()
    return f"{actor} performed {action} action on {repo}"


def format_events(events: List[GitHubEvent]) -> str:
    if not events:
        return "No events to display."

    blocks = []
    for i, event in enumerate(events, start=1):
        blocks.append(
            f"{i}. {format_event(event)}\n"
            f"    Time: {event.created_at or 'Unknown time'}"
        )
    return "\n\n".join(blocks)
