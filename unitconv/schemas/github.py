# unitconv/schemas/github.py
# GitHub Events API (GET /users/{username}/events) 응답 모델

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, model_validator

from .common import AppBaseModel


# =============================================================================
# Helpers: Treat explicit null as "missing"
# =============================================================================
def _drop_none(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: v for k, v in obj.items() if v is not None}
    return obj


class GitHubActor(AppBaseModel):
    id: Optional[int] = None
    login: Optional[str] = None
    display_login: Optional[str] = None
    gravatar_id: Optional[str] = None
    url: Optional[str] = None
    avatar_url: Optional[str] = None


class GitHubRepo(AppBaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None


class GitHubEvent(AppBaseModel):
    @model_validator(mode="before")
    @classmethod
    def _strip_nulls(cls, data: Any) -> Any:
        return _drop_none(data)

    id: Optional[str] = None
    type: str = "UnknownEvent"
    actor: Optional[GitHubActor] = None
    repo: Optional[GitHubRepo] = None
    payload: Dict[str, Any] = Field(default_factory=dict)
    is_public: bool = Field(default=False, alias="public")
    created_at: Optional[str] = None
