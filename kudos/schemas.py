"""
Name: API Schemas

Responsibilities:
  - Declare request/response models for the HTTP interface
  - Convert domain results into response models (with sender redaction
    already applied by the use cases)

Collaborators:
  - routes.py, streaming.py
  - config.get_settings: request length limits

Notes:
  - Limits are loaded from Settings at module load time for the Pydantic
    schema
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .application.use_cases import RecognitionView
from .config import get_settings
from .domain.entities import Team, TeamAnalytics, Visibility
from .users import User, UserRole

_settings = get_settings()


class UserRes(BaseModel):
    id: str
    email: str
    name: str
    role: UserRole
    team_id: str | None = None


class TeamRes(BaseModel):
    id: str
    name: str
    member_ids: list[str] = Field(default_factory=list)


class UsersListRes(BaseModel):
    users: list[UserRes]


class TeamsListRes(BaseModel):
    teams: list[TeamRes]


class RecognitionRes(BaseModel):
    id: str
    message: str
    emoji: str | None = None
    visibility: Visibility
    is_anonymous: bool
    created_at: datetime
    recipient_id: str
    recipient: UserRes | None = None
    # R: Both sender fields are None when the sender is redacted
    sender_id: str | None = None
    sender: UserRes | None = None


class RecognitionsListRes(BaseModel):
    recognitions: list[RecognitionRes]


class CreateRecognitionRes(RecognitionRes):
    notification: str | None = None


class CreateRecognitionReq(BaseModel):
    recipient_id: str = Field(..., min_length=1, description="Recipient user id")
    message: str = Field(
        ...,
        min_length=1,
        max_length=_settings.max_message_chars,
        description="Appreciation message",
    )
    emoji: str | None = Field(
        default=None,
        max_length=_settings.max_emoji_chars,
        description="Optional single reaction tag",
    )
    visibility: Visibility = Visibility.PUBLIC

    @field_validator("recipient_id", "message")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Trim leading/trailing whitespace."""
        return v.strip()


class UpdateProfileReq(BaseModel):
    name: str | None = Field(default=None, max_length=200)
    team_id: str | None = None


class KeywordCountRes(BaseModel):
    keyword: str
    count: int


class MonthlyCountRes(BaseModel):
    month: str
    label: str
    count: int


class TeamAnalyticsRes(BaseModel):
    team_id: str
    team_name: str
    total_recognitions: int
    top_keywords: list[KeywordCountRes]
    recognitions_by_month: list[MonthlyCountRes]
    most_recognized_user: UserRes | None = None


class OrganizationAnalyticsRes(BaseModel):
    teams: list[TeamAnalyticsRes]


def to_user_res(user: User) -> UserRes:
    return UserRes(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        team_id=user.team_id,
    )


def to_team_res(team: Team, members: list[User]) -> TeamRes:
    return TeamRes(id=team.id, name=team.name, member_ids=[m.id for m in members])


def to_recognition_res(view: RecognitionView) -> RecognitionRes:
    record = view.recognition
    return RecognitionRes(
        id=record.id,
        message=record.message,
        emoji=record.emoji,
        visibility=record.visibility,
        is_anonymous=record.is_anonymous,
        created_at=record.created_at,
        recipient_id=record.recipient_id,
        recipient=to_user_res(view.recipient) if view.recipient else None,
        sender_id=view.sender.id if view.sender else None,
        sender=to_user_res(view.sender) if view.sender else None,
    )


def to_team_analytics_res(analytics: TeamAnalytics) -> TeamAnalyticsRes:
    return TeamAnalyticsRes(
        team_id=analytics.team_id,
        team_name=analytics.team_name,
        total_recognitions=analytics.total_recognitions,
        top_keywords=[
            KeywordCountRes(keyword=k.keyword, count=k.count)
            for k in analytics.top_keywords
        ],
        recognitions_by_month=[
            MonthlyCountRes(month=m.month, label=m.label, count=m.count)
            for m in analytics.recognitions_by_month
        ],
        most_recognized_user=(
            to_user_res(analytics.most_recognized_user)
            if analytics.most_recognized_user
            else None
        ),
    )
