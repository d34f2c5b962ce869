"""
Name: Feed API Controllers

Responsibilities:
  - Expose HTTP endpoints for the directory, recognitions and analytics
  - Delegate business logic to application use cases
  - Validate requests and serialize responses using Pydantic models
  - Stream live recognitions via Server-Sent Events

Collaborators:
  - application.use_cases: feed use cases
  - container: use case factories
  - auth.require_user: caller identity
  - error_mapping.raise_feed_error: FeedError -> RFC 7807
  - streaming: SSE handler

Notes:
  - This module stays thin (controllers only)
"""

from fastapi import APIRouter, Depends, Query, Request

from .application.use_cases import (
    CreateRecognitionInput,
    CreateRecognitionUseCase,
    GetOrganizationAnalyticsUseCase,
    GetTeamAnalyticsUseCase,
    ListRecognitionsUseCase,
    ListTeamsUseCase,
    ListUsersUseCase,
    SubscribeRecognitionsUseCase,
    UpdateProfileInput,
    UpdateProfileUseCase,
)
from .auth import require_user
from .container import (
    get_create_recognition_use_case,
    get_list_recognitions_use_case,
    get_list_teams_use_case,
    get_list_users_use_case,
    get_organization_analytics_use_case,
    get_subscribe_recognitions_use_case,
    get_team_analytics_use_case,
    get_update_profile_use_case,
)
from .domain.entities import RecognitionFilter, Visibility
from .error_mapping import raise_feed_error
from .error_responses import OPENAPI_ERROR_RESPONSES
from .schemas import (
    CreateRecognitionReq,
    CreateRecognitionRes,
    OrganizationAnalyticsRes,
    RecognitionsListRes,
    TeamAnalyticsRes,
    TeamsListRes,
    UpdateProfileReq,
    UserRes,
    UsersListRes,
    to_recognition_res,
    to_team_analytics_res,
    to_team_res,
    to_user_res,
)
from .streaming import stream_recognitions
from .users import User

# R: Create API router for feed endpoints
router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)


# =========================================================
# Directory
# =========================================================
@router.get("/me", response_model=UserRes, tags=["directory"])
def get_me(viewer: User = Depends(require_user)):
    return to_user_res(viewer)


@router.patch("/me", response_model=UserRes, tags=["directory"])
def update_me(
    req: UpdateProfileReq,
    viewer: User = Depends(require_user),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
):
    result = use_case.execute(
        viewer, UpdateProfileInput(name=req.name, team_id=req.team_id)
    )
    if result.error:
        raise_feed_error(result.error)
    return to_user_res(result.user)


@router.get("/users", response_model=UsersListRes, tags=["directory"])
def list_users(
    team_id: str | None = Query(default=None),
    viewer: User = Depends(require_user),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute(viewer, team_id=team_id)
    if result.error:
        raise_feed_error(result.error)
    return UsersListRes(users=[to_user_res(user) for user in result.users])


@router.get("/teams", response_model=TeamsListRes, tags=["directory"])
def list_teams(
    viewer: User = Depends(require_user),
    use_case: ListTeamsUseCase = Depends(get_list_teams_use_case),
    users_use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute(viewer)
    if result.error:
        raise_feed_error(result.error)
    return TeamsListRes(
        teams=[
            to_team_res(team, users_use_case.execute(viewer, team_id=team.id).users)
            for team in result.teams
        ]
    )


# =========================================================
# Recognitions
# =========================================================
@router.get("/recognitions", response_model=RecognitionsListRes, tags=["recognitions"])
def list_recognitions(
    team_id: str | None = Query(default=None),
    visibility: Visibility | None = Query(default=None),
    recipient_id: str | None = Query(default=None),
    sender_id: str | None = Query(default=None),
    viewer: User = Depends(require_user),
    use_case: ListRecognitionsUseCase = Depends(get_list_recognitions_use_case),
):
    criteria = RecognitionFilter(
        team_id=team_id,
        visibility=visibility,
        recipient_id=recipient_id,
        sender_id=sender_id,
    )
    result = use_case.execute(viewer, criteria)
    if result.error:
        raise_feed_error(result.error)
    return RecognitionsListRes(
        recognitions=[to_recognition_res(view) for view in result.recognitions]
    )


@router.get(
    "/recognitions/mine", response_model=RecognitionsListRes, tags=["recognitions"]
)
def list_my_recognitions(
    viewer: User = Depends(require_user),
    use_case: ListRecognitionsUseCase = Depends(get_list_recognitions_use_case),
):
    result = use_case.execute_mine(viewer)
    if result.error:
        raise_feed_error(result.error)
    return RecognitionsListRes(
        recognitions=[to_recognition_res(view) for view in result.recognitions]
    )


@router.post(
    "/recognitions",
    response_model=CreateRecognitionRes,
    status_code=201,
    tags=["recognitions"],
)
async def create_recognition(
    req: CreateRecognitionReq,
    viewer: User = Depends(require_user),
    use_case: CreateRecognitionUseCase = Depends(get_create_recognition_use_case),
):
    result = await use_case.execute(
        viewer,
        CreateRecognitionInput(
            recipient_id=req.recipient_id,
            message=req.message,
            visibility=req.visibility,
            emoji=req.emoji,
        ),
    )
    if result.error:
        raise_feed_error(result.error)
    return CreateRecognitionRes(
        **to_recognition_res(result.recognition).model_dump(),
        notification=result.notification,
    )


# =========================================================
# Analytics
# =========================================================
@router.get(
    "/analytics/teams/{team_id}", response_model=TeamAnalyticsRes, tags=["analytics"]
)
def get_team_analytics(
    team_id: str,
    viewer: User = Depends(require_user),
    use_case: GetTeamAnalyticsUseCase = Depends(get_team_analytics_use_case),
):
    result = use_case.execute(viewer, team_id)
    if result.error:
        raise_feed_error(result.error)
    return to_team_analytics_res(result.analytics)


@router.get(
    "/analytics/organization",
    response_model=OrganizationAnalyticsRes,
    tags=["analytics"],
)
def get_organization_analytics(
    viewer: User = Depends(require_user),
    use_case: GetOrganizationAnalyticsUseCase = Depends(
        get_organization_analytics_use_case
    ),
):
    result = use_case.execute(viewer)
    if result.error:
        raise_feed_error(result.error)
    return OrganizationAnalyticsRes(
        teams=[to_team_analytics_res(snapshot) for snapshot in result.analytics]
    )


# =========================================================
# Live subscriptions (SSE)
# =========================================================
@router.get("/subscriptions/users/{user_id}", tags=["subscriptions"])
async def subscribe_recognitions_for_user(
    user_id: str,
    request: Request,
    viewer: User = Depends(require_user),
    use_case: SubscribeRecognitionsUseCase = Depends(
        get_subscribe_recognitions_use_case
    ),
):
    result = use_case.for_recipient(viewer, user_id)
    if result.error:
        raise_feed_error(result.error)
    return stream_recognitions(result.topic, viewer, use_case, request)


@router.get("/subscriptions/teams/{team_id}", tags=["subscriptions"])
async def subscribe_team_feed(
    team_id: str,
    request: Request,
    viewer: User = Depends(require_user),
    use_case: SubscribeRecognitionsUseCase = Depends(
        get_subscribe_recognitions_use_case
    ),
):
    result = use_case.for_team(viewer, team_id)
    if result.error:
        raise_feed_error(result.error)
    return stream_recognitions(result.topic, viewer, use_case, request)
