"""
Name: Caller Identity Resolution

Responsibilities:
  - Extract the caller id from X-User-Id or Authorization: Bearer <id>
  - Resolve it to a directory user through ResolveCallerUseCase
  - Record the caller in the request context for logging

Collaborators:
  - application.use_cases.ResolveCallerUseCase
  - container.get_resolve_caller_use_case
  - exceptions.AuthenticationError (mapped to 401)

Constraints:
  - Identity issuance is out of scope: the header value IS the user id
  - X-User-Id wins when both headers are present
"""

from __future__ import annotations

from fastapi import Depends, Header

from .application.use_cases import ResolveCallerUseCase
from .container import get_resolve_caller_use_case
from .context import user_id_var
from .exceptions import AuthenticationError
from .users import User


def _extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


def extract_caller_id(
    x_user_id: str | None, authorization: str | None
) -> str | None:
    """R: Resolve the raw caller id from request headers."""
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return _extract_bearer_token(authorization)


async def require_user(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    authorization: str | None = Header(default=None),
    use_case: ResolveCallerUseCase = Depends(get_resolve_caller_use_case),
) -> User:
    """R: FastAPI dependency that requires a resolvable caller."""
    result = use_case.execute(extract_caller_id(x_user_id, authorization))
    if result.error is not None or result.user is None:
        message = result.error.message if result.error else "Authentication required"
        raise AuthenticationError(message)

    user_id_var.set(result.user.id)
    return result.user
