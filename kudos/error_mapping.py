"""
Name: Feed Error Mapping

Responsibilities:
  - Translate FeedError results from use cases into HTTP exceptions
  - Keep the RFC 7807 contract via error_responses factories
"""

from __future__ import annotations

from typing import NoReturn

from .application.use_cases import FeedError, FeedErrorCode
from .error_responses import forbidden, not_found, unauthorized, validation_error


def raise_feed_error(error: FeedError) -> NoReturn:
    if error.code == FeedErrorCode.UNAUTHENTICATED:
        raise unauthorized(error.message)
    if error.code == FeedErrorCode.FORBIDDEN:
        raise forbidden(error.message)
    if error.code == FeedErrorCode.NOT_FOUND:
        raise not_found(error.message)
    raise validation_error(error.message)
