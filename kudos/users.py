"""
Name: User Models

Responsibilities:
  - Define user roles and the user entity used by access decisions
  - Keep identity data shapes centralized
"""

from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    """R: Supported user roles for feed authorization."""

    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"


@dataclass
class User:
    """
    R: Directory user. Role and team are mutable through profile updates.

    Attributes:
        id: Unique user identifier
        email: Contact email
        name: Display name
        role: EMPLOYEE / MANAGER / ADMIN
        team_id: Team reference (None for org-level users such as admins)
    """

    id: str
    email: str
    name: str
    role: UserRole
    team_id: str | None = None
