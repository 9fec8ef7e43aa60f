"""User aggregate root.

Users register with an email and password and are identified by a UUID in
session tokens.
"""

from datetime import datetime

from pydantic import Field

from connector.domain.model.common import DomainModel
from connector.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Email
    password_hash: str
    avatar: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
