"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from connector.domain.value.common import RootValueObject, ValueObject


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate a plausible email shape and normalize case."""
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Please include a valid email")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v


class Skills(RootValueObject[tuple[str, ...]]):
    """Ordered list of profile skills."""

    @classmethod
    def parse(cls, raw: str) -> "Skills":
        """Build skills from a comma-separated string.

        Examples:
            >>> Skills.parse("python, sql ,docker").root
            ('python', 'sql', 'docker')
        """
        return cls(tuple(item.strip() for item in raw.split(",") if item.strip()))


class SocialLinks(ValueObject):
    """Links to a user's social network profiles."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None
