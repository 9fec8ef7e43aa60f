"""Profile aggregate root.

Each user owns at most one profile. Experience and education entries are
ordered newest first and only change by saving the whole profile.
"""

from datetime import date, datetime

from pydantic import ConfigDict, Field

from connector.domain.model.common import DomainModel
from connector.domain.value import (
    EducationId,
    ExperienceId,
    ProfileId,
    SocialLinks,
    UserId,
)


class Experience(DomainModel):
    """Work experience entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: ExperienceId
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class Education(DomainModel):
    """Education entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: EducationId
    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    fieldofstudy: str = Field(min_length=1)
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class Profile(DomainModel):
    """Profile aggregate root."""

    id: ProfileId
    user_id: UserId
    status: str = Field(min_length=1)
    skills: tuple[str, ...] = Field(min_length=1)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    social: SocialLinks = SocialLinks()
    experience: tuple[Experience, ...] = ()
    education: tuple[Education, ...] = ()
    date: datetime = Field(default_factory=datetime.now)
