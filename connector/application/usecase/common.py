"""Response models shared by several use cases.

Nested entries are returned newest first, exactly as stored on their
aggregate.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from connector.domain.model import (
    Comment,
    Education,
    Experience,
    Like,
    Post,
    Profile,
    User,
)


class LikeView(BaseModel):
    """Like entry as returned by the API."""

    user_id: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeView":
        return cls(user_id=str(like.user_id))


class CommentView(BaseModel):
    """Comment entry as returned by the API."""

    id: str
    user_id: str
    text: str
    name: str
    avatar: str | None
    date: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            user_id=str(comment.user_id),
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            date=comment.date,
        )


class PostView(BaseModel):
    """Post with its likes and comments."""

    id: str
    user_id: str
    text: str
    name: str
    avatar: str | None
    likes: list[LikeView]
    comments: list[CommentView]
    date: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            user_id=str(post.user_id),
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[LikeView.from_domain(like) for like in post.likes],
            comments=[CommentView.from_domain(c) for c in post.comments],
            date=post.date,
        )


class ExperienceView(BaseModel):
    """Experience entry; dates are serialized as ``from`` / ``to``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: str | None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, entry: Experience) -> "ExperienceView":
        return cls(
            id=str(entry.id),
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationView(BaseModel):
    """Education entry; dates are serialized as ``from`` / ``to``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, entry: Education) -> "EducationView":
        return cls(
            id=str(entry.id),
            school=entry.school,
            degree=entry.degree,
            fieldofstudy=entry.fieldofstudy,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileOwner(BaseModel):
    """Public fields of a profile's owner."""

    id: str
    name: str | None
    avatar: str | None


class SocialView(BaseModel):
    """Social network links."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileView(BaseModel):
    """Profile with owner information and nested entries."""

    id: str
    user: ProfileOwner
    status: str
    skills: list[str]
    company: str | None
    website: str | None
    location: str | None
    bio: str | None
    githubusername: str | None
    social: SocialView
    experience: list[ExperienceView]
    education: list[EducationView]
    date: datetime

    @classmethod
    def from_domain(cls, profile: Profile, owner: User | None = None) -> "ProfileView":
        """Build the view; ``owner`` is None when the user no longer exists."""
        return cls(
            id=str(profile.id),
            user=ProfileOwner(
                id=str(profile.user_id),
                name=owner.name if owner else None,
                avatar=owner.avatar if owner else None,
            ),
            status=profile.status,
            skills=list(profile.skills),
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            githubusername=profile.githubusername,
            social=SocialView(**profile.social.model_dump()),
            experience=[ExperienceView.from_domain(e) for e in profile.experience],
            education=[EducationView.from_domain(e) for e in profile.education],
            date=profile.date,
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    msg: str
