"""Unit tests for ProfileService."""

from datetime import date
from uuid import uuid4

import pytest

from connector.domain.error import EntryNotFoundError, NotFoundError
from connector.domain.model.profile import Education, Experience
from connector.domain.repository import ProfileRepository
from connector.domain.service import ProfileService
from connector.domain.value import EducationId, ExperienceId, SocialLinks
from tests.factories import make_profile, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _experience(title: str) -> Experience:
    return Experience(
        id=ExperienceId(uuid4()),
        title=title,
        company="Acme",
        from_date=date(2020, 1, 1),
    )


def _education(school: str) -> Education:
    return Education(
        id=EducationId(uuid4()),
        school=school,
        degree="BSc",
        fieldofstudy="Computer Science",
        from_date=date(2015, 9, 1),
        to_date=date(2019, 6, 30),
    )


class TestUpsertProfile:
    """Tests for upsert_profile method."""

    @pytest.mark.asyncio
    async def test_creates_profile(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        owner = make_user()

        # Act
        profile = await profile_service.upsert_profile(
            user_id=owner.id,
            status="Developer",
            skills=("python",),
            social=SocialLinks(twitter="https://twitter.com/alice"),
        )

        # Assert
        assert profile.user_id == owner.id
        assert profile.social.twitter == "https://twitter.com/alice"
        assert await profile_service.get_profile_by_user(owner.id) == profile

    @pytest.mark.asyncio
    async def test_update_keeps_id_and_entries(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = make_user()
        original = await profile_repo.save(make_profile(owner))
        await profile_service.add_experience(owner.id, _experience("Engineer"))

        # Act
        updated = await profile_service.upsert_profile(
            user_id=owner.id, status="Lead", skills=("go", "rust")
        )

        # Assert
        assert updated.id == original.id
        assert updated.status == "Lead"
        assert updated.skills == ("go", "rust")
        assert [e.title for e in updated.experience] == ["Engineer"]

    @pytest.mark.asyncio
    async def test_missing_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError, match="Profile not found"):
            await profile_service.get_profile_by_user(make_user().id)


class TestExperience:
    """Tests for experience entries."""

    @pytest.mark.asyncio
    async def test_newest_entry_first(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = make_user()
        await profile_repo.save(make_profile(owner))

        # Act
        await profile_service.add_experience(owner.id, _experience("E1"))
        profile = await profile_service.add_experience(owner.id, _experience("E2"))

        # Assert
        assert [e.title for e in profile.experience] == ["E2", "E1"]

    @pytest.mark.asyncio
    async def test_delete_experience(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = make_user()
        await profile_repo.save(make_profile(owner))
        keep, drop = _experience("keep"), _experience("drop")
        await profile_service.add_experience(owner.id, keep)
        await profile_service.add_experience(owner.id, drop)

        # Act
        profile = await profile_service.delete_experience(owner.id, drop.id)

        # Assert
        assert profile.experience == (keep,)

    @pytest.mark.asyncio
    async def test_add_without_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.add_experience(make_user().id, _experience("E1"))

    @pytest.mark.asyncio
    async def test_delete_unknown_entry(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = make_user()
        await profile_repo.save(make_profile(owner))

        # Act & Assert
        with pytest.raises(EntryNotFoundError, match="Experience does not exist"):
            await profile_service.delete_experience(owner.id, ExperienceId(uuid4()))


class TestEducation:
    """Tests for education entries."""

    @pytest.mark.asyncio
    async def test_add_and_delete(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        owner = make_user()
        await profile_repo.save(make_profile(owner))
        entry = _education("MIT")

        # Act
        added = await profile_service.add_education(owner.id, entry)
        removed = await profile_service.delete_education(owner.id, entry.id)

        # Assert
        assert added.education == (entry,)
        assert removed.education == ()

    @pytest.mark.asyncio
    async def test_entries_are_scoped_to_caller_profile(self, unit_env):
        """Another user's entry id is not found in the caller's profile."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        alice, bob = make_user("Alice"), make_user("Bob")
        await profile_repo.save(make_profile(alice))
        await profile_repo.save(make_profile(bob))
        entry = _education("MIT")
        await profile_service.add_education(alice.id, entry)

        # Act & Assert
        with pytest.raises(EntryNotFoundError):
            await profile_service.delete_education(bob.id, entry.id)

        alice_profile = await profile_service.get_profile_by_user(alice.id)
        assert alice_profile.education == (entry,)
