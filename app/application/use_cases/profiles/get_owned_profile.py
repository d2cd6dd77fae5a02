"""Use case for resolving a profile that belongs to the caller."""

from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Profile
from app.domain.exceptions import ProfileNotFoundError
from app.infrastructure.repositories import ProfileRepository


def get_owned_profile(session: Session, *, owner_user_id: str, profile_id: UUID) -> Profile:
    """Return the profile or raise :class:`ProfileNotFoundError`.

    A profile owned by somebody else is reported exactly like a missing one.
    """

    profile = ProfileRepository(session).get(profile_id)
    if profile is None or not profile.is_owned_by(owner_user_id):
        raise ProfileNotFoundError()
    return profile
