"""Utility script to create a profile and print an access token for its owner."""

from __future__ import annotations

import argparse
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities import Profile
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.repositories import ProfileRepository
from app.infrastructure.security import create_owner_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for profile creation."""

    parser = argparse.ArgumentParser(
        description="Create a health profile for local development of the inbox API.",
    )
    parser.add_argument(
        "--owner",
        required=True,
        help="Owner user id the profile belongs to (token subject)",
    )
    parser.add_argument(
        "--name",
        default="Me",
        help="Display name of the profile (default: Me)",
    )
    parser.add_argument(
        "--type",
        default="owner",
        choices=["owner", "guest"],
        help="Profile type (default: owner)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a profile using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        profile = ProfileRepository(session).create(
            Profile(id=uuid4(), owner_user_id=args.owner, name=args.name, type=args.type)
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the profile: {exc}") from exc
    else:
        print(
            "Profile created:\n"
            f"  ID: {profile.id}\n"
            f"  Owner: {profile.owner_user_id}\n"
            f"  Name: {profile.name}\n"
            f"  Token: {create_owner_token(profile.owner_user_id)}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
