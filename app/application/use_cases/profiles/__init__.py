"""Use cases for profile access control."""

from .get_owned_profile import get_owned_profile

__all__ = ["get_owned_profile"]
