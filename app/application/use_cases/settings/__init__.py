"""Use cases for notification preferences."""

from .resolve_settings import (
    defaults_from_config,
    load_settings_view,
    merge_settings,
    resolve_effective_settings,
)
from .update_settings import update_settings
from .validators import ensure_valid_settings

__all__ = [
    "defaults_from_config",
    "load_settings_view",
    "ensure_valid_settings",
    "merge_settings",
    "resolve_effective_settings",
    "update_settings",
]
