from .notification import (
    GenerateRequest,
    GenerateResponse,
    InboxListResponse,
    MarkReadResponse,
    NotificationMarkAllReadRequest,
    NotificationMarkReadRequest,
    NotificationRead,
    UnreadCountResponse,
)
from .settings import SettingsRead, SettingsResponse, SettingsUpdate

__all__ = [
    "GenerateRequest",
    "GenerateResponse",
    "InboxListResponse",
    "MarkReadResponse",
    "NotificationMarkAllReadRequest",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "SettingsRead",
    "SettingsResponse",
    "SettingsUpdate",
    "UnreadCountResponse",
]
