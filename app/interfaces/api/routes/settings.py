"""Endpoints for notification preferences of the authenticated account."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.settings import (
    defaults_from_config,
    load_settings_view,
    update_settings as update_settings_uc,
)
from app.config import get_settings
from app.domain.entities import UserSettings
from app.domain.exceptions import InvalidInputError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_owner_id
from app.interfaces.api.schemas import SettingsRead, SettingsResponse, SettingsUpdate

router = APIRouter(prefix="/v1/settings", tags=["settings"])

logger = logging.getLogger(__name__)


def _settings_response(db: Session, owner_user_id: str) -> SettingsResponse:
    effective, is_default = load_settings_view(
        db, owner_user_id, defaults_from_config(get_settings())
    )
    return SettingsResponse(settings=SettingsRead(**asdict(effective)), is_default=is_default)


@router.get("", response_model=SettingsResponse)
def read_settings(
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
) -> SettingsResponse:
    """Return the effective settings, reporting whether defaults are in use."""

    try:
        return _settings_response(db, owner_user_id)
    except SQLAlchemyError as exc:
        logger.exception("Loading settings failed for %s", owner_user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal_error"
        ) from exc


@router.put("", response_model=SettingsResponse)
def update_settings(
    payload: SettingsUpdate,
    db: Session = Depends(get_db),
    owner_user_id: str = Depends(get_current_owner_id),
) -> SettingsResponse:
    """Store preference overrides and return the resulting effective settings."""

    overrides = UserSettings(owner_user_id=owner_user_id, **payload.model_dump())
    try:
        update_settings_uc(db, overrides)
        return _settings_response(db, owner_user_id)
    except InvalidInputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        logger.exception("Saving settings failed for %s", owner_user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal_error"
        ) from exc
