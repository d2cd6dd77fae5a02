"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.use_cases.notifications import GenerationPolicy
from app.config import get_settings
from app.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_owner_user_id(token: str) -> str:
    """Return the account owner identified by ``token``."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized() from exc

    owner_user_id = payload.get("sub")
    if not isinstance(owner_user_id, str) or not owner_user_id.strip():
        raise _unauthorized()
    return owner_user_id.strip()


def get_current_owner_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Return the authenticated caller's owner user id."""

    if credentials is None or not credentials.credentials:
        raise _unauthorized()
    return resolve_owner_user_id(credentials.credentials)


def get_generation_policy() -> GenerationPolicy:
    """Return the generation tunables derived from configuration."""

    return GenerationPolicy.from_config(get_settings())
