# This project was developed with assistance from AI tools.
"""
Keycloak bearer-token authentication for the Förderportal API.

Applicants, agents and admins sign in against the ``foerderportal`` realm.
Tokens are verified with the realm's JWKS; the applicant's ``sub`` claim is
the resident id stored on their applications.

Set AUTH_DISABLED=true to bypass validation (tests / local dev without Keycloak).
"""

import logging
import time
from typing import Annotated

import httpx
import jwt
from db.enums import UserRole
from fastapi import Depends, HTTPException, Request, status

from ..core.config import settings
from ..schemas.auth import TokenPayload, UserContext

logger = logging.getLogger(__name__)

_KNOWN_ROLES = frozenset(role.value for role in UserRole)

_jwks_data: dict | None = None
_jwks_fetched_at: float = 0


def _realm_url() -> str:
    return f"{settings.KEYCLOAK_URL}/realms/{settings.KEYCLOAK_REALM}"


def _get_jwks(force_refresh: bool = False) -> dict:
    """Return the realm JWKS, fetching when missing, stale, or forced."""
    global _jwks_data, _jwks_fetched_at  # noqa: PLW0603

    now = time.time()
    if _jwks_data is None or force_refresh or (now - _jwks_fetched_at) > settings.JWKS_CACHE_TTL:
        response = httpx.get(f"{_realm_url()}/protocol/openid-connect/certs", timeout=5)
        response.raise_for_status()
        _jwks_data = response.json()
        _jwks_fetched_at = now

    return _jwks_data


def _find_key(jwks: dict, kid: str | None) -> jwt.PyJWK | None:
    return next((key for key in jwt.PyJWKSet.from_dict(jwks).keys if key.key_id == kid), None)


def _get_signing_key(token: str) -> jwt.PyJWK:
    """Signing key for ``token``; an unknown kid triggers one JWKS refresh.

    Raises:
        jwt.InvalidTokenError: No key in the realm matches the token's kid.
        HTTPException: 503 when Keycloak cannot be reached.
    """
    kid = jwt.get_unverified_header(token).get("kid")
    try:
        key = _find_key(_get_jwks(), kid) or _find_key(_get_jwks(force_refresh=True), kid)
    except httpx.HTTPError as exc:
        logger.error("Failed to fetch JWKS from Keycloak: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service unavailable",
        ) from exc
    if key is None:
        raise jwt.InvalidTokenError(f"No matching key found for kid={kid}")
    return key


def _extract_token(request: Request) -> str | None:
    """Extract Bearer token from Authorization header."""
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        return auth[7:]
    return None


def _decode_token(token: str) -> TokenPayload:
    """Validate signature and issuer; the portal does not pin an audience."""
    payload = jwt.decode(
        token,
        _get_signing_key(token).key,
        algorithms=["RS256"],
        issuer=_realm_url(),
        options={"verify_aud": False},
    )
    return TokenPayload(**payload)


def _resolve_role(token_payload: TokenPayload) -> UserRole:
    """First portal role in ``realm_access.roles``; Keycloak built-ins are ignored.

    Raises:
        HTTPException: 403 when the token carries none of our roles.
    """
    roles = [r for r in token_payload.realm_access.get("roles", []) if r in _KNOWN_ROLES]
    if not roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="No recognized role assigned",
        )
    if len(roles) > 1:
        logger.warning("User %s has roles %s, using %s", token_payload.sub, roles, roles[0])
    return UserRole(roles[0])


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


_DISABLED_USER = UserContext(
    user_id="dev-user",
    role=UserRole.ADMIN,
    email="dev@foerderportal.local",
    name="Dev User",
)


async def get_current_user(request: Request) -> UserContext:
    """FastAPI dependency: the authenticated caller.

    When AUTH_DISABLED=true, returns a dev admin user without token validation.
    """
    if settings.AUTH_DISABLED:
        return _DISABLED_USER

    token = _extract_token(request)
    if not token:
        raise _unauthorized("Missing authentication token")

    try:
        payload = _decode_token(token)
    except jwt.ExpiredSignatureError as exc:
        raise _unauthorized("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise _unauthorized("Invalid token") from exc

    return UserContext(
        user_id=payload.sub,
        role=_resolve_role(payload),
        email=payload.email,
        name=payload.name or payload.preferred_username,
    )


CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def require_roles(*allowed_roles: UserRole):
    """Dependency factory: restrict a route to specific roles.

    Usage:
        @router.get(
            "/residents/{resident_id}/document-requests/outstanding",
            dependencies=[Depends(require_roles(UserRole.AGENT, UserRole.ADMIN))],
        )
    """

    async def _check(user: CurrentUser) -> UserContext:
        if user.role not in allowed_roles:
            logger.warning(
                "RBAC denied: user=%s role=%s attempted route requiring %s",
                user.user_id,
                user.role.value,
                [r.value for r in allowed_roles],
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return _check
