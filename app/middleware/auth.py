"""
Supabase JWT authentication and tenant resolution

Tokens are verified against the project's JWKS (ES256 or RS256). The
caller's tenant comes from their active row in `tenant_users`.
"""
import logging
import time
from typing import Optional

import httpx
from fastapi import Depends, Header, HTTPException
from jose import jwk, jwt
from supabase import Client

from app import config
from app.infra.supabase import get_supabase_client
from app.infra.supabase.repositories import TenantUserRepository

logger = logging.getLogger(__name__)

_jwks_cache: Optional[dict] = None
_jwks_cache_time: float = 0
JWKS_CACHE_DURATION = 60 * 60  # 1 hour

JWT_AUDIENCE = "authenticated"
JWT_ALGORITHMS = ["ES256", "RS256"]


def get_auth_base_url() -> str:
    if not config.SUPABASE_URL:
        raise ValueError("SUPABASE_URL must be set")
    return f"{config.SUPABASE_URL}/auth/v1"


async def get_jwks() -> dict:
    """
    Fetch the Supabase JWKS, cached for an hour.
    A stale cache is reused when a refresh fails.
    """
    global _jwks_cache, _jwks_cache_time

    now = time.time()
    if _jwks_cache and (now - _jwks_cache_time) < JWKS_CACHE_DURATION:
        return _jwks_cache

    jwks_url = f"{get_auth_base_url()}/.well-known/jwks.json"
    logger.info(f"Fetching JWKS from Supabase: {jwks_url}")

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(jwks_url, timeout=10.0)
            response.raise_for_status()
            _jwks_cache = response.json()
            _jwks_cache_time = now
            return _jwks_cache
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch JWKS: {e}")
        if _jwks_cache:
            logger.warning("Using expired JWKS cache due to fetch failure")
            return _jwks_cache
        raise HTTPException(status_code=500, detail="Failed to fetch authentication keys")


async def verify_token(token: str) -> dict:
    """
    Verify a Supabase access token and return its claims.

    Raises:
        HTTPException: 401 for any invalid, expired or unknown-key token
    """
    jwks = await get_jwks()

    try:
        header = jwt.get_unverified_header(token)
    except jwt.JWTError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    kid = header.get("kid")
    if not kid:
        raise HTTPException(status_code=401, detail="Token missing key ID (kid)")

    key_data = next((k for k in jwks.get("keys", []) if k.get("kid") == kid), None)
    if not key_data:
        raise HTTPException(status_code=401, detail=f"Key with ID '{kid}' not found in JWKS")

    try:
        return jwt.decode(
            token,
            jwk.construct(key_data),
            algorithms=JWT_ALGORITHMS,
            audience=JWT_AUDIENCE,
            issuer=get_auth_base_url(),
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token has expired")
    except jwt.JWTClaimsError as e:
        raise HTTPException(status_code=401, detail=f"Token validation failed: {str(e)}")
    except jwt.JWTError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header missing")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format. Expected 'Bearer <token>'"
        )
    return token


async def get_current_user_id(
    authorization: Optional[str] = Header(None)
) -> str:
    """FastAPI dependency: authenticated user ID (JWT `sub`)"""
    payload = await verify_token(extract_bearer_token(authorization))

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token: no user ID")
    return user_id


async def get_current_tenant_id(
    user_id: str = Depends(get_current_user_id),
    client: Client = Depends(get_supabase_client),
) -> str:
    """FastAPI dependency: tenant of the authenticated user"""
    membership = await TenantUserRepository(client).find_active_by_user(user_id)
    if not membership:
        logger.warning(f"User {user_id} has no active tenant membership")
        raise HTTPException(status_code=403, detail="User is not linked to an active tenant")
    return membership.tenant_id
