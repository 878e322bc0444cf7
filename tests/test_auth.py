"""Tests for bearer token parsing and tenant resolution"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import HTTPException

from app.middleware import auth
from app.models.tenant_user import TenantUser


class TestExtractBearerToken:

    def test_valid_header(self):
        assert auth.extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_scheme_is_case_insensitive(self):
        assert auth.extract_bearer_token("bearer tok") == "tok"

    @pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer"])
    def test_invalid_header(self, header):
        with pytest.raises(HTTPException) as exc_info:
            auth.extract_bearer_token(header)
        assert exc_info.value.status_code == 401


class TestGetCurrentUserId:

    @pytest.mark.asyncio
    async def test_returns_subject(self):
        with patch.object(auth, "verify_token", AsyncMock(return_value={"sub": "user-1"})):
            assert await auth.get_current_user_id("Bearer tok") == "user-1"

    @pytest.mark.asyncio
    async def test_missing_subject(self):
        with patch.object(auth, "verify_token", AsyncMock(return_value={})):
            with pytest.raises(HTTPException) as exc_info:
                await auth.get_current_user_id("Bearer tok")
        assert exc_info.value.status_code == 401


class TestVerifyToken:

    @pytest.mark.asyncio
    async def test_unknown_key_id(self):
        with patch.object(auth, "get_jwks", AsyncMock(return_value={"keys": [{"kid": "other"}]})), \
                patch.object(auth.jwt, "get_unverified_header", return_value={"kid": "k1", "alg": "ES256"}):
            with pytest.raises(HTTPException) as exc_info:
                await auth.verify_token("tok")
        assert exc_info.value.status_code == 401
        assert "k1" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_garbage_token(self):
        with patch.object(auth, "get_jwks", AsyncMock(return_value={"keys": []})):
            with pytest.raises(HTTPException) as exc_info:
                await auth.verify_token("not-a-jwt")
        assert exc_info.value.status_code == 401


class TestGetCurrentTenantId:

    @pytest.mark.asyncio
    async def test_active_membership(self, mock_supabase):
        membership = TenantUser(id="tu-1", tenant_id="tenant-1", user_id="user-1", name="Ana")
        with patch.object(
            auth.TenantUserRepository, "find_active_by_user", AsyncMock(return_value=membership)
        ):
            assert await auth.get_current_tenant_id("user-1", mock_supabase) == "tenant-1"

    @pytest.mark.asyncio
    async def test_no_membership_is_forbidden(self, mock_supabase):
        with pytest.raises(HTTPException) as exc_info:
            await auth.get_current_tenant_id("user-1", mock_supabase)
        assert exc_info.value.status_code == 403
