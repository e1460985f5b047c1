"""Session Credential — POST /jwt issues the "token" cookie.

Invariants:
    - Cookie is HTTP-only; secure + SameSite=None only in production, SameSite=Strict otherwise
    - Missing email → 400 (FieldValidationError from issue_token)
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import TOKEN_COOKIE
from storefront.config import Settings, get_settings
from storefront.core.session_token import issue_token
from storefront.schemas.requests import TokenRequest

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


@router.post("/jwt")
async def create_session_token(
    body: TokenRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
):
    token = issue_token(
        body.email,
        settings.token_secret,
        ttl=timedelta(days=settings.token_ttl_days),
        algorithm=settings.token_algorithm,
    )
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "strict",
    )
    return {"success": True}
