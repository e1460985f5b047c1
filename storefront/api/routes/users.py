"""User Routes — registration upsert and status-change request."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from storefront.api.dependencies import get_user_directory, require_session
from storefront.core.documents import to_json_document
from storefront.core.repository_protocols import InsertOutcome
from storefront.core.session_token import SessionClaims
from storefront.schemas.results import InsertResult, UpdateResult
from storefront.services.user_directory import UserDirectory

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/{email}")
async def save_user(
    email: str,
    profile: dict[str, Any] | None = Body(default=None),
    users: UserDirectory = Depends(get_user_directory),
):
    """Existing user → stored record; new user → insert result."""
    result = await users.upsert(email, profile or {})
    if isinstance(result, InsertOutcome):
        return InsertResult.from_outcome(result).model_dump(by_alias=True)
    return to_json_document(result)


@router.patch("/{email}", response_model=UpdateResult)
async def request_status_change(
    email: str,
    _: SessionClaims = Depends(require_session),
    users: UserDirectory = Depends(get_user_directory),
):
    outcome = await users.request_status_change(email)
    return UpdateResult.from_outcome(outcome)
