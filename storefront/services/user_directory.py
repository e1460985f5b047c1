"""User Directory — idempotent registration and status-change requests.

Invariants:
    - upsert never overwrites or merges: an existing record is returned unchanged
    - New users always get role "customer" and a creation timestamp (epoch ms)
    - Status moves unset → "Requested" at most once
    - Missing user and already-requested are reported as distinct errors
"""

import logging
import time

from storefront.core.domain_types import UserRole, UserStatus
from storefront.core.errors import (
    ResourceNotFoundError, StatusAlreadyRequestedError,
)
from storefront.core.repository_protocols import (
    InsertOutcome, UpdateOutcome, UserRepository,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class UserDirectory:
    """User registration keyed by email."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def upsert(self, email: str, profile: dict) -> dict | InsertOutcome:
        """Return the existing record, or insert a new customer record."""
        existing = await self.users.find_by_email(email)
        if existing:
            return existing
        document = {
            **profile,
            "email": email,
            "role": UserRole.CUSTOMER.value,
            "timestamp": _now_ms(),
        }
        outcome = await self.users.insert(document)
        logger.info(f"Registered user {outcome.inserted_id}")
        return outcome

    async def request_status_change(self, email: str) -> UpdateOutcome:
        user = await self.users.find_by_email(email)
        if not user:
            raise ResourceNotFoundError("User", email)
        if user.get("status") == UserStatus.REQUESTED.value:
            raise StatusAlreadyRequestedError(email)
        return await self.users.set_status(email, UserStatus.REQUESTED.value)
