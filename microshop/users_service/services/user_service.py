"""
User directory business logic
"""

from typing import Any, Dict, List, Optional

import structlog

from microshop.shared.utils.store import EntityStore, Record
from microshop.shared.utils.validators import apply_limit
from microshop.users_service.models.user import UserCreate, UserUpdate, UserRole, SEED_USERS

logger = structlog.get_logger(__name__)

RECENT_USERS_COUNT = 5


def create_user_store(seed=SEED_USERS) -> EntityStore:
    """Build the user store preloaded with the seed users"""
    return EntityStore(
        entity="User",
        id_key="userId",
        create_schema=UserCreate,
        update_schema=UserUpdate,
        required_message="Name and email are required",
        unique_fields=("email",),
        seed=seed
    )


class UserService:
    """User directory operations over one store"""

    def __init__(self, store: EntityStore):
        self.store = store

    def list_users(self, role: Optional[str] = None, limit: Optional[int] = None) -> List[Record]:
        """All users, optionally filtered by exact role, then truncated"""
        users = self.store.list()
        if role:
            users = [user for user in users if user["role"] == role]
        return apply_limit(users, limit)

    def get_user(self, user_id: int) -> Record:
        return self.store.get(user_id)

    def create_user(self, payload: Dict[str, Any]) -> Record:
        user = self.store.create(payload)
        logger.info("User created", user_id=user["id"], role=user["role"])
        return user

    def update_user(self, user_id: int, payload: Dict[str, Any]) -> Record:
        return self.store.update(user_id, payload)

    def delete_user(self, user_id: int) -> Record:
        return self.store.delete(user_id)

    def get_stats(self) -> Dict[str, Any]:
        """
        Directory statistics

        ``recentUsers`` holds the last inserted users, most recent first.
        """
        users = self.store.list()
        return {
            "total": len(users),
            "byRole": {
                role.value: sum(1 for user in users if user["role"] == role.value)
                for role in UserRole
            },
            "recentUsers": list(reversed(users[-RECENT_USERS_COUNT:]))
        }
