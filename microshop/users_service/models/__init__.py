"""
Data models for users service
"""

from .user import UserCreate, UserUpdate, UserRole, SEED_USERS

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserRole",
    "SEED_USERS",
]
