"""
Business logic services for users service
"""

from .user_service import UserService, create_user_store

__all__ = ["UserService", "create_user_store"]
