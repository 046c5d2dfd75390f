"""
User management routes
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
import structlog

from microshop.shared.utils.errors import ServiceError
from microshop.shared.utils.validators import parse_limit
from microshop.users_service.services.user_service import UserService

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_user_service(request: Request) -> UserService:
    """Dependency to get the user service instance"""
    return request.app.state.user_service


@router.get("/users")
async def list_users(
    role: Optional[str] = Query(None, description="Exact role to filter by"),
    limit: Optional[str] = Query(None, description="Maximum number of users"),
    service: UserService = Depends(get_user_service)
):
    """List users"""
    users = service.list_users(role=role, limit=parse_limit(limit))
    return {"count": len(users), "users": users}


@router.get("/users/{user_id}")
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Get user details"""
    try:
        return service.get_user(user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.post("/users", status_code=201)
async def create_user(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: UserService = Depends(get_user_service)
):
    """Create a new user"""
    try:
        user = service.create_user(payload or {})
    except ServiceError as e:
        logger.warning("User creation rejected", error=e.message, status_code=e.status_code)
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "User created successfully", "user": user}


@router.put("/users/{user_id}")
async def update_user(
    user_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: UserService = Depends(get_user_service)
):
    """Update user information"""
    try:
        user = service.update_user(user_id, payload or {})
    except ServiceError as e:
        logger.warning("User update rejected", user_id=user_id, error=e.message)
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "User updated successfully", "user": user}


@router.delete("/users/{user_id}")
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user"""
    try:
        user = service.delete_user(user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "User deleted successfully", "user": user}


@router.get("/stats/users")
async def user_stats(service: UserService = Depends(get_user_service)):
    """Get user statistics"""
    return service.get_stats()
