"""
Top-level API router.

Aggregates the domain routers under ``/users``.  Exercises and logs
are nested resources of a user and share that prefix.  The router is
mounted under ``/api`` by ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import exercises, logs, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(exercises.router, prefix="/users", tags=["exercises"])
router.include_router(logs.router, prefix="/users", tags=["logs"])
