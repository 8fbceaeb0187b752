"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (users, pets, shelters,
adoptions) under a unified prefix.  When a new domain is introduced,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import adoptions, info, pets, shelters, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(pets.router, prefix="/pets", tags=["pets"])
router.include_router(shelters.router, prefix="/shelters", tags=["shelters"])
router.include_router(adoptions.router, prefix="/adoptions", tags=["adoptions"])
router.include_router(info.router, prefix="/info", tags=["info"])
