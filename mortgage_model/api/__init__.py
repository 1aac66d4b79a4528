"""
API routes for the mortgage model.
"""

from fastapi import APIRouter

from mortgage_model.api import calculations

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
