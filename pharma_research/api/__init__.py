"""
API routes
"""

from fastapi import APIRouter
from pharma_research.api import debug, products

api_router = APIRouter()

api_router.include_router(products.router)
api_router.include_router(debug.router)

__all__ = ["api_router"]
