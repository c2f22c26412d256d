"""
Business logic services
"""

from pharma_research.services.product_service import ProductService

__all__ = [
    "ProductService",
]
