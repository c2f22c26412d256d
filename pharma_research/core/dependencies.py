from fastapi import Depends
from sqlalchemy.orm import Session

from pharma_research.core.database import get_db
from pharma_research.models.product import Product
from pharma_research.services.product_service import ProductService
from pharma_research.utils.exceptions import ProductNotFoundError


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_existing_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Resolve the path id to a product, 404 through ProductNotFoundError"""
    if not (product_id.isascii() and product_id.isdigit()):
        raise ProductNotFoundError(product_id)

    return service.get_product(int(product_id))
