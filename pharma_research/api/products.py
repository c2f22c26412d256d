from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List
import logging

from pharma_research.core.dependencies import get_existing_product, get_product_service
from pharma_research.models.product import Product
from pharma_research.schemas.product import ProductResponse
from pharma_research.services.product_service import ProductService
from pharma_research.utils.exceptions import ProductValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def storage_failure(message: str, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"{message}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"message": message, "error": str(exc)})


@router.get("", response_model=List[ProductResponse])
def list_products(service: ProductService = Depends(get_product_service)):
    try:
        return service.list_products()
    except SQLAlchemyError as exc:
        logger.error(f"Failed to fetch products: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch products"})


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
):
    logger.info("Creating new product", extra={"payload": payload})

    data, errors = service.validate(payload)
    if errors:
        logger.warning(f"Validation failed when creating product: {errors}")
        raise ProductValidationError(errors)

    try:
        return service.create_product(data)
    except SQLAlchemyError as exc:
        return storage_failure("Failed to create product", exc)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product: Product = Depends(get_existing_product)):
    return product


@router.put("/{product_id}", response_model=ProductResponse)
@router.patch("/{product_id}", response_model=ProductResponse)
def update_product(
    payload: Dict[str, Any] = Body(...),
    product: Product = Depends(get_existing_product),
    service: ProductService = Depends(get_product_service),
):
    """Replace every business field of a product"""
    logger.info(f"Updating product {product.id}", extra={"payload": payload})

    data, errors = service.validate(payload, exclude_id=product.id)
    if errors:
        logger.warning(f"Validation failed when updating product {product.id}: {errors}")
        raise ProductValidationError(errors)

    try:
        return service.update_product(product.id, data)
    except SQLAlchemyError as exc:
        return storage_failure("Failed to update product", exc)


@router.delete("/{product_id}", status_code=204)
def delete_product(
    product: Product = Depends(get_existing_product),
    service: ProductService = Depends(get_product_service),
):
    try:
        service.delete_product(product.id)
    except SQLAlchemyError as exc:
        return storage_failure("Failed to delete product", exc)

    return Response(status_code=204)
