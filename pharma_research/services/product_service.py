from sqlalchemy.orm import Session
from pydantic import ValidationError
from typing import Any, Dict, List, Optional, Tuple
from datetime import date
import logging

from pharma_research.middleware.transaction_handler import transactional
from pharma_research.models.product import Product, PRODUCT_FIELDS
from pharma_research.schemas.product import ProductCreate, ProductUpdate
from pharma_research.utils.date_helpers import utcnow
from pharma_research.utils.exceptions import ProductNotFoundError
from pharma_research.utils.validators import (
    format_validation_errors,
    order_field_errors,
)

logger = logging.getLogger(__name__)

FieldErrors = Dict[str, List[str]]

# Largest value a 64-bit INTEGER primary key can hold
MAX_PRODUCT_ID = 2**63 - 1


class ProductService:
    """
    Validation and persistence of pharmaceutical products.

    The uniqueness check in `validate` is advisory: the unique index on
    `products.batch_number` is what finally rejects a colliding write.
    """

    def __init__(self, db: Session):
        self.db = db

    def validate(
        self, payload: Any, exclude_id: Optional[int] = None
    ) -> Tuple[Optional[ProductCreate], FieldErrors]:
        """
        Check a candidate payload against every product rule in one pass.
        Passing `exclude_id` validates an update of that product.

        Returns:
            (data, {}) when the payload is valid, (None, errors) otherwise,
            errors being keyed by field in declaration order.
        """
        data: Optional[ProductCreate] = None
        errors: FieldErrors = {}

        try:
            schema = ProductCreate if exclude_id is None else ProductUpdate
            data = schema.model_validate(payload)
        except ValidationError as exc:
            errors = format_validation_errors(exc)

        batch_number = payload.get("batch_number") if isinstance(payload, dict) else None
        if (
            "batch_number" not in errors
            and isinstance(batch_number, str)
            and self.batch_number_taken(batch_number.strip(), exclude_id)
        ):
            errors["batch_number"] = ["The batch number has already been taken."]

        if errors:
            return None, order_field_errors(errors, PRODUCT_FIELDS)

        return data, {}

    def batch_number_taken(
        self, batch_number: str, exclude_id: Optional[int] = None
    ) -> bool:
        query = self.db.query(Product.id).filter(Product.batch_number == batch_number)

        if exclude_id is not None:
            query = query.filter(Product.id != exclude_id)

        return query.first() is not None

    def list_products(self) -> List[Product]:
        """All products, newest first"""
        return (
            self.db.query(Product)
            .order_by(Product.created_at.desc(), Product.id.desc())
            .all()
        )

    def list_active(self) -> List[Product]:
        """Products that have not reached their expiration date yet"""
        return (
            self.db.query(Product)
            .filter(Product.expiration_date > date.today())
            .order_by(Product.created_at.desc(), Product.id.desc())
            .all()
        )

    def get_product(self, product_id: int) -> Product:
        if not 0 < product_id <= MAX_PRODUCT_ID:
            raise ProductNotFoundError(product_id)

        product = self.db.query(Product).filter(Product.id == product_id).first()

        if not product:
            raise ProductNotFoundError(product_id)

        return product

    @transactional
    def create_product(self, data: ProductCreate) -> Product:
        now = utcnow()
        product = Product(**data.model_dump(), created_at=now, updated_at=now)

        self.db.add(product)
        self.db.flush()
        self.db.refresh(product)

        logger.info(
            f"Product created: {product.id} - {product.batch_number}",
            extra={"operation": "create", "product_id": product.id},
        )
        return product

    @transactional
    def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        product = self.get_product(product_id)

        for key, value in data.model_dump().items():
            setattr(product, key, value)
        product.updated_at = utcnow()

        self.db.flush()
        self.db.refresh(product)

        logger.info(
            f"Product updated: {product.id}",
            extra={"operation": "update", "product_id": product.id},
        )
        return product

    @transactional
    def delete_product(self, product_id: int) -> None:
        product = self.get_product(product_id)

        self.db.delete(product)
        self.db.flush()

        logger.info(
            f"Product deleted: {product_id}",
            extra={"operation": "delete", "product_id": product_id},
        )
