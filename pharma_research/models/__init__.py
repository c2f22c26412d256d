from pharma_research.models.product import (
    Product,
    ProductCategory,
    ResearchStatus,
    PRODUCT_FIELDS,
)

__all__ = [
    "Product",
    "ProductCategory",
    "ResearchStatus",
    "PRODUCT_FIELDS",
]
