from pharma_research.schemas.product import ProductCreate, ProductUpdate, ProductResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
