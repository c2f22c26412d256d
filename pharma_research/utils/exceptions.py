from typing import Dict, List

from pharma_research.utils.validators import INVALID_DATA_MESSAGE


class ProductNotFoundError(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ProductValidationError(Exception):
    """Raised with a field-keyed error map when a payload fails validation"""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(INVALID_DATA_MESSAGE)
        self.errors = errors
