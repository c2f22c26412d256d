from pharma_research.utils.date_helpers import (
    utcnow,
    days_until_expiry,
    is_expired,
    format_long_date,
    format_timestamp,
)
from pharma_research.utils.validators import (
    field_label,
    collect_field_errors,
    format_validation_errors,
    order_field_errors,
)
from pharma_research.utils.exceptions import (
    ProductNotFoundError,
    ProductValidationError,
)

__all__ = [
    "utcnow",
    "days_until_expiry",
    "is_expired",
    "format_long_date",
    "format_timestamp",
    "field_label",
    "collect_field_errors",
    "format_validation_errors",
    "order_field_errors",
    "ProductNotFoundError",
    "ProductValidationError",
]
