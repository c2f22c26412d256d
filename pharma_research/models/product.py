import enum

from sqlalchemy import CheckConstraint, Column, Date, DateTime, Integer, String, Text

from pharma_research.core.database import Base
from pharma_research.utils import date_helpers
from pharma_research.utils.date_helpers import utcnow


class ProductCategory(str, enum.Enum):
    TABLET = "tablet"
    CAPSULE = "capsule"
    INJECTION = "injection"


class ResearchStatus(str, enum.Enum):
    UNDER_DEVELOPMENT = "under development"
    IN_CLINICAL_TRIALS = "in clinical trials"
    COMPLETED = "completed"


# Business fields in declaration order; validation errors follow this order.
PRODUCT_FIELDS = (
    "name",
    "category",
    "active_ingredients",
    "batch_number",
    "research_status",
    "manufacturing_date",
    "expiration_date",
)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(20), nullable=False, index=True)
    active_ingredients = Column(Text, nullable=False)
    batch_number = Column(String(255), unique=True, index=True, nullable=False)
    research_status = Column(String(32), nullable=False, index=True)

    manufacturing_date = Column(Date, nullable=False)
    expiration_date = Column(Date, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "expiration_date > manufacturing_date",
            name="ck_products_expiration_after_manufacturing",
        ),
    )

    @property
    def formatted_manufacturing_date(self) -> str:
        return date_helpers.format_long_date(self.manufacturing_date)

    @property
    def formatted_expiration_date(self) -> str:
        return date_helpers.format_long_date(self.expiration_date)

    def is_expired(self) -> bool:
        return date_helpers.is_expired(self.expiration_date)

    def days_until_expiration(self) -> int:
        return max(0, date_helpers.days_until_expiry(self.expiration_date))

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name}, batch_number={self.batch_number})>"
