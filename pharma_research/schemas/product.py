from pydantic import BaseModel, Field, ValidationInfo, field_serializer, field_validator
from datetime import date, datetime

from pharma_research.models.product import PRODUCT_FIELDS, ProductCategory, ResearchStatus
from pharma_research.utils.date_helpers import format_timestamp
from pharma_research.utils.validators import field_label


class ProductCreate(BaseModel):
    name: str = Field(..., max_length=255)
    category: ProductCategory
    active_ingredients: str
    batch_number: str = Field(..., max_length=255)
    research_status: ResearchStatus
    manufacturing_date: date
    expiration_date: date

    class Config:
        use_enum_values = True

    @field_validator(*PRODUCT_FIELDS, mode="before")
    @classmethod
    def validate_required(cls, v, info: ValidationInfo):
        if isinstance(v, str):
            v = v.strip()
        if v is None or v == "":
            raise ValueError(f"The {field_label(info.field_name)} field is required.")
        return v

    @field_validator("expiration_date")
    @classmethod
    def validate_expiration_after_manufacturing(cls, v, info: ValidationInfo):
        manufactured = info.data.get("manufacturing_date")
        if manufactured and v <= manufactured:
            raise ValueError(
                "The expiration date field must be a date after manufacturing date."
            )
        return v


class ProductUpdate(ProductCreate):
    """Full replacement of the business fields"""


class ProductResponse(BaseModel):
    id: int
    name: str
    category: str
    active_ingredients: str
    batch_number: str
    research_status: str
    manufacturing_date: date
    expiration_date: date
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)
