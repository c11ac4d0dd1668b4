from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product record held by the in-memory data store"""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"id": 4, "name": "Widget"}
        }
    )

    id: int = Field(..., description="Product identifier (not required to be unique)")
    name: str = Field(..., description="Product name")


SAMPLE_PRODUCTS = (
    Product(id=1, name="Test Product 1"),
    Product(id=2, name="Test Product 2"),
    Product(id=3, name="Test Product 3"),
)
