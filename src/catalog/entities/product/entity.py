"""Entity: Product."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product entity representing an item offered by a seller.

    Products are immutable once constructed. The price is expected to be
    non-negative but is not validated, and the seller reference is not
    checked against any seller store.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Unique product identifier")
    description: str = Field(description="Product description")
    price: float = Field(description="Unit price")
    seller_id: int = Field(description="Identifier of the seller")


class ProductQuery(BaseModel):
    """Filter criteria for a product search.

    An ``id`` of 0 means no filter; any other value restricts the search to
    the product with that id.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(default=0, description="Product id to match, 0 for all")

    @property
    def is_unfiltered(self) -> bool:
        return self.id == 0
