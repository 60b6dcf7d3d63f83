# catalog/models.py
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    price: Union[int, float]
    category: Optional[str] = None
    in_stock: bool = Field(default=True, alias="inStock")


class ProductList(BaseModel):
    count: int
    products: List[Product]


class ProductMessage(BaseModel):
    message: str
    product: Product


class ErrorBody(BaseModel):
    error: str
    message: str
    field: Optional[str] = None
