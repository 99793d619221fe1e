"""Pydantic request and response schemas for the HTTP boundary.

Request bodies are validated here for shape and type only; the format of
dates, times and amounts is checked by the registry, whose strictness is
configurable.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt


class ItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: StrictStr = Field(alias="shortDescription")
    price: StrictStr

    def to_item(self) -> ReceiptItem:
        return ReceiptItem(short_description=self.short_description, price=self.price)


class ReceiptIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: StrictStr
    purchase_date: StrictStr = Field(alias="purchaseDate")
    purchase_time: StrictStr = Field(alias="purchaseTime")
    total: StrictStr
    # null and a missing list both mean no items
    items: Optional[List[ItemIn]] = None

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(item.to_item() for item in self.items or ()),
        )


class ReceiptCreated(BaseModel):
    id: str


class ReceiptPoints(BaseModel):
    points: int
