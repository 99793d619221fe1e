from dataclasses import dataclass
from typing import Tuple

from src.model.ReceiptItemModel import ReceiptItem


@dataclass(frozen=True)
class Receipt:
    retailer: str
    purchase_date: str
    purchase_time: str
    total: str
    items: Tuple[ReceiptItem, ...] = ()
