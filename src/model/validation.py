import re
from datetime import datetime

from src.errors import ValidationError
from src.model.ReceiptModel import Receipt

AMOUNT_PATTERN = re.compile(r'[0-9]+(\.[0-9]{1,2})?')
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
TIME_PATTERN = re.compile(r'[0-9]{2}:[0-9]{2}')
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def check_amount(value: str, field: str):
    if not AMOUNT_PATTERN.fullmatch(value):
        raise ValidationError(f"{field} must be a non-negative amount with at most 2 decimals, got {value!r}")


def check_date(value: str):
    if not DATE_PATTERN.fullmatch(value):
        raise ValidationError(f"purchaseDate must be YYYY-MM-DD, got {value!r}")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"purchaseDate is not a valid date: {value!r}")


def check_time(value: str):
    if not TIME_PATTERN.fullmatch(value):
        raise ValidationError(f"purchaseTime must be HH:MM, got {value!r}")
    try:
        datetime.strptime(value, TIME_FORMAT)
    except ValueError:
        raise ValidationError(f"purchaseTime is not a valid 24-hour time: {value!r}")


def validate_receipt(receipt: Receipt, strict: bool = True):
    """Check a receipt before it is stored.

    The retailer must always be non-empty. With ``strict`` the date, time and
    every amount must also be well-formed; otherwise those are left to the
    scoring rules, which skip what they cannot parse.
    """
    if not receipt.retailer.strip():
        raise ValidationError("retailer must not be empty")
    if not strict:
        return

    check_date(receipt.purchase_date)
    check_time(receipt.purchase_time)
    check_amount(receipt.total, "total")
    for i, item in enumerate(receipt.items):
        check_amount(item.price, f"items[{i}].price")
