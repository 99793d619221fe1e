import math
import re
from datetime import datetime
from typing import Dict, Optional

from src.model.ReceiptModel import Receipt

ALNUM_PATTERN = re.compile(r'[a-zA-Z0-9]')
NUMBER_PATTERN = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
TIME_PATTERN = re.compile(r'[0-9]{1,2}:[0-9]{2}')


def parse_amount(value: str) -> Optional[float]:
    """Parse decimal amount text, or return None.

    Only plain ASCII decimal notation is accepted; surrounding whitespace,
    underscores and non-ASCII digits make the amount unparseable.
    """
    if not NUMBER_PATTERN.fullmatch(value):
        return None
    amount = float(value)
    if not math.isfinite(amount):
        return None
    return amount


def parse_date(value: str) -> Optional[datetime]:
    if not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None


def parse_time(value: str) -> Optional[datetime]:
    if not TIME_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%H:%M")
    except ValueError:
        return None


def retailer_points(receipt: Receipt) -> int:
    return len(ALNUM_PATTERN.findall(receipt.retailer))


def round_total_points(total: float) -> int:
    return 50 if total == float(int(total)) else 0


def quarter_multiple_points(total: float) -> int:
    # exact float comparison, 0.1-style fractions never match
    return 25 if math.fmod(total, 0.25) == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * 5


def description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        # length in UTF-8 bytes
        if len(item.short_description.strip().encode("utf-8")) % 3 == 0:
            price = parse_amount(item.price) or 0.0
            points += int(math.ceil(price * 0.2))
    return points


def odd_day_points(receipt: Receipt) -> int:
    purchase_date = parse_date(receipt.purchase_date)
    if purchase_date is None:
        return 0
    return 6 if purchase_date.day % 2 != 0 else 0


def afternoon_points(receipt: Receipt) -> int:
    purchase_time = parse_time(receipt.purchase_time)
    if purchase_time is None:
        return 0
    return 10 if purchase_time.hour == 14 else 0


def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Per-rule contributions, in evaluation order.

    An unparseable total stops evaluation after the retailer rule, so the
    result then holds that single entry.
    """
    breakdown = {"retailer": retailer_points(receipt)}

    total = parse_amount(receipt.total)
    if total is None:
        return breakdown

    breakdown["round_total"] = round_total_points(total)
    breakdown["quarter_multiple"] = quarter_multiple_points(total)
    breakdown["item_pairs"] = item_pair_points(receipt)
    breakdown["descriptions"] = description_points(receipt)
    breakdown["odd_day"] = odd_day_points(receipt)
    breakdown["afternoon"] = afternoon_points(receipt)
    return breakdown


def score(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
