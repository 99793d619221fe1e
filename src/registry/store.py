import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable, Dict

from src.errors import NotFoundError
from src.model.ReceiptModel import Receipt
from src.model.ScoreRecordModel import ScoreRecord
from src.model.validation import validate_receipt
from src.scoring.points import score_breakdown

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class RegistryEntry:
    receipt: Receipt
    record: ScoreRecord


class ReceiptRegistry:
    """In-memory store of submitted receipts and their points.

    Each identifier maps to one entry holding both the receipt and its score,
    inserted under a lock. Nothing is persisted; a new registry starts empty.
    """

    def __init__(self, strict: bool = True, id_factory: Callable[[], str] = new_receipt_id):
        self.strict = strict
        self._id_factory = id_factory
        self._entries: Dict[str, RegistryEntry] = {}
        self._lock = threading.Lock()

    def submit(self, receipt: Receipt) -> str:
        validate_receipt(receipt, strict=self.strict)

        breakdown = score_breakdown(receipt)
        points = sum(breakdown.values())
        receipt_id = self._id_factory()
        entry = RegistryEntry(receipt=receipt, record=ScoreRecord(receipt_id=receipt_id, points=points))

        with self._lock:
            self._entries[receipt_id] = entry

        logger.info("Stored receipt %s from %r worth %d points", receipt_id, receipt.retailer, points)
        logger.debug("Points breakdown for %s: %s", receipt_id, breakdown)
        return receipt_id

    def _get(self, receipt_id: str) -> RegistryEntry:
        with self._lock:
            entry = self._entries.get(receipt_id)
        if entry is None:
            raise NotFoundError(receipt_id)
        return entry

    def lookup(self, receipt_id: str) -> int:
        return self._get(receipt_id).record.points

    def get_receipt(self, receipt_id: str) -> Receipt:
        return self._get(receipt_id).receipt

    def __contains__(self, receipt_id) -> bool:
        with self._lock:
            return receipt_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
