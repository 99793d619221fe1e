class ReceiptServiceError(Exception):
    """Base class for errors raised by the receipt service."""


class ValidationError(ReceiptServiceError):
    """Raised when a submitted receipt is malformed or incomplete."""


class NotFoundError(ReceiptServiceError):
    """Raised when a lookup targets an identifier that was never issued."""

    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__(f"No receipt found for that ID: {receipt_id}")
