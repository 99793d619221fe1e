import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from src.config import Settings
from src.errors import NotFoundError, ValidationError
from src.model.schemas import ReceiptCreated, ReceiptIn, ReceiptPoints
from src.registry.store import ReceiptRegistry

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def describe_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(messages)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return await handle_validation_error(request, ValidationError(describe_errors(exc)))


async def handle_validation_error(request: Request, exc: ValidationError):
    logger.warning("Rejected receipt: %s", exc)
    return PlainTextResponse(f"Invalid request payload: {exc}", status_code=400)


async def handle_not_found(request: Request, exc: NotFoundError):
    logger.warning("Lookup for unknown receipt %s", exc.receipt_id)
    return PlainTextResponse("No receipt found for that ID", status_code=404)


def create_app(settings: Optional[Settings] = None, registry: Optional[ReceiptRegistry] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level)

    if registry is None:
        registry = ReceiptRegistry(strict=settings.strict_validation)

    app = FastAPI(title="Receipt Points Service", version=VERSION)
    app.state.registry = registry
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)

    @app.post("/receipts/process", response_model=ReceiptCreated)
    async def process_receipt(payload: ReceiptIn):
        return ReceiptCreated(id=registry.submit(payload.to_receipt()))

    @app.get("/receipts/{receipt_id}/points", response_model=ReceiptPoints)
    async def get_points(receipt_id: str):
        return ReceiptPoints(points=registry.lookup(receipt_id))

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = Settings()
    uvicorn.run("src.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
