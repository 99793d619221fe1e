from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add repository root to sys.path so `import src...` works when running from the root
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.app import create_app  # noqa: E402
from src.config import Settings  # noqa: E402
from src.registry.store import ReceiptRegistry  # noqa: E402


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def registry():
    return ReceiptRegistry()


@pytest.fixture
def lenient_registry():
    return ReceiptRegistry(strict=False)


@pytest.fixture
def client(registry):
    app = create_app(settings=Settings(), registry=registry)
    return TestClient(app)


@pytest.fixture
def lenient_client(lenient_registry):
    app = create_app(settings=Settings(strict_validation=False), registry=lenient_registry)
    return TestClient(app)


@pytest.fixture
def target_payload():
    return {**TARGET_RECEIPT, "items": [dict(item) for item in TARGET_RECEIPT["items"]]}


@pytest.fixture
def corner_market_payload():
    return {**CORNER_MARKET_RECEIPT, "items": [dict(item) for item in CORNER_MARKET_RECEIPT["items"]]}
