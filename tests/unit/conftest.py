"""
Shared fixtures for unit tests
"""

from datetime import datetime

import pytest

from jewel_receipt.config import ReceiptConfig
from jewel_receipt.models import (
    ChitItem,
    CustomerDetails,
    EstimationItem,
    MarketRates,
    PurchaseItem,
    ReceiptPayload,
    ShopDetails,
)

ISSUED_AT = datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def issued_at() -> datetime:
    return ISSUED_AT


@pytest.fixture
def shop() -> ShopDetails:
    return ShopDetails(
        name="Sri Lakshmi Jewellers",
        address="12 Bazaar Street, Madurai",
        phone="0452-2345678",
        gst_number="33ABCDE1234F1Z5",
        device_name="Counter 1",
        footer_message="Thank you, visit again",
    )


@pytest.fixture
def ring() -> EstimationItem:
    """10g at 3000/g, 2% wastage, fixed 500 making charge: 31,100 taxable"""
    return EstimationItem(
        name="Gold Ring",
        tag_number="T1001",
        pcs=1,
        gross_weight=10,
        stone_weight=0,
        rate=3000,
        wastage=2,
        wastage_type="percentage",
        making_charge=500,
        making_charge_type="fixed",
    )


@pytest.fixture
def estimation_payload(ring: EstimationItem) -> ReceiptPayload:
    return ReceiptPayload(
        items=[ring],
        customer=CustomerDetails(name="Meena", mobile="9876543210", address="Madurai"),
        employee_name="Ravi",
        estimation_number=7,
        rates=MarketRates(gold_22k=3000, silver=80),
        issued_at=ISSUED_AT,
    )


@pytest.fixture
def credit_payload() -> ReceiptPayload:
    """Purchase of 10,000 and a chit of 4,000 with no items"""
    return ReceiptPayload(
        purchase_items=[
            PurchaseItem(category="Old Chain", gross_weight=2, less_weight=0, rate=5000),
        ],
        chit_items=[ChitItem(chit_id="CH-9", amount=4000)],
        issued_at=ISSUED_AT,
    )


@pytest.fixture
def config() -> ReceiptConfig:
    return ReceiptConfig()
