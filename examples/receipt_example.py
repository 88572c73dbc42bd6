"""
Receipt Examples for Jewel Receipt
Demonstrates configuring, composing and printing receipts
"""

import logging
from datetime import datetime

from jewel_receipt import (
    ChitItem,
    ConfigLoader,
    ConfigValidator,
    CustomerDetails,
    EstimationItem,
    FileTransport,
    MarketRates,
    PurchaseItem,
    ReceiptComposer,
    ReceiptConfig,
    ReceiptPayload,
    RenderError,
    RepairOrder,
    ShopDetails,
    sanitize_thermal_payload,
)

SHOP = ShopDetails(
    name="Sri Lakshmi Jewellers",
    address="12 Bazaar Street, Madurai",
    phone="0452-2345678",
    gst_number="33ABCDE1234F1Z5",
    device_name="Counter 1",
    footer_message="Thank you, visit again",
)


def sample_payload() -> ReceiptPayload:
    return ReceiptPayload(
        items=[
            EstimationItem(
                name="Gold Ring",
                tag_number="T1001",
                gross_weight=10.25,
                stone_weight=0.25,
                rate=6150,
                wastage=12,
                making_charge=450,
                making_charge_type="perGram",
            ),
            EstimationItem(
                name="Silver Anklet",
                pcs=2,
                gross_weight=48,
                metal="SILVER",
                rate=92,
                wastage=1.5,
                wastage_type="grams",
                making_charge=300,
            ),
        ],
        purchase_items=[
            PurchaseItem(category="Old Chain", gross_weight=6, less_weight=4,
                         less_weight_type="percentage", rate=5800),
        ],
        chit_items=[ChitItem(chit_id="CH-2024-118", amount=25000)],
        customer=CustomerDetails(name="Meena", mobile="9876543210", address="Madurai"),
        employee_name="Ravi",
        estimation_number=42,
        rates=MarketRates(gold_22k=6150, silver=92),
    )


# =============================================================================
# Example 1: Configuration from several sources
# =============================================================================

def config_example() -> ReceiptConfig:
    """
    Merge configuration from multiple sources
    Priority: programmatic > environment (RECEIPT_*) > file
    """
    loader = ConfigLoader()
    return loader.load(
        env=True,
        config={
            "paper_width": "80mm",
            "making_charge_display_type": "auto",
        },
    )


# =============================================================================
# Example 2: Thermal preview in the terminal
# =============================================================================

def thermal_preview_example(config: ReceiptConfig) -> None:
    composer = ReceiptComposer(SHOP, config)
    receipt = composer.render_thermal(sample_payload())

    print(sanitize_thermal_payload(receipt.content))
    print(f"Net payable: {receipt.totals.net_payable:.2f}")


# =============================================================================
# Example 3: Print with HTML fallback
# =============================================================================

def print_example(config: ReceiptConfig) -> None:
    """
    Spool the ESC/POS job; if that fails the HTML rendering of the
    same receipt goes to the preview folder instead
    """
    composer = ReceiptComposer(SHOP, config)
    printer = FileTransport(suffix=".bin")
    preview = FileTransport(suffix=".html")

    try:
        outcome = composer.print_receipt(sample_payload(), printer, fallback=preview)
    except RenderError as e:
        print(f"Receipt not printed: {e.get_description()}")
        return

    sink = printer if not outcome.used_fallback else preview
    print(f"Printed as {outcome.format.value}: {sink.paths[-1]}")


# =============================================================================
# Example 4: Repair slip
# =============================================================================

def repair_example(config: ReceiptConfig) -> None:
    composer = ReceiptComposer(SHOP, config)
    repair = RepairOrder(
        id="R-1042",
        item_name="Gold Chain",
        issue="Broken clasp",
        advance=200,
        balance=300,
        due_date=datetime(2024, 3, 20),
        customer_name="Meena",
        customer_mobile="9876543210",
    )
    document = composer.compose_repair(repair, employee_name="Ravi")
    stream = composer.render_document(document, "thermal").content
    print(sanitize_thermal_payload(stream))


# =============================================================================
# Example 5: Configuration validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    validator = ConfigValidator()

    result = validator.validate({"paper_width": "76mm", "feed_lines": 40})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    print("=== Jewel Receipt Examples ===\n")

    config = config_example()

    print("1. Thermal preview:")
    thermal_preview_example(config)
    print()

    print("2. Print with fallback:")
    print_example(config)
    print()

    print("3. Repair slip:")
    repair_example(config)
    print()

    print("4. Configuration validation:")
    validation_example()
