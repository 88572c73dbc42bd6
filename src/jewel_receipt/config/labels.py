"""Printed captions; override any field to localise a receipt"""

from pydantic import BaseModel


class ReceiptLabels(BaseModel):
    """Captions used by every receipt layout"""

    # Titles
    estimation_slip: str = "ESTIMATION SLIP"
    purchase_voucher: str = "PURCHASE VOUCHER"
    chit_receipt: str = "CHIT RECEIPT"
    advance_receipt: str = "ADVANCE RECEIPT"
    receipt: str = "RECEIPT"
    repair_receipt: str = "REPAIR RECEIPT"
    delivery_receipt: str = "DELIVERY RECEIPT"
    test_print: str = "TEST PRINT"

    # Section headings
    purchase_section: str = "OLD GOLD PURCHASE"
    chit_section: str = "CHIT SCHEME"
    advance_section: str = "ADVANCE ADJUSTMENT"

    # Column headers
    item: str = "ITEM"
    pcs: str = "PCS"
    weight: str = "WT"
    wastage: str = "VA"
    making_charge: str = "MC"
    amount: str = "AMOUNT"
    net_weight_column: str = "NET WT"
    less: str = "LESS"
    rate: str = "RATE"
    issue: str = "ISSUE"

    # Lines
    device: str = "Device"
    gstin: str = "GSTIN"
    phone: str = "Tel"
    estimation_number: str = "Est #"
    date: str = "Date"
    gold_rate: str = "G"
    silver_rate: str = "S"
    customer: str = "Customer"
    customer_phone: str = "Phone"
    customer_address: str = "Place"
    operator: str = "Operator"
    tag: str = "TAG"
    gross_weight: str = "G.Wt"
    net_weight: str = "N.Wt"
    stone_weight: str = "St.Wt"
    total: str = "TOTAL"
    total_gross_weight: str = "GROSS WT"
    total_net_weight: str = "NET WT"
    cgst: str = "CGST"
    sgst: str = "SGST"
    estimation_amount: str = "EST. AMOUNT"
    purchase_total: str = "PURCHASE TOTAL"
    chit: str = "Chit"
    advance: str = "Advance"
    deductions: str = "DEDUCTIONS"
    net_amount: str = "NET AMOUNT"
    thank_you: str = "THANK YOU, VISIT AGAIN"

    # Repair slips
    repair_number: str = "Repair No"
    due_date: str = "Due Date"
    advance_paid: str = "Advance Paid"
    balance_due: str = "Balance Due"
    extra_amount: str = "Extra Amount"
    gst: str = "GST"
    total_paid: str = "Total Paid"
    status: str = "Status"
    status_ok: str = "STATUS: SUCCESSFUL"
