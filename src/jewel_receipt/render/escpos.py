"""
ESC/POS command subset

Only these sequences are ever emitted. ``sanitize_thermal_payload``
strips exactly this set, which turns a thermal stream back into the
plain text a customer would read off the paper.
"""

from jewel_receipt.layout.text import Align


class EscPos:
    """ESC/POS control sequences"""
    RESET = "\x1b@"
    ALIGN_LEFT = "\x1ba\x00"
    ALIGN_CENTER = "\x1ba\x01"
    ALIGN_RIGHT = "\x1ba\x02"
    BOLD_ON = "\x1bE\x01"
    BOLD_OFF = "\x1bE\x00"
    DOUBLE_ON = "\x1d!\x11"
    DOUBLE_OFF = "\x1d!\x00"
    NEWLINE = "\x0a"
    NUL = "\x00"


ALIGN_COMMANDS = {
    Align.LEFT: EscPos.ALIGN_LEFT,
    Align.CENTER: EscPos.ALIGN_CENTER,
    Align.RIGHT: EscPos.ALIGN_RIGHT,
}

CONTROL_SEQUENCES = (
    EscPos.RESET,
    EscPos.ALIGN_LEFT,
    EscPos.ALIGN_CENTER,
    EscPos.ALIGN_RIGHT,
    EscPos.BOLD_ON,
    EscPos.BOLD_OFF,
    EscPos.DOUBLE_ON,
    EscPos.DOUBLE_OFF,
)


def sanitize_thermal_payload(payload: str) -> str:
    """
    Remove every recognised control sequence from a thermal stream

    Newlines are kept as ``\\n``; NUL padding is dropped.
    """
    text = payload
    for sequence in CONTROL_SEQUENCES:
        text = text.replace(sequence, "")
    return text.replace(EscPos.NUL, "")
