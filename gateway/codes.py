# gateway/codes.py
"""
Gateway result codes and their user-facing messages.

Every message shown to a payer about a gateway outcome goes through
``translate_code`` so the wording lives in one place.
"""

from __future__ import annotations

from typing import Any, Dict

SUCCESS = 100
ALREADY_VERIFIED = 201

# Not issued by the gateway: reserved for transport failures (DNS, TLS,
# timeout, unparsable body) so callers branch on a single result code.
TRANSPORT_FAILURE = -999

MESSAGES: Dict[int, str] = {
    100: "Payment was successful.",
    102: "Merchant is inactive.",
    103: "Invalid Merchant ID.",
    104: "Amount is greater than the allowed limit.",
    105: "Amount is less than the allowed minimum.",
    106: "Invalid callback URL.",
    113: "Transaction amount and verified amount are not equal.",
    201: "This transaction has already been verified.",
    202: "Order is unpaid or the payment was unsuccessful.",
    203: "Invalid trackId.",
    TRANSPORT_FAILURE: "Error connecting to the server.",
}


def translate_code(code: Any) -> str:
    """Return the message for a gateway result code. Never raises."""
    try:
        key = int(code)
    except (TypeError, ValueError, OverflowError):
        return f"Undefined error, code={code}."
    return MESSAGES.get(key, f"Undefined error, code={key}.")
