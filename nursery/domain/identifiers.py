# nursery/domain/identifiers.py
import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_uppercase
_SUFFIX_LENGTH = 9


def _make_id(prefix: str, now_ms: int | None = None) -> str:
    #znacznik czasu + losowy sufiks base36, kolizja mało prawdopodobna (unique w bazie i tak pilnuje)
    ts = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{prefix}-{ts}-{suffix}"


def new_order_id(now_ms: int | None = None) -> str:
    return _make_id("ORD", now_ms)


def new_transaction_id(now_ms: int | None = None) -> str:
    return _make_id("TXN", now_ms)
