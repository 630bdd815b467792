import re

from nursery.domain.identifiers import new_order_id, new_transaction_id


def test_order_id_format():
    assert re.fullmatch(r"ORD-\d{13}-[0-9A-Z]{9}", new_order_id())
    assert new_order_id(now_ms=1700000000000).startswith("ORD-1700000000000-")


def test_transaction_id_format():
    assert re.fullmatch(r"TXN-\d+-[0-9A-Z]{9}", new_transaction_id(now_ms=1700000000000))


def test_ids_are_unique_within_same_millisecond():
    ids = {new_order_id(now_ms=1700000000000) for _ in range(1000)}
    assert len(ids) == 1000
