# nursery/domain/pricing.py
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol

from nursery.utils import settings

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class PricingRules:
    tax_rate: Decimal
    shipping_fee: Decimal
    free_shipping_threshold: Decimal
    bulk_discount_rate: Decimal
    bulk_discount_min_quantity: int
    cod_charge: Decimal

    @classmethod
    def from_settings(cls) -> "PricingRules":
        return cls(
            tax_rate=Decimal(settings.TAX_RATE),
            shipping_fee=Decimal(settings.SHIPPING_FEE),
            free_shipping_threshold=Decimal(settings.FREE_SHIPPING_THRESHOLD),
            bulk_discount_rate=Decimal(settings.BULK_DISCOUNT_RATE),
            bulk_discount_min_quantity=settings.BULK_DISCOUNT_MIN_QUANTITY,
            cod_charge=Decimal(settings.COD_CHARGE),
        )


class PricedLine(Protocol):
    price: Decimal
    quantity: int


@dataclass(frozen=True, slots=True)
class OrderTotals:
    subtotal: Decimal
    bulk_discount: Decimal
    tax: Decimal
    shipping: Decimal
    cod_charge: Decimal
    total: Decimal


def price_order(
    lines: Iterable[PricedLine],
    payment_method: str,
    rules: PricingRules,
    free_shipping: bool = False,
    bulk_discount: bool = False,
) -> OrderTotals:
    """
    Liczy kwoty zamowienia z cen serwerowych.

    total = subtotal - bulk_discount + tax + shipping + cod_charge
    tax liczony od (subtotal - bulk_discount), darmowa wysylka tylko z opt-in
    i od progu, rabat ilosciowy tylko z opt-in i od minimalnej liczby sztuk.
    """
    lines = list(lines)
    subtotal = money(sum((Decimal(l.price) * l.quantity for l in lines), ZERO))
    quantity = sum(l.quantity for l in lines)

    if free_shipping and subtotal >= rules.free_shipping_threshold:
        shipping = ZERO
    else:
        shipping = money(rules.shipping_fee) if subtotal > 0 else ZERO

    discount = ZERO
    if bulk_discount and quantity >= rules.bulk_discount_min_quantity:
        discount = money(subtotal * rules.bulk_discount_rate)

    tax = money((subtotal - discount) * rules.tax_rate)
    cod = money(rules.cod_charge) if payment_method == "cod" else ZERO

    total = subtotal - discount + tax + shipping + cod
    return OrderTotals(
        subtotal=subtotal,
        bulk_discount=discount,
        tax=tax,
        shipping=shipping,
        cod_charge=cod,
        total=money(total),
    )
