# nursery/domain/schemas.py
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


# ---------- Users ----------

class UserCreate(BaseModel):
    """Schema dla rejestracji klienta."""

    name: str = Field(..., min_length=1, max_length=100, description="Imie i nazwisko")
    email: EmailStr
    phone: str | None = Field(None, max_length=20)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    user_type: str
    registered_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- Products ----------

class ProductCreate(BaseModel):
    """Schema dla dodawania rosliny do katalogu (admin)."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    image: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    original_price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(0, ge=0)
    status: Literal["active", "inactive"] = "active"
    care_instructions: str | None = None
    is_popular: bool = False


class ProductUpdate(BaseModel):
    """Czesciowa aktualizacja - tylko podane pola. Stan magazynu idzie przez /stock."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1, max_length=100)
    image: str | None = Field(None, min_length=1)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    original_price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    care_instructions: str | None = None
    is_popular: bool | None = None


class StockUpdate(BaseModel):
    stock: int = Field(..., ge=0, description="Nowy stan magazynowy (>= 0)")


class ProductOut(BaseModel):
    id: int
    name: str
    description: str
    category: str
    image: str
    price: Decimal
    original_price: Decimal | None = None
    stock: int
    status: str
    care_instructions: str | None = None
    is_popular: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductPage(BaseModel):
    products: List[ProductOut]
    total: int
    total_pages: int
    current_page: int


# ---------- Checkout ----------

class CartItemIn(BaseModel):
    """
    Pozycja koszyka. Klient moze przyslac tez name/price/image,
    ale sa ignorowane - cena zawsze z katalogu.
    """

    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=1)


class CardPaymentIn(BaseModel):
    method: Literal["credit_card"]
    card_number: str
    expiry_date: str
    cvv: str
    card_holder_name: str = Field(..., min_length=1)

    @field_validator("card_number")
    @classmethod
    def _card_number(cls, v: str) -> str:
        digits = v.replace(" ", "")
        if not re.fullmatch(r"\d{16}", digits):
            raise ValueError("Please enter a valid 16-digit card number.")
        return digits

    @field_validator("expiry_date")
    @classmethod
    def _expiry(cls, v: str) -> str:
        if not re.fullmatch(r"\d{2}/\d{2}", v):
            raise ValueError("Please enter expiry date in MM/YY format.")
        return v

    @field_validator("cvv")
    @classmethod
    def _cvv(cls, v: str) -> str:
        if not re.fullmatch(r"\d{3}", v):
            raise ValueError("Please enter a valid 3-digit CVV.")
        return v

    def reference(self) -> str:
        return f"**** **** **** {self.card_number[-4:]}"


class UpiPaymentIn(BaseModel):
    method: Literal["upi"]
    upi_id: str = Field(..., min_length=1)
    upi_app: str = Field(..., min_length=1)

    @field_validator("upi_id")
    @classmethod
    def _upi_id(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("Please enter a valid UPI ID (e.g., yourname@upi).")
        return v

    def reference(self) -> str:
        return self.upi_id


class CodPaymentIn(BaseModel):
    method: Literal["cod"]
    phone: str
    address: str = Field(..., min_length=1)

    @field_validator("phone")
    @classmethod
    def _phone(cls, v: str) -> str:
        if not re.fullmatch(r"\d{10}", v):
            raise ValueError("Please enter a valid 10-digit phone number.")
        return v

    def reference(self) -> str:
        return self.phone


PaymentIn = Annotated[
    Union[CardPaymentIn, UpiPaymentIn, CodPaymentIn],
    Field(discriminator="method"),
]


class ScheduleIn(BaseModel):
    """Basket Ready - dostawa albo odbior osobisty w wybranym terminie."""

    fulfillment_type: Literal["delivery", "pickup"]
    preferred_date: date
    preferred_time: str = Field(..., min_length=1)
    special_instructions: str | None = None


class DeliveryDetailsIn(BaseModel):
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    pin: str | None = None
    notes: str | None = None


class OffersIn(BaseModel):
    free_shipping: bool = False
    bulk_discount: bool = False


class OrderCreate(BaseModel):
    """Schema dla skladania zamowienia. Klient bierze sie z naglowka, nie z body."""

    items: List[CartItemIn] = Field(..., min_length=1)
    payment: PaymentIn
    schedule: ScheduleIn
    delivery_details: DeliveryDetailsIn | None = None
    offers: OffersIn = Field(default_factory=OffersIn)


class OrderConfirmationOut(BaseModel):
    order_id: str
    transaction_id: str
    total: Decimal
    status: str


# ---------- Orders ----------

class OrderItemOut(BaseModel):
    product_id: int
    name: str
    image: str | None = None
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    order_id: str
    transaction_id: str
    customer_id: int
    customer_name: str | None = None
    customer_email: str | None = None
    items: List[OrderItemOut]
    subtotal: Decimal
    bulk_discount: Decimal
    tax: Decimal
    shipping: Decimal
    cod_charge: Decimal
    total: Decimal
    payment_method: str
    payment_reference: str | None = None
    payment_status: str
    fulfillment_status: str
    delivery_details: dict | None = None
    schedule: dict
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- Consultations ----------

class ConsultationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=2000)


class ConsultationUpdate(BaseModel):
    status: Literal["pending", "done"]


class ConsultationOut(BaseModel):
    id: int
    name: str
    email: str
    message: str
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------- Admin ----------

class DashboardStats(BaseModel):
    total_customers: int
    total_products: int
    total_orders: int
    completed_orders: int
    total_revenue: Decimal
    pending_consultations: int


class DashboardOut(BaseModel):
    stats: DashboardStats
    recent_orders: List[OrderOut]


class RevenuePeriod(BaseModel):
    period: str
    revenue: Decimal
    orders: int


class RevenueOut(BaseModel):
    breakdown: List[RevenuePeriod]


class ChartSeries(BaseModel):
    """Punkty wykresu: etykiety i wartosci tej samej dlugosci, puste okresy = 0."""

    labels: List[str]
    values: List[Decimal]


class CategoryRevenue(BaseModel):
    category: str
    revenue: Decimal
    orders: int


class AnalyticsOut(BaseModel):
    timeframe: Literal["daily", "monthly", "yearly"]
    metric: Literal["revenue", "orders", "customers"]
    chart: ChartSeries
    breakdown: List[RevenuePeriod]
    categories: List[CategoryRevenue]
