# freshcart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import Dict, List
from decimal import Decimal
from datetime import datetime


class WeightOut(BaseModel):
    value_kg: Decimal
    label: str
    display_short: str

    model_config = ConfigDict(from_attributes=True)


# ---- catalog ----

class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None


class CategoryOut(BaseModel):
    id: str
    name: str
    description: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Schema dla tworzenia produktu (admin)."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: Decimal = Field(..., gt=0, description="Price per kg")
    category_id: str | None = None
    category: str | None = None
    image_url: str = ""
    in_stock: int = Field(1, ge=0)


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    price: Decimal | None = Field(None, gt=0)
    category_id: str | None = None
    category: str | None = None
    image_url: str | None = None
    in_stock: int | None = Field(None, ge=0)


class ProductOut(BaseModel):
    id: str
    name: str
    description: str
    price: Decimal
    category_id: str | None = None
    category: str
    image_url: str
    in_stock: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---- cart ----

class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., min_length=1)
    weight_kg: Decimal = Field(..., gt=0, description="One of the package weights from /weights")


class CartItemUpdate(BaseModel):
    quantity: int | None = None
    weight_kg: Decimal | None = Field(None, gt=0)


class CartLineOut(BaseModel):
    composite_id: str
    product_id: str
    name: str
    unit_price_per_kg: Decimal
    image_url: str
    weight_kg: Decimal
    weight_label: str
    quantity: int
    amount: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    session_id: str
    items: List[CartLineOut]
    total_items: int
    total: Decimal
    delivery_fee: Decimal
    grand_total: Decimal


# ---- users ----

class UserCreate(BaseModel):
    id: str | None = Field(None, min_length=1, max_length=36)
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr | None = None


class ShippingProfile(BaseModel):
    shipping_name: str | None = None
    shipping_phone: str | None = None
    shipping_address: str | None = None
    shipping_flat_number: str | None = None


class UserRead(BaseModel):
    id: str
    name: str
    email: str | None = None
    role: str
    shipping_name: str | None = None
    shipping_phone: str | None = None
    shipping_address: str | None = None
    shipping_flat_number: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RoleUpdate(BaseModel):
    role: str


# ---- orders ----

class ShippingInfo(BaseModel):
    """Dane z formularza wysylki - wszystkie pola poza notatka wymagane."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=5, max_length=20)
    society_name: str = Field(..., min_length=1)
    flat_number: str = Field(..., min_length=1)


class CheckoutIn(BaseModel):
    session_id: str = Field(..., min_length=1)
    shipping: ShippingInfo
    payment_method: str = Field("cod", pattern="^(cod|online)$")
    notes: str | None = None


class OrderItemOut(BaseModel):
    id: str
    product_id: str
    product_name: str
    quantity: int
    weight_kg: Decimal
    unit_price_per_kg: Decimal
    amount: Decimal


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: str
    user_id: str
    total: Decimal
    delivery_fee: Decimal
    status: str
    payment_status: str
    shipping_name: str
    shipping_email: str
    shipping_phone: str
    shipping_address: str
    shipping_flat_number: str
    payment_method: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemOut]


class StatusUpdate(BaseModel):
    status: str


class PaymentStatusUpdate(BaseModel):
    payment_status: str


# ---- payments ----

class PaymentInitIn(BaseModel):
    order_id: str


class PaymentInitOut(BaseModel):
    payment_id: str
    order_id: str
    gateway_order_id: str
    key_id: str
    amount: int
    currency: str


class PaymentVerifyIn(BaseModel):
    order_id: str
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str


class PaymentOut(BaseModel):
    id: str
    order_id: str
    gateway_order_id: str | None = None
    gateway_payment_id: str | None = None
    amount: Decimal
    currency: str
    status: str
    payment_method: str | None = None

    model_config = ConfigDict(from_attributes=True)


# ---- enquiries ----

class ContactIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=20)
    message: str = Field(..., min_length=1)


class ContactOut(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    message: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductSuggestionIn(BaseModel):
    suggested_product_name: str = Field(..., min_length=1, max_length=200)
    product_description: str | None = None
    suggested_category: str | None = Field(None, max_length=100)
    user_email: EmailStr | None = None


class ProductSuggestionOut(BaseModel):
    id: str
    suggested_product_name: str
    product_description: str | None = None
    suggested_category: str | None = None
    user_email: str | None = None
    status: str
    admin_notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SuggestionStatusUpdate(BaseModel):
    status: str


class SuggestionNotesUpdate(BaseModel):
    admin_notes: str | None = None


class SocietyRequestIn(BaseModel):
    """Schema dla prosby o dowoz do nowego osiedla."""

    name: str = Field(..., min_length=1, max_length=100)
    society_name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=5, max_length=20)


class SocietyRequestOut(BaseModel):
    id: str
    name: str
    society_name: str
    phone: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---- admin ----

class ProductSales(BaseModel):
    product_id: str
    product_name: str
    total_quantity: int
    total_revenue: Decimal


class LowStockItem(BaseModel):
    id: str
    name: str
    in_stock: int


class AnalyticsSummary(BaseModel):
    total_revenue: Decimal
    total_orders: int
    total_products: int
    total_users: int
    total_categories: int


class AnalyticsOut(BaseModel):
    summary: AnalyticsSummary
    orders_by_status: Dict[str, int]
    recent_orders: int
    top_products: List[ProductSales]
    low_stock_products: int
    low_stock_items: List[LowStockItem]
