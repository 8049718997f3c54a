from __future__ import annotations

from datetime import date, datetime
from typing import Any

from paypal_client.contracts.common import Address, Link, Money, Name, PayPalModel, Phone, TaxInfo
from paypal_client.contracts.enums import (
    DisbursementMode,
    ItemCategory,
    LandingPage,
    OrderIntent,
    OrderStatus,
    PayeePreferred,
    ShippingPreference,
)
from paypal_client.contracts.payments import PaymentCollection


class AmountBreakdown(PayPalModel):
    item_total: Money | None = None
    shipping: Money | None = None
    handling: Money | None = None
    tax_total: Money | None = None
    insurance: Money | None = None
    shipping_discount: Money | None = None
    discount: Money | None = None


class Amount(PayPalModel):
    currency_code: str
    value: str
    breakdown: AmountBreakdown | None = None


class Payee(PayPalModel):
    email_address: str | None = None
    merchant_id: str | None = None


class PlatformFee(PayPalModel):
    amount: Money
    payee: Payee | None = None


class PaymentInstruction(PayPalModel):
    platform_fees: list[PlatformFee] = []
    disbursement_mode: DisbursementMode | None = None


class Item(PayPalModel):
    name: str
    unit_amount: Money
    quantity: str
    tax: Money | None = None
    description: str | None = None
    sku: str | None = None
    category: ItemCategory | None = None


class ShippingInfo(PayPalModel):
    method: str | None = None
    name: Name | None = None
    address: Address | None = None


class PurchaseUnit(PayPalModel):
    reference_id: str | None = None
    amount: Amount | None = None
    payee: Payee | None = None
    payment_instruction: PaymentInstruction | None = None
    description: str | None = None
    custom_id: str | None = None
    invoice_id: str | None = None
    soft_descriptor: str | None = None
    items: list[Item] | None = None
    shipping: ShippingInfo | None = None
    payments: PaymentCollection | None = None


class Payer(PayPalModel):
    name: Name | None = None
    email_address: str | None = None
    payer_id: str | None = None
    address: Address | None = None
    phone: Phone | None = None
    birth_date: date | None = None
    tax_info: TaxInfo | None = None


class OrderPaymentMethod(PayPalModel):
    payer_selected: str | None = None
    payee_preferred: PayeePreferred | None = None


class OrderApplicationContext(PayPalModel):
    return_url: str | None = None
    cancel_url: str | None = None
    brand_name: str | None = None
    locale: str | None = None
    landing_page: LandingPage | None = None
    shipping_preference: ShippingPreference | None = None
    user_action: str | None = None
    payment_method: OrderPaymentMethod | None = None


class Order(PayPalModel):
    id: str
    status: OrderStatus
    intent: OrderIntent | None = None
    purchase_units: list[PurchaseUnit] = []
    payer: Payer | None = None
    payment_source: dict[str, Any] | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class CreateOrderRequest(PayPalModel):
    intent: OrderIntent
    purchase_units: list[PurchaseUnit]
    payer: Payer | None = None
    payment_source: dict[str, Any] | None = None
    application_context: OrderApplicationContext | None = None


class OrderPaymentRequest(PayPalModel):
    """Body of authorize, capture and confirm-payment-source calls."""

    payment_source: dict[str, Any] | None = None
    application_context: OrderApplicationContext | None = None
