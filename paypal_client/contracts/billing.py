from __future__ import annotations

from datetime import datetime
from typing import Any

from paypal_client.contracts.common import Address, Link, Money, Name, PayPalModel, Phone, TaxInfo
from paypal_client.contracts.enums import (
    IntervalUnit,
    PayeePreferred,
    PlanStatus,
    SetupFeeFailureAction,
    ShippingPreference,
    SubscriptionStatus,
    TenureType,
)


class Frequency(PayPalModel):
    interval_unit: IntervalUnit
    interval_count: int | None = None


class PricingScheme(PayPalModel):
    fixed_price: Money | None = None
    version: int | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None


class BillingCycle(PayPalModel):
    frequency: Frequency
    tenure_type: TenureType
    sequence: int
    total_cycles: int | None = None
    pricing_scheme: PricingScheme | None = None


class PaymentPreferences(PayPalModel):
    auto_bill_outstanding: bool | None = None
    setup_fee: Money | None = None
    setup_fee_failure_action: SetupFeeFailureAction | None = None
    payment_failure_threshold: int | None = None


class Taxes(PayPalModel):
    percentage: str
    inclusive: bool | None = None


class Plan(PayPalModel):
    id: str
    product_id: str | None = None
    name: str | None = None
    description: str | None = None
    status: PlanStatus | None = None
    billing_cycles: list[BillingCycle] = []
    payment_preferences: PaymentPreferences | None = None
    taxes: Taxes | None = None
    quantity_supported: bool | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class PlanList(PayPalModel):
    plans: list[Plan] = []
    total_items: int | None = None
    total_pages: int | None = None
    links: list[Link] = []


class CreatePlanRequest(PayPalModel):
    product_id: str | None = None
    name: str
    description: str | None = None
    status: PlanStatus | None = None
    billing_cycles: list[BillingCycle]
    payment_preferences: PaymentPreferences | None = None
    taxes: Taxes | None = None
    quantity_supported: bool | None = None


class PricingSchemeUpdate(PayPalModel):
    billing_cycle_sequence: int
    pricing_scheme: PricingScheme


class ShippingAddress(PayPalModel):
    name: Name | None = None
    address: Address | None = None


class Card(PayPalModel):
    name: str | None = None
    number: str | None = None
    security_code: str | None = None
    expiry: str | None = None
    billing_address: Address | None = None


class PayPalWallet(PayPalModel):
    vault_id: str | None = None
    email_address: str | None = None
    name: Name | None = None
    phone: Phone | None = None
    birth_date: str | None = None
    tax_info: TaxInfo | None = None
    address: Address | None = None


class PaymentSource(PayPalModel):
    card: Card | None = None
    paypal: PayPalWallet | None = None


class Subscriber(PayPalModel):
    name: Name | None = None
    email_address: str | None = None
    payer_id: str | None = None
    shipping_address: ShippingAddress | None = None
    payment_source: PaymentSource | None = None


class PaymentMethodPreference(PayPalModel):
    payer_selected: str | None = None
    payee_preferred: PayeePreferred | None = None


class ApplicationContext(PayPalModel):
    brand_name: str | None = None
    locale: str | None = None
    shipping_preference: ShippingPreference | None = None
    user_action: str | None = None
    payment_method: PaymentMethodPreference | None = None
    return_url: str | None = None
    cancel_url: str | None = None


class PlanOverride(PayPalModel):
    billing_cycles: list[BillingCycle] | None = None
    payment_preferences: PaymentPreferences | None = None
    taxes: Taxes | None = None


class CycleExecution(PayPalModel):
    tenure_type: TenureType
    sequence: int
    cycles_completed: int
    cycles_remaining: int | None = None
    total_cycles: int | None = None


class LastPayment(PayPalModel):
    amount: Money | None = None
    time: datetime | None = None


class BillingInfo(PayPalModel):
    outstanding_balance: Money | None = None
    cycle_executions: list[CycleExecution] = []
    last_payment: LastPayment | None = None
    next_billing_time: datetime | None = None
    final_payment_time: datetime | None = None
    failed_payments_count: int | None = None


class Subscription(PayPalModel):
    id: str
    plan_id: str | None = None
    status: SubscriptionStatus
    status_update_time: datetime | None = None
    start_time: datetime | None = None
    quantity: str | None = None
    shipping_amount: Money | None = None
    subscriber: Subscriber | None = None
    billing_info: BillingInfo | None = None
    plan_overridden: bool | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[Link] = []


class SubscriptionList(PayPalModel):
    subscriptions: list[Subscription] = []
    total_items: int | None = None
    total_pages: int | None = None
    links: list[Link] = []


class CreateSubscriptionRequest(PayPalModel):
    plan_id: str
    start_time: str | None = None
    quantity: str | None = None
    shipping_amount: Money | None = None
    subscriber: Subscriber | None = None
    custom_id: str | None = None
    application_context: ApplicationContext | None = None
    plan: PlanOverride | None = None


class ReviseSubscriptionRequest(PayPalModel):
    plan_id: str | None = None
    quantity: str | None = None
    shipping_amount: Money | None = None
    shipping_address: ShippingAddress | None = None
    application_context: ApplicationContext | None = None
    plan: PlanOverride | None = None


class SubscriptionRevision(PayPalModel):
    plan_id: str | None = None
    quantity: str | None = None
    plan_overridden: bool | None = None
    shipping_amount: Money | None = None
    links: list[Link] = []


class Transaction(PayPalModel):
    id: str
    status: str | None = None
    amount_with_breakdown: dict[str, Any] | None = None
    payer_name: Name | None = None
    payer_email: str | None = None
    time: datetime | None = None


class TransactionList(PayPalModel):
    transactions: list[Transaction] = []
    total_items: int | None = None
    total_pages: int | None = None
    links: list[Link] = []
