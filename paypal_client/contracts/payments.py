from __future__ import annotations

from datetime import datetime

from paypal_client.contracts.common import Link, Money, PayPalModel
from paypal_client.contracts.enums import SellerProtectionStatus


class SellerProtection(PayPalModel):
    status: SellerProtectionStatus
    dispute_categories: list[str] = []


class ExchangeRate(PayPalModel):
    source_currency: str
    target_currency: str
    value: str


class SellerReceivableBreakdown(PayPalModel):
    gross_amount: Money
    paypal_fee: Money | None = None
    paypal_fee_in_receivable_currency: Money | None = None
    net_amount: Money | None = None
    receivable_amount: Money | None = None
    exchange_rate: ExchangeRate | None = None


class SellerPayableBreakdown(PayPalModel):
    gross_amount: Money
    paypal_fee: Money | None = None
    paypal_fee_in_receivable_currency: Money | None = None
    net_amount: Money | None = None
    total_refunded_amount: Money | None = None


class Authorization(PayPalModel):
    id: str
    status: str
    amount: Money | None = None
    invoice_id: str | None = None
    custom_id: str | None = None
    network_transaction_id: str | None = None
    seller_protection: SellerProtection | None = None
    expiration_time: datetime | None = None
    links: list[Link] = []
    create_time: datetime | None = None
    update_time: datetime | None = None


class Capture(PayPalModel):
    id: str
    status: str
    amount: Money | None = None
    invoice_id: str | None = None
    custom_id: str | None = None
    network_transaction_id: str | None = None
    seller_protection: SellerProtection | None = None
    final_capture: bool | None = None
    seller_receivable_breakdown: SellerReceivableBreakdown | None = None
    disbursement_mode: str | None = None
    links: list[Link] = []
    create_time: datetime | None = None
    update_time: datetime | None = None


class Refund(PayPalModel):
    id: str
    status: str
    amount: Money | None = None
    invoice_id: str | None = None
    custom_id: str | None = None
    acquirer_reference_number: str | None = None
    note_to_payer: str | None = None
    seller_payable_breakdown: SellerPayableBreakdown | None = None
    links: list[Link] = []
    create_time: datetime | None = None
    update_time: datetime | None = None


class PaymentCollection(PayPalModel):
    authorizations: list[Authorization] = []
    captures: list[Capture] = []
    refunds: list[Refund] = []


class RefundCaptureRequest(PayPalModel):
    amount: Money | None = None
    invoice_id: str | None = None
    note_to_payer: str | None = None


class CaptureAuthorizationRequest(PayPalModel):
    amount: Money | None = None
    invoice_id: str | None = None
    note_to_payer: str | None = None
    soft_descriptor: str | None = None
    final_capture: bool | None = None


class ReauthorizeRequest(PayPalModel):
    amount: Money
