from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from paypal_client.contracts.enums import PatchOp, PhoneType


class PayPalModel(BaseModel):
    """Immutable record mirroring a PayPal JSON object.

    Fields PayPal adds later are kept as extras instead of being rejected.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class Money(PayPalModel):
    currency_code: str = Field(min_length=3, max_length=3)
    value: str


class Link(PayPalModel):
    href: str
    rel: str
    method: str | None = None


class Name(PayPalModel):
    given_name: str | None = None
    surname: str | None = None
    full_name: str | None = None


class Address(PayPalModel):
    address_line_1: str | None = None
    address_line_2: str | None = None
    admin_area_2: str | None = None
    admin_area_1: str | None = None
    postal_code: str | None = None
    country_code: str


class PhoneNumber(PayPalModel):
    national_number: str


class Phone(PayPalModel):
    phone_type: PhoneType | None = None
    phone_number: PhoneNumber | None = None


class TaxInfo(PayPalModel):
    tax_id: str
    tax_id_type: str


class ErrorDetail(PayPalModel):
    issue: str
    field: str | None = None
    value: str | None = None
    location: str | None = None
    description: str | None = None


class PatchOperation(PayPalModel):
    op: PatchOp
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")
