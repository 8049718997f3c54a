from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    SANDBOX = "sandbox"
    LIVE = "live"


class ErrorType(str, Enum):
    API_ERROR = "api_error"
    CONNECTION_ERROR = "connection_error"
    AUTHENTICATION_ERROR = "authentication_error"
    INVALID_REQUEST_ERROR = "invalid_request_error"
    IDEMPOTENCY_ERROR = "idempotency_error"
    RATE_LIMIT_ERROR = "rate_limit_error"


class OrderIntent(str, Enum):
    CAPTURE = "CAPTURE"
    AUTHORIZE = "AUTHORIZE"


class OrderStatus(str, Enum):
    CREATED = "CREATED"
    SAVED = "SAVED"
    APPROVED = "APPROVED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"
    PAYER_ACTION_REQUIRED = "PAYER_ACTION_REQUIRED"


class PatchOp(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class LandingPage(str, Enum):
    LOGIN = "LOGIN"
    GUEST_CHECKOUT = "GUEST_CHECKOUT"
    NO_PREFERENCE = "NO_PREFERENCE"


class PayeePreferred(str, Enum):
    UNRESTRICTED = "UNRESTRICTED"
    IMMEDIATE_PAYMENT_REQUIRED = "IMMEDIATE_PAYMENT_REQUIRED"


class ShippingPreference(str, Enum):
    GET_FROM_FILE = "GET_FROM_FILE"
    NO_SHIPPING = "NO_SHIPPING"
    SET_PROVIDED_ADDRESS = "SET_PROVIDED_ADDRESS"


class ItemCategory(str, Enum):
    DIGITAL_GOODS = "DIGITAL_GOODS"
    PHYSICAL_GOODS = "PHYSICAL_GOODS"
    DONATION = "DONATION"


class DisbursementMode(str, Enum):
    INSTANT = "INSTANT"
    DELAYED = "DELAYED"


class SellerProtectionStatus(str, Enum):
    ELIGIBLE = "ELIGIBLE"
    PARTIALLY_ELIGIBLE = "PARTIALLY_ELIGIBLE"
    NOT_ELIGIBLE = "NOT_ELIGIBLE"


class PlanStatus(str, Enum):
    CREATED = "CREATED"
    INACTIVE = "INACTIVE"
    ACTIVE = "ACTIVE"


class SubscriptionStatus(str, Enum):
    APPROVAL_PENDING = "APPROVAL_PENDING"
    APPROVED = "APPROVED"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"


class TenureType(str, Enum):
    REGULAR = "REGULAR"
    TRIAL = "TRIAL"


class IntervalUnit(str, Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class SetupFeeFailureAction(str, Enum):
    CONTINUE = "CONTINUE"
    CANCEL = "CANCEL"


class PhoneType(str, Enum):
    FAX = "FAX"
    HOME = "HOME"
    MOBILE = "MOBILE"
    OTHER = "OTHER"
    PAGER = "PAGER"


class VerificationStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
