from paypal_client.contracts.billing import (
    ApplicationContext,
    BillingCycle,
    BillingInfo,
    Card,
    CreatePlanRequest,
    CreateSubscriptionRequest,
    CycleExecution,
    Frequency,
    LastPayment,
    PaymentMethodPreference,
    PaymentPreferences,
    PaymentSource,
    PayPalWallet,
    Plan,
    PlanList,
    PlanOverride,
    PricingScheme,
    PricingSchemeUpdate,
    ReviseSubscriptionRequest,
    ShippingAddress,
    Subscriber,
    Subscription,
    SubscriptionList,
    SubscriptionRevision,
    Taxes,
    Transaction,
    TransactionList,
)
from paypal_client.contracts.common import (
    Address,
    ErrorDetail,
    Link,
    Money,
    Name,
    PatchOperation,
    PayPalModel,
    Phone,
    PhoneNumber,
    TaxInfo,
)
from paypal_client.contracts.enums import (
    DisbursementMode,
    Environment,
    ErrorType,
    IntervalUnit,
    ItemCategory,
    LandingPage,
    OrderIntent,
    OrderStatus,
    PatchOp,
    PayeePreferred,
    PhoneType,
    PlanStatus,
    SellerProtectionStatus,
    SetupFeeFailureAction,
    ShippingPreference,
    SubscriptionStatus,
    TenureType,
    VerificationStatus,
)
from paypal_client.contracts.orders import (
    Amount,
    AmountBreakdown,
    CreateOrderRequest,
    Item,
    Order,
    OrderApplicationContext,
    OrderPaymentMethod,
    OrderPaymentRequest,
    Payee,
    Payer,
    PaymentInstruction,
    PlatformFee,
    PurchaseUnit,
    ShippingInfo,
)
from paypal_client.contracts.payments import (
    Authorization,
    Capture,
    CaptureAuthorizationRequest,
    ExchangeRate,
    PaymentCollection,
    ReauthorizeRequest,
    Refund,
    RefundCaptureRequest,
    SellerPayableBreakdown,
    SellerProtection,
    SellerReceivableBreakdown,
)
from paypal_client.contracts.webhooks import (
    VerifyWebhookSignatureRequest,
    VerifyWebhookSignatureResponse,
    WebhookEvent,
    WebhookEventList,
)

__all__ = [
    "Address",
    "Amount",
    "AmountBreakdown",
    "ApplicationContext",
    "Authorization",
    "BillingCycle",
    "BillingInfo",
    "Capture",
    "CaptureAuthorizationRequest",
    "Card",
    "CreateOrderRequest",
    "CreatePlanRequest",
    "CreateSubscriptionRequest",
    "CycleExecution",
    "DisbursementMode",
    "Environment",
    "ErrorDetail",
    "ErrorType",
    "ExchangeRate",
    "Frequency",
    "IntervalUnit",
    "Item",
    "ItemCategory",
    "LandingPage",
    "LastPayment",
    "Link",
    "Money",
    "Name",
    "Order",
    "OrderApplicationContext",
    "OrderIntent",
    "OrderPaymentMethod",
    "OrderPaymentRequest",
    "OrderStatus",
    "PatchOp",
    "PatchOperation",
    "PayPalModel",
    "PayPalWallet",
    "Payee",
    "PayeePreferred",
    "Payer",
    "PaymentCollection",
    "PaymentInstruction",
    "PaymentMethodPreference",
    "PaymentPreferences",
    "PaymentSource",
    "Phone",
    "PhoneNumber",
    "PhoneType",
    "Plan",
    "PlanList",
    "PlanOverride",
    "PlanStatus",
    "PlatformFee",
    "PricingScheme",
    "PricingSchemeUpdate",
    "PurchaseUnit",
    "ReauthorizeRequest",
    "Refund",
    "RefundCaptureRequest",
    "ReviseSubscriptionRequest",
    "SellerPayableBreakdown",
    "SellerProtection",
    "SellerProtectionStatus",
    "SellerReceivableBreakdown",
    "SetupFeeFailureAction",
    "ShippingAddress",
    "ShippingInfo",
    "ShippingPreference",
    "Subscriber",
    "Subscription",
    "SubscriptionList",
    "SubscriptionRevision",
    "SubscriptionStatus",
    "TaxInfo",
    "Taxes",
    "TenureType",
    "Transaction",
    "TransactionList",
    "VerificationStatus",
    "VerifyWebhookSignatureRequest",
    "VerifyWebhookSignatureResponse",
    "WebhookEvent",
    "WebhookEventList",
]
