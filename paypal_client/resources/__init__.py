from paypal_client.resources.orders import OrdersResource
from paypal_client.resources.payments import PaymentsResource
from paypal_client.resources.plans import PlansResource
from paypal_client.resources.subscriptions import SubscriptionsResource
from paypal_client.resources.webhooks import WebhooksResource, transmission_fields

__all__ = [
    "OrdersResource",
    "PaymentsResource",
    "PlansResource",
    "SubscriptionsResource",
    "WebhooksResource",
    "transmission_fields",
]
