from __future__ import annotations

from dataclasses import dataclass

from paypal_client.contracts.enums import Environment


@dataclass(frozen=True)
class EnvironmentProfile:
    environment: Environment
    base_url: str


_ENVIRONMENT_PROFILES = {
    Environment.SANDBOX: EnvironmentProfile(
        environment=Environment.SANDBOX,
        base_url="https://api.sandbox.paypal.com",
    ),
    Environment.LIVE: EnvironmentProfile(
        environment=Environment.LIVE,
        base_url="https://api.paypal.com",
    ),
}

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_MAX_RETRIES = 1

TOKEN_PATH = "/v1/oauth2/token"
ORDERS_PATH = "/v2/checkout/orders"
PAYMENTS_PATH = "/v2/payments"
PLANS_PATH = "/v1/billing/plans"
SUBSCRIPTIONS_PATH = "/v1/billing/subscriptions"
WEBHOOK_EVENTS_PATH = "/v1/notifications/webhooks-events"
WEBHOOK_VERIFY_PATH = "/v1/notifications/verify-webhook-signature"


def get_environment_profile(environment: Environment) -> EnvironmentProfile:
    return _ENVIRONMENT_PROFILES[environment]


def base_url_for_environment(environment: Environment) -> str:
    return get_environment_profile(environment).base_url


def supported_environments() -> tuple[str, ...]:
    return tuple(profile.environment.value for profile in _ENVIRONMENT_PROFILES.values())
