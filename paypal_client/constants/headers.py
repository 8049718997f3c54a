from __future__ import annotations

REQUEST_ID_HEADER = "PayPal-Request-Id"

AUTH_ALGO_HEADER = "PAYPAL-AUTH-ALGO"
CERT_URL_HEADER = "PAYPAL-CERT-URL"
TRANSMISSION_ID_HEADER = "PAYPAL-TRANSMISSION-ID"
TRANSMISSION_SIG_HEADER = "PAYPAL-TRANSMISSION-SIG"
TRANSMISSION_TIME_HEADER = "PAYPAL-TRANSMISSION-TIME"

# Verification request field -> transmission header carrying its value.
WEBHOOK_TRANSMISSION_HEADERS = {
    "auth_algo": AUTH_ALGO_HEADER,
    "cert_url": CERT_URL_HEADER,
    "transmission_id": TRANSMISSION_ID_HEADER,
    "transmission_sig": TRANSMISSION_SIG_HEADER,
    "transmission_time": TRANSMISSION_TIME_HEADER,
}
