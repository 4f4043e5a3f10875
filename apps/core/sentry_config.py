"""
Sentry initialization and event scrubbing.

Passwords, bearer tokens and similar values are removed from every event
before it leaves the process; email addresses are partially masked.
"""

import re
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

# Sensitive field patterns to scrub
SENSITIVE_KEYS = {
    "password",
    "secret",
    "token",
    "refresh",
    "api_key",
    "authorization",
    "cookie",
    "csrf",
    "session",
}

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
BEARER_PATTERN = re.compile(r"Bearer\s+[A-Za-z0-9\-_\.]+")


def scrub_sensitive_data(data: Any) -> Any:
    """
    Recursively scrub sensitive data from dictionaries, lists, and strings.

    Args:
        data: Data to scrub (dict, list, str, or other)

    Returns:
        Scrubbed data with sensitive information masked
    """
    if isinstance(data, dict):
        return {
            key: "[REDACTED]" if _is_sensitive_key(key) else scrub_sensitive_data(value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [scrub_sensitive_data(item) for item in data]
    elif isinstance(data, str):
        return _scrub_string(data)
    else:
        return data


def _is_sensitive_key(key) -> bool:
    key_lower = str(key).lower()
    return any(sensitive in key_lower for sensitive in SENSITIVE_KEYS)


def _scrub_string(text: str) -> str:
    text = BEARER_PATTERN.sub("Bearer [REDACTED]", text)
    return EMAIL_PATTERN.sub(lambda m: _mask_email(m.group(0)), text)


def _mask_email(email: str) -> str:
    """
    Partially mask an email address (e.g. ow***@example.com).
    """
    local, _, domain = email.partition("@")
    if not local or not domain:
        return "REDACTED@EMAIL"
    return f"{local[:2]}***@{domain}"


def before_send(event: Dict[str, Any], hint: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Sentry before_send hook to scrub sensitive data from events.

    Args:
        event: Sentry event dictionary
        hint: Additional context about the event

    Returns:
        The scrubbed event
    """
    request = event.get("request")
    if request:
        for key in ("headers", "query_string", "data"):
            if key in request:
                request[key] = scrub_sensitive_data(request[key])
        if "cookies" in request:
            request["cookies"] = {k: "[REDACTED]" for k in request["cookies"]}

    if "extra" in event:
        event["extra"] = scrub_sensitive_data(event["extra"])

    user = event.get("user")
    if user:
        if "email" in user:
            user["email"] = _mask_email(user["email"])
        if "ip_address" in user:
            user["ip_address"] = "XXX.XXX.XXX.XXX"

    for exception in event.get("exception", {}).get("values", []):
        if "value" in exception:
            exception["value"] = _scrub_string(exception["value"])

    for breadcrumb in event.get("breadcrumbs", {}).get("values", []):
        if "data" in breadcrumb:
            breadcrumb["data"] = scrub_sensitive_data(breadcrumb["data"])
        if "message" in breadcrumb:
            breadcrumb["message"] = _scrub_string(breadcrumb["message"])

    return event


def initialize_sentry(
    dsn: Optional[str],
    environment: str = "production",
    traces_sample_rate: float = 0.1,
    release: Optional[str] = None,
) -> None:
    """
    Initialize Sentry SDK with the Django integration.

    Args:
        dsn: Sentry DSN. If None, Sentry is not initialized.
        environment: Environment name (development, production)
        traces_sample_rate: Percentage of transactions to trace (0.0 to 1.0)
        release: Release version string
    """
    if not dsn:
        return

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        traces_sample_rate=traces_sample_rate,
        integrations=[
            DjangoIntegration(transaction_style="url"),
        ],
        before_send=before_send,
        # Send default PII (we'll scrub it in before_send)
        send_default_pii=False,
        attach_stacktrace=True,
        max_breadcrumbs=50,
    )
