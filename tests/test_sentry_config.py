"""
Tests for Sentry event scrubbing.
"""

from apps.core.sentry_config import _mask_email, before_send, scrub_sensitive_data


class TestSentryScrubbing:
    """Sensitive data never leaves the process."""

    def test_sensitive_keys_are_redacted(self):
        data = {
            "email": "owner@example.com",
            "password": "hunter2",
            "nested": {"refresh": "eyJ...", "store_name": "Burger Town"},
        }

        scrubbed = scrub_sensitive_data(data)

        assert scrubbed["password"] == "[REDACTED]"
        assert scrubbed["nested"]["refresh"] == "[REDACTED]"
        assert scrubbed["nested"]["store_name"] == "Burger Town"
        assert scrubbed["email"] == "ow***@example.com"

    def test_before_send_scrubs_request_and_user(self):
        event = {
            "request": {
                "headers": {"Authorization": "Bearer abc.def.ghi", "Accept": "application/json"},
                "cookies": {"sessionid": "xyz"},
                "data": {"email": "owner@example.com", "password": "hunter2"},
            },
            "user": {"email": "owner@example.com", "ip_address": "10.0.0.1"},
            "exception": {"values": [{"value": "Login failed for owner@example.com"}]},
        }

        scrubbed = before_send(event, {})

        assert scrubbed["request"]["headers"]["Authorization"] == "[REDACTED]"
        assert scrubbed["request"]["headers"]["Accept"] == "application/json"
        assert scrubbed["request"]["cookies"] == {"sessionid": "[REDACTED]"}
        assert scrubbed["request"]["data"]["password"] == "[REDACTED]"
        assert scrubbed["user"]["ip_address"] == "XXX.XXX.XXX.XXX"
        assert scrubbed["exception"]["values"][0]["value"] == "Login failed for ow***@example.com"

    def test_bearer_tokens_in_messages_are_masked(self):
        assert scrub_sensitive_data("sent Bearer abc.def") == "sent Bearer [REDACTED]"

    def test_mask_malformed_email(self):
        assert _mask_email("@example.com") == "REDACTED@EMAIL"
