"""
Unit Tests for Navitas Request Signing.

These tests verify:
1. Canonical message construction for GET and POST
2. Body serialization used for both signing and transmission
3. HMAC-SHA256 signatures and the Authorization header format
"""

import pytest

from src.service.signing import (
    build_authorization,
    build_get_message,
    build_post_message,
    serialize_body,
    sign_message,
    sign_request,
)

SECRET = "test-secret"


# =============================================================================
# Canonical Message Tests
# =============================================================================

class TestCanonicalMessage:
    """Tests for canonical message construction."""

    def test_get_message_is_path_with_query(self):
        path = "/v1/localities?zipcode=10471"
        assert build_get_message(path) == path

    def test_get_message_keeps_query_order_and_encoding(self):
        path = "/v1/search?b=2&a=1&q=new%20york"
        assert build_get_message(path) == path

    def test_post_message_concatenates_without_separator(self):
        assert build_post_message("/v1/application/submit", '{"a":1}') == (
            '/v1/application/submit{"a":1}'
        )

    def test_serialize_body_is_compact_and_keeps_key_order(self):
        body = serialize_body({"channel": "Direct", "amount": 1500})
        assert body == '{"channel":"Direct","amount":1500}'

    def test_serialize_body_keeps_non_ascii(self):
        assert serialize_body({"name": "José"}) == '{"name":"José"}'

    def test_serialize_body_nested(self):
        payload = {"applicant": {"first": "Jane", "tags": [1, 2]}, "ok": True, "x": None}
        assert serialize_body(payload) == (
            '{"applicant":{"first":"Jane","tags":[1,2]},"ok":true,"x":null}'
        )


# =============================================================================
# Signature Tests
# =============================================================================

class TestSignature:
    """Tests for HMAC-SHA256 signing."""

    def test_known_get_signature(self):
        signature = sign_message(SECRET, "/v1/localities?zipcode=10471")
        assert signature == "aEk5R4V+5KSn7xpfbk+p2AIRY+ngh+pSa6t9JO9X5hg="

    def test_known_post_signature(self):
        path = "/v1/application/submit"
        body = serialize_body({"channel": "Direct", "amount": 1500})
        signature = sign_message(SECRET, build_post_message(path, body))
        assert signature == "vkNf0us5oEnnQzPnvpDK2UYiyXiF15LzdRAT5zi4Vzs="

    def test_non_ascii_body_signed_as_utf8(self):
        path = "/v1/application/submit"
        body = serialize_body({"name": "José"})
        signature = sign_message(SECRET, build_post_message(path, body))
        assert signature == "0WY/9RFzXNXulUSy9jbx3R1Tzrdhkn8KjZVD+lJb6vc="

    def test_signing_is_deterministic(self):
        message = "/v1/localities?zipcode=10471"
        assert sign_message(SECRET, message) == sign_message(SECRET, message)

    @pytest.mark.parametrize(
        "other",
        [
            "/v1/localities?zipcode=10472",
            "/v1/localities?zipcode=1047",
            "/V1/localities?zipcode=10471",
            "/v1/localities?zipcode=10471 ",
            "/v1/localities/?zipcode=10471",
        ],
    )
    def test_single_change_changes_signature(self, other):
        original = sign_message(SECRET, "/v1/localities?zipcode=10471")
        assert sign_message(SECRET, other) != original

    def test_body_change_changes_signature(self):
        path = "/v1/application/submit"
        first = sign_message(SECRET, build_post_message(path, serialize_body({"amount": 1500})))
        second = sign_message(SECRET, build_post_message(path, serialize_body({"amount": 1501})))
        assert first != second

    def test_key_order_is_significant(self):
        path = "/v1/application/submit"
        first = sign_message(SECRET, build_post_message(path, serialize_body({"a": 1, "b": 2})))
        second = sign_message(SECRET, build_post_message(path, serialize_body({"b": 2, "a": 1})))
        assert first != second

    def test_secret_change_changes_signature(self):
        message = "/v1/localities?zipcode=10471"
        assert sign_message(SECRET, message) != sign_message("other-secret", message)


class TestAuthorizationHeader:
    """Tests for the Authorization header value."""

    def test_format(self):
        assert build_authorization("client-123", "abc=") == "HMAC client-123:abc="

    def test_sign_request(self):
        header = sign_request("client-123", SECRET, "/v1/localities?zipcode=10471")
        assert header == "HMAC client-123:aEk5R4V+5KSn7xpfbk+p2AIRY+ngh+pSa6t9JO9X5hg="
