"""Verification of signed webhook payloads."""

from __future__ import annotations

import binascii
import hashlib
import hmac
import logging

log = logging.getLogger(__name__)

_PREFIX_LEN = len("sha1=")


class SignedPayloadError(Exception):
    """Raised when a payload signature does not validate."""

    def __init__(self) -> None:
        super().__init__("failed to validate payload")


def assert_signed(signature: str, payload: bytes, secret: str | bytes) -> None:
    """Check a ``sha1=<hex>`` HMAC signature of ``payload``; raise if it is wrong."""
    if len(signature) < _PREFIX_LEN:
        raise SignedPayloadError()
    digest_hex = signature[_PREFIX_LEN:]
    try:
        expected = binascii.unhexlify(digest_hex)
    except ValueError as exc:
        log.debug("hex decode failed for %r: %s", digest_hex, exc)
        raise SignedPayloadError() from exc

    key = secret.encode("utf-8") if isinstance(secret, str) else secret
    actual = hmac.new(key, payload, hashlib.sha1).digest()
    if not hmac.compare_digest(actual, expected):
        raise SignedPayloadError()