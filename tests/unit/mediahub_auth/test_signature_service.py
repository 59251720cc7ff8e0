"""Unit tests for SignatureService."""

import hashlib
import hmac

import pytest

from mediahub_auth import SignatureService


class TestSignatureService:
    """Tests for HMAC-SHA256 signing."""

    def test_sign_matches_hmac_sha256_hex(self):
        service = SignatureService("owner-password")

        expected = hmac.new(b"owner-password", b"alice", hashlib.sha256).hexdigest()
        assert service.sign("alice") == expected

    def test_verify_accepts_own_signature(self):
        service = SignatureService("secret")

        assert service.verify("alice", service.sign("alice"))

    def test_verify_rejects_other_secret(self):
        signature = SignatureService("one").sign("alice")

        assert not SignatureService("two").verify("alice", signature)

    def test_verify_rejects_missing_signature(self):
        service = SignatureService("secret")

        assert not service.verify("alice", None)
        assert not service.verify("alice", "")

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            SignatureService("")
