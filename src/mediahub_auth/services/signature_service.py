"""HMAC-SHA256 signature service.

Signs session payloads with the owner password as shared secret.
"""

import hashlib
import hmac


class SignatureService:
    """Create and verify hex-encoded HMAC-SHA256 signatures.

    Examples
    --------
    >>> service = SignatureService(secret="owner-password")
    >>> signature = service.sign("alice")
    >>> service.verify("alice", signature)
    True
    """

    def __init__(self, secret: str):
        if not secret:
            msg = "Signature secret cannot be empty"
            raise ValueError(msg)
        self._secret = secret.encode("utf-8")

    def sign(self, data: str) -> str:
        return hmac.new(self._secret, data.encode("utf-8"), hashlib.sha256).hexdigest()

    def verify(self, data: str, signature: str | None) -> bool:
        if not signature:
            return False
        return hmac.compare_digest(self.sign(data), signature)
