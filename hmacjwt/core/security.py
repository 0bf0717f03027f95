import hmac

from hmacjwt.core.codec import base64url_encode
from hmacjwt.core.config import JWTConfig
from hmacjwt.core.errors import EmptyInput


class Signer:
    def __init__(self, config: JWTConfig):
        self._config = config

    def sign(self, header: str, payload: str) -> str:
        """HMAC over ``header.payload``; returns the base64url raw digest."""
        if not header or not payload:
            raise EmptyInput("header and payload must not be empty")

        msg = f"{header}.{payload}".encode("utf-8")
        key = self._config.secret.get_secret_value()
        digest = hmac.new(key, msg, self._config.alg.digestmod).digest()
        return base64url_encode(digest)


def constant_time_equals(a: str, b: str) -> bool:
    return hmac.compare_digest(a.encode("utf-8", "surrogatepass"), b.encode("utf-8", "surrogatepass"))
