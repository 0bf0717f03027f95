import time
from typing import Any, Callable, Dict, Mapping

from hmacjwt.core.codec import base64url_decode, base64url_encode, decode_json, encode_json
from hmacjwt.core.config import JWTConfig, Settings, load_config
from hmacjwt.core.errors import (
    EmptyToken,
    InvalidClaims,
    InvalidSignature,
    MalformedPayload,
    MalformedToken,
    TokenExpired,
)
from hmacjwt.core.security import Signer, constant_time_equals
from hmacjwt.schemas.token import Header, ParsedToken


class JWT:
    """Issues and verifies HMAC-signed tokens for one configuration.

    The ``iat`` claim carries the expiry timestamp (issue time + ``exp``),
    not the issue time. ``decode`` performs no signature or expiry check;
    only ``verify`` returns claims that can be trusted.
    """

    def __init__(self, config: JWTConfig | Mapping[str, Any], clock: Callable[[], float] = time.time):
        if not isinstance(config, JWTConfig):
            config = JWTConfig.from_options(config)
        self._config = config
        self._signer = Signer(config)
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings | None = None, clock: Callable[[], float] = time.time) -> "JWT":
        return cls(load_config(settings), clock=clock)

    @property
    def config(self) -> JWTConfig:
        return self._config

    def __repr__(self) -> str:
        return f"JWT(alg={self._config.alg.value!r}, typ={self._config.type!r}, exp={self._config.exp})"

    def sign(self, claims: Mapping[str, Any]) -> str:
        if not isinstance(claims, Mapping):
            raise InvalidClaims("claims must be a mapping")
        if any(not isinstance(k, str) for k in claims):
            raise InvalidClaims("claim names must be strings")

        header = Header(alg=self._config.alg.value, typ=self._config.type).model_dump()
        payload = dict(claims)
        payload["iat"] = int(self._clock()) + self._config.exp

        try:
            payload_text = encode_json(payload)
            # lone surrogates pass json.dumps but cannot be utf-8 encoded
            payload_text.encode("utf-8")
        except (TypeError, ValueError, RecursionError) as exc:
            raise InvalidClaims(f"claims are not json serializable: {exc}") from exc

        # must re-encode to the same text or the token could never verify
        try:
            stable = encode_json(decode_json(payload_text)) == payload_text
        except (MalformedPayload, ValueError, RecursionError) as exc:
            raise InvalidClaims("claims do not survive a json round trip") from exc
        if not stable:
            raise InvalidClaims("claims do not survive a json round trip")

        return self._assemble(encode_json(header), payload_text)

    def parse(self, token: str) -> ParsedToken:
        if not token:
            raise EmptyToken("token is empty")
        if not isinstance(token, str):
            raise MalformedToken("token must be a string")

        segments = token.split(".")
        if len(segments) != 3:
            raise MalformedToken(f"expected 3 segments, got {len(segments)}")

        header_b64, payload_b64, signature = segments
        return ParsedToken(
            header=decode_json(base64url_decode(header_b64)),
            payload=decode_json(base64url_decode(payload_b64)),
            signature=signature,
        )

    def verify(self, token: str) -> Dict[str, Any]:
        parsed = self.parse(token)

        # rebuild the canonical token from the decoded parts and compare whole
        try:
            expected = self._assemble(encode_json(parsed.header), encode_json(parsed.payload))
        except (ValueError, RecursionError) as exc:
            raise InvalidSignature("token cannot be re-encoded") from exc
        if not constant_time_equals(expected, token):
            raise InvalidSignature("signature mismatch")

        expires_at = parsed.payload.get("iat")
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            raise MalformedPayload("iat claim missing or not a number")
        if self._clock() >= expires_at:
            raise TokenExpired("token expired")

        return parsed.payload

    def decode(self, token: str) -> Dict[str, Any]:
        """Return the payload WITHOUT checking signature or expiry.

        For inspection only (logging a subject before verification, etc.).
        """
        return self.parse(token).payload

    def _assemble(self, header_text: str, payload_text: str) -> str:
        header_b64 = base64url_encode(header_text.encode("utf-8"))
        payload_b64 = base64url_encode(payload_text.encode("utf-8"))
        signature = self._signer.sign(header_b64, payload_b64)
        return f"{header_b64}.{payload_b64}.{signature}"
