import base64
import binascii
import json
import re
from typing import Any, Dict, Mapping

from hmacjwt.core.errors import MalformedEncoding, MalformedPayload

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_json(data: Mapping[str, Any]) -> str:
    # non-ASCII stays literal so re-encoding a decoded payload is byte-identical
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not allowed")


def decode_json(text: str | bytes) -> Dict[str, Any]:
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayload("segment is not valid utf-8") from exc

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise MalformedPayload("segment is not valid json") from exc

    if not isinstance(data, dict):
        raise MalformedPayload("segment is not a json object")
    return data


def base64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(data: str) -> bytes:
    if not _B64URL_RE.fullmatch(data):
        raise MalformedEncoding("invalid base64url alphabet")
    if len(data) % 4 == 1:
        raise MalformedEncoding("invalid base64url length")

    padding = "=" * ((4 - len(data) % 4) % 4)
    try:
        return base64.urlsafe_b64decode((data + padding).encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise MalformedEncoding("invalid base64url data") from exc
