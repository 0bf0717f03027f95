from hmacjwt.core.config import Algorithm, JWTConfig, Settings, load_config
from hmacjwt.core.errors import (
    ConfigurationError,
    EmptyInput,
    EmptyToken,
    InvalidClaims,
    InvalidSignature,
    InvalidToken,
    JWTError,
    MalformedEncoding,
    MalformedPayload,
    MalformedToken,
    TokenExpired,
)
from hmacjwt.jwt import JWT

__all__ = [
    "Algorithm",
    "ConfigurationError",
    "EmptyInput",
    "EmptyToken",
    "InvalidClaims",
    "InvalidSignature",
    "InvalidToken",
    "JWT",
    "JWTConfig",
    "JWTError",
    "MalformedEncoding",
    "MalformedPayload",
    "MalformedToken",
    "Settings",
    "TokenExpired",
    "load_config",
]
