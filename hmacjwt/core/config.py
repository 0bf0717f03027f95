import hashlib
from enum import Enum
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretBytes, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hmacjwt.core.errors import ConfigurationError

DEFAULT_EXP = 60 * 60 * 24 * 30  # 30 days


class Algorithm(str, Enum):
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @property
    def hash_name(self) -> str:
        return _HASHES[self][0]

    @property
    def digest_size(self) -> int:
        return _HASHES[self][1]

    @property
    def digestmod(self) -> Callable[..., Any]:
        return getattr(hashlib, self.hash_name)


_HASHES = {
    Algorithm.HS256: ("sha256", 32),
    Algorithm.HS384: ("sha384", 48),
    Algorithm.HS512: ("sha512", 64),
}


def _describe(exc: ValidationError) -> str:
    # never echo inputs: one of them is the secret
    parts = []
    for err in exc.errors(include_input=False, include_url=False):
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class JWTConfig(BaseModel):
    """Immutable signing configuration captured by a JWT instance."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    secret: SecretBytes
    alg: Algorithm = Algorithm.HS256
    type: str = "JWT"
    exp: int = Field(default=DEFAULT_EXP, ge=0)

    @field_validator("secret")
    @classmethod
    def secret_not_empty(cls, v: SecretBytes) -> SecretBytes:
        if not v.get_secret_value():
            raise ValueError("secret must not be empty")
        return v

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "JWTConfig":
        if not isinstance(options, Mapping):
            raise ConfigurationError("options must be a mapping")
        try:
            return cls.model_validate(dict(options))
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc)) from None


class Settings(BaseSettings):
    JWT_SECRET: SecretStr | None = None
    JWT_ALG: str = Algorithm.HS256.value
    JWT_TYPE: str = "JWT"
    JWT_EXP: int = DEFAULT_EXP

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def to_config(self) -> JWTConfig:
        options: dict[str, Any] = {
            "alg": self.JWT_ALG,
            "type": self.JWT_TYPE,
            "exp": self.JWT_EXP,
        }
        if self.JWT_SECRET is not None:
            options["secret"] = self.JWT_SECRET.get_secret_value()
        return JWTConfig.from_options(options)


def load_config(settings: Settings | None = None) -> JWTConfig:
    if settings is None:
        try:
            settings = Settings()
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc)) from None
    return settings.to_config()
