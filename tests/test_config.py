import pytest
from pydantic import ValidationError

from hmacjwt import JWT, Algorithm, ConfigurationError, JWTConfig, Settings, load_config


def test_defaults():
    config = JWTConfig.from_options({"secret": "s3cr3t"})
    assert config.alg is Algorithm.HS256
    assert config.type == "JWT"
    assert config.exp == 2592000
    assert config.secret.get_secret_value() == b"s3cr3t"


@pytest.mark.parametrize("options", [
    {},
    {"secret": ""},
    {"secret": b""},
    {"secret": "x", "alg": "HS999"},
    {"secret": "x", "alg": "RS256"},
    {"secret": "x", "exp": -1},
    {"secret": "x", "kid": "abc"},
])
def test_invalid_options(options):
    with pytest.raises(ConfigurationError):
        JWT(options)


def test_options_must_be_a_mapping():
    with pytest.raises(ConfigurationError):
        JWTConfig.from_options(["secret"])


def test_secret_is_not_leaked():
    config = JWTConfig.from_options({"secret": "topsecret"})
    assert "topsecret" not in repr(config)
    assert "topsecret" not in repr(JWT(config))

    with pytest.raises(ConfigurationError) as exc_info:
        JWTConfig.from_options({"secret": "topsecret", "alg": "nope"})
    assert "topsecret" not in str(exc_info.value)
    assert "alg" in str(exc_info.value)


def test_config_is_frozen():
    config = JWTConfig.from_options({"secret": "s3cr3t"})
    with pytest.raises(ValidationError):
        config.alg = Algorithm.HS512


@pytest.mark.parametrize("alg, name, size", [
    (Algorithm.HS256, "sha256", 32),
    (Algorithm.HS384, "sha384", 48),
    (Algorithm.HS512, "sha512", 64),
])
def test_algorithm_hashes(alg, name, size):
    assert alg.hash_name == name
    assert alg.digest_size == size
    assert alg.digestmod().digest_size == size


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("JWT_ALG", "HS512")
    monkeypatch.setenv("JWT_EXP", "60")
    monkeypatch.setenv("UNRELATED", "ignored")

    config = load_config(Settings(_env_file=None))
    assert config.alg is Algorithm.HS512
    assert config.exp == 60
    assert config.secret.get_secret_value() == b"from-env"


def test_settings_without_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ConfigurationError):
        Settings(_env_file=None).to_config()


def test_from_settings(monkeypatch, claims):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    jwt = JWT.from_settings(Settings(_env_file=None))
    assert jwt.verify(jwt.sign(claims))["name"] == "Admin"
