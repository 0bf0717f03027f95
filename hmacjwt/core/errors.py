class JWTError(Exception):
    """Base class for every failure raised by hmacjwt."""


class ConfigurationError(JWTError):
    pass


class InvalidClaims(JWTError):
    pass


class EmptyInput(JWTError):
    pass


class InvalidToken(JWTError):
    """Token was rejected by parse, verify or decode."""


class EmptyToken(InvalidToken):
    pass


class MalformedToken(InvalidToken):
    pass


class MalformedEncoding(InvalidToken):
    pass


class MalformedPayload(InvalidToken):
    pass


class InvalidSignature(InvalidToken):
    pass


class TokenExpired(InvalidToken):
    pass
