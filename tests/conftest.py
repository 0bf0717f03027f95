import pytest

from hmacjwt import JWT

ISSUED_AT = 1_700_000_000


class FakeClock:
    def __init__(self, now: float):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(ISSUED_AT)


@pytest.fixture
def jwt(clock):
    return JWT({"secret": "s3cr3t", "alg": "HS256"}, clock=clock)


@pytest.fixture
def claims():
    return {"id": 3, "name": "Admin", "role": "admin"}
