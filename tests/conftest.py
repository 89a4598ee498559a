"""Global fixtures for primesum tests."""

import pytest
from sympy import isprime

from primesum.core.oracles import STRATEGIES, get_oracle


# Large enough to answer every candidate in [1, 1000]
EQUIVALENCE_LIMIT = 1001


@pytest.fixture
def reference_is_prime():
    """Trusted reference primality test."""
    return isprime


@pytest.fixture(params=list(STRATEGIES))
def oracle(request):
    """Each registered strategy, built to cover [1, 1000]."""
    return get_oracle(request.param, EQUIVALENCE_LIMIT)


@pytest.fixture
def oracles():
    """One instance of every registered strategy covering [1, 1000]."""
    return [get_oracle(name, EQUIVALENCE_LIMIT) for name in STRATEGIES]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PRIMESUM_* variables so defaults apply."""
    for key in ("PRIMESUM_LIMIT", "PRIMESUM_STRATEGY", "PRIMESUM_SIEVE_LIMIT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
