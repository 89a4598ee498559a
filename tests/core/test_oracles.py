"""Tests for primality oracles and the strategy registry."""

from unittest.mock import MagicMock

import numpy as np
import pytest
from sympy import nextprime

from primesum.core.errors import InvalidInputError
from primesum.core.oracles import (
    STRATEGIES,
    HalfBoundOracle,
    NaiveOracle,
    SieveOracle,
    SqrtBoundOracle,
    ThirdBoundOddOracle,
    get_oracle,
    get_oracle_class,
)


class TestCrossStrategyEquivalence:
    """Every strategy must agree with the reference on [1, 1000]."""

    def test_matches_reference(self, oracle, reference_is_prime):
        for n in range(1, 1001):
            assert oracle.is_prime(n) == reference_is_prime(n), (
                f"{oracle!r} incorrect for: {n}"
            )

    def test_even_numbers_agree(self, oracles):
        plain = [o for o in oracles if isinstance(o, (NaiveOracle, SqrtBoundOracle))]
        shortcut = [o for o in oracles if isinstance(o, (ThirdBoundOddOracle, SieveOracle))]

        for n in range(2, 1001, 2):
            expected = {o.is_prime(n) for o in plain}
            assert len(expected) == 1
            for o in shortcut:
                assert o.is_prime(n) in expected, f"{o!r} incorrect for: {n}"


class TestBoundaryValues:
    """Special cases every strategy must answer identically."""

    @pytest.mark.parametrize(
        "n,expected",
        [(1, False), (2, True), (3, True), (4, False), (5, True), (9, False)],
    )
    def test_small_values(self, oracle, n, expected):
        assert oracle.is_prime(n) is expected

    @pytest.mark.parametrize("n", [25, 49, 121, 169, 961])
    def test_perfect_squares_are_composite(self, oracle, n):
        assert oracle.is_prime(n) is False

    def test_numpy_integer_accepted(self, oracle):
        assert oracle.is_prime(np.int64(7)) is True


class TestInvalidInput:
    """Candidates outside the domain are rejected, never answered."""

    @pytest.mark.parametrize("n", [0, -1, -7])
    def test_non_positive_rejected(self, oracle, n):
        with pytest.raises(InvalidInputError, match=">= 1"):
            oracle.is_prime(n)

    @pytest.mark.parametrize("n", [2.0, 7.5, "7", None, True, False])
    def test_non_integer_rejected(self, oracle, n):
        with pytest.raises(InvalidInputError, match="integer"):
            oracle.is_prime(n)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            NaiveOracle().is_prime(0)


class TestDivisionCost:
    """Bounded trial division is a constant-factor speedup; sqrt is asymptotic."""

    @staticmethod
    def _divisions(cls, p):
        # A prime exhausts its whole divisor range
        oracle = cls()
        assert oracle.is_prime(p) is True
        return len(oracle._divisors(p))

    @pytest.mark.parametrize(
        "cls", [NaiveOracle, HalfBoundOracle, ThirdBoundOddOracle]
    )
    def test_linear_strategies_scale_with_n(self, cls):
        small, large = nextprime(10_000), nextprime(40_000)
        ratio = self._divisions(cls, large) / self._divisions(cls, small)
        assert 3.5 < ratio < 4.5

    def test_sqrt_strategy_scales_with_root(self):
        small, large = nextprime(10_000), nextprime(40_000)
        ratio = (
            self._divisions(SqrtBoundOracle, large)
            / self._divisions(SqrtBoundOracle, small)
        )
        assert 1.5 < ratio < 2.5

    @pytest.mark.parametrize(
        "cls,factor", [(HalfBoundOracle, 2), (ThirdBoundOddOracle, 6)]
    )
    def test_bounded_speedup_is_constant(self, cls, factor):
        for p in (nextprime(1_000), nextprime(10_000), nextprime(100_000)):
            ratio = self._divisions(NaiveOracle, p) / self._divisions(cls, p)
            assert factor * 0.9 < ratio < factor * 1.1

    def test_sqrt_range_includes_root(self):
        assert SqrtBoundOracle()._divisors(25)[-1] == 5
        assert SqrtBoundOracle()._divisors(49)[-1] == 7

    def test_third_odd_rejects_even_without_dividing(self, monkeypatch):
        oracle = ThirdBoundOddOracle()
        divisors = MagicMock(return_value=range(0))
        monkeypatch.setattr(oracle, "_divisors", divisors)

        assert oracle.is_prime(1_000_000) is False
        divisors.assert_not_called()


class TestStatelessOracles:
    """Trial-division oracles keep no per-query state."""

    @pytest.mark.parametrize(
        "cls", [NaiveOracle, HalfBoundOracle, ThirdBoundOddOracle, SqrtBoundOracle]
    )
    def test_queries_leave_instance_unchanged(self, cls):
        oracle = cls()
        before = dict(vars(oracle))
        for n in (97, 100, 1009):
            oracle.is_prime(n)
        assert vars(oracle) == before == {}


class TestRegistry:
    """Tests for strategy lookup."""

    def test_all_strategies_registered(self):
        assert set(STRATEGIES) == {"naive", "half", "third-odd", "sqrt", "sieve"}

    def test_get_oracle_class(self):
        assert get_oracle_class("sqrt") is SqrtBoundOracle

    def test_unknown_strategy(self):
        with pytest.raises(InvalidInputError, match="Unknown strategy 'bogus'"):
            get_oracle_class("bogus")

    def test_get_oracle_stateless_ignores_limit(self):
        oracle = get_oracle("naive", 10)
        assert isinstance(oracle, NaiveOracle)
        assert oracle.max_candidate is None
        assert oracle.is_prime(101) is True

    def test_get_oracle_sieve_sized_to_limit(self):
        oracle = get_oracle("sieve", 500)
        assert isinstance(oracle, SieveOracle)
        assert oracle.max_candidate == 499
