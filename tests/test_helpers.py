import math

import pytest

from scicalc.helpers import fact, log10


def test_fact_small_values():
    assert fact(0) == 1
    assert fact(1) == 1
    assert fact(5) == 120
    assert fact(10) == 3628800


def test_fact_floors_its_argument():
    assert fact(5.9) == 120
    assert fact("4") == 24


def test_fact_invalid_input_is_nan():
    assert math.isnan(fact(-1))
    assert math.isnan(fact(math.inf))
    assert math.isnan(fact(math.nan))
    assert math.isnan(fact("abc"))


def test_fact_large_value_overflows_to_infinity():
    assert fact(170) > 1e306
    assert math.isinf(fact(171))
    assert math.isinf(fact(10 ** 7))


def test_log10():
    assert log10(100) == pytest.approx(2)
    assert log10(1000) == pytest.approx(3)
    assert log10(1) == 0


def test_log10_domain():
    assert log10(0) == -math.inf
    assert math.isnan(log10(-10))
    assert math.isnan(log10(math.nan))
    assert log10(math.inf) == math.inf
