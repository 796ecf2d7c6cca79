"""
Property-based tests for the numeric operations using Hypothesis.

These tests verify mathematical properties that should hold for all inputs,
and that the tagged evaluation boundary never raises.
"""

import contextlib
import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from calcengine import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    DomainError,
    Operation,
    ScientificFunction,
    Success,
    Undefined,
    add,
    divide,
    evaluate_binary,
    evaluate_function,
    format_number,
    ln,
    log10,
    multiply,
    parse_display,
    subtract,
)

safe_floats = st.floats(
    min_value=-1e100,
    max_value=1e100,
    allow_nan=False,
    allow_infinity=False,
)

small_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

non_zero_floats = small_floats.filter(lambda x: abs(x) > 1e-10)

any_floats = st.floats()


@pytest.mark.property
class TestArithmeticProperties:
    """Algebraic properties of the binary operations."""

    @given(a=safe_floats, b=safe_floats)
    def test_add_commutativity(self, a: float, b: float):
        """add(a, b) == add(b, a)"""
        with contextlib.suppress(ArithmeticOverflowError):
            assert add(a, b) == add(b, a)

    @given(a=safe_floats)
    def test_subtract_self_inverse(self, a: float):
        """subtract(a, a) == 0"""
        assert subtract(a, a) == 0

    @given(a=small_floats, b=small_floats)
    def test_multiply_commutativity(self, a: float, b: float):
        """multiply(a, b) == multiply(b, a)"""
        assert multiply(a, b) == multiply(b, a)

    @given(a=safe_floats, b=non_zero_floats)
    def test_divide_inverse_of_multiply(self, a: float, b: float):
        """divide(multiply(a, b), b) ≈ a"""
        try:
            result = divide(multiply(a, b), b)
            assert abs(result - a) < 1e-6 * max(abs(a), 1)
        except ArithmeticOverflowError:
            pass

    @given(a=safe_floats)
    def test_division_by_zero_raises(self, a: float):
        with pytest.raises(DivisionByZeroError):
            divide(a, 0)


@pytest.mark.property
class TestLogarithmProperties:
    @given(x=st.floats(min_value=1e-300, max_value=1e300))
    def test_log10_inverts_power_of_ten(self, x: float):
        assert math.isclose(10 ** log10(x), x, rel_tol=1e-9)

    @given(x=st.floats(max_value=0, allow_nan=False, allow_infinity=False))
    @example(x=0.0)
    @example(x=-0.0)
    def test_non_positive_is_domain_error(self, x: float):
        with pytest.raises(DomainError):
            ln(x)


@pytest.mark.property
class TestEvaluationBoundary:
    """The tagged evaluators are total: they return, never raise."""

    @given(op=st.sampled_from(Operation), a=any_floats, b=any_floats)
    def test_binary_is_total(self, op: Operation, a: float, b: float):
        outcome = evaluate_binary(op, a, b)
        assert isinstance(outcome, (Success, Undefined))
        if isinstance(outcome, Success):
            assert math.isfinite(outcome.value)

    @given(fn=st.sampled_from(ScientificFunction), x=any_floats)
    def test_function_is_total(self, fn: ScientificFunction, x: float):
        outcome = evaluate_function(fn, x)
        assert isinstance(outcome, (Success, Undefined))
        if isinstance(outcome, Success):
            assert math.isfinite(outcome.value)

    @given(a=small_floats)
    def test_division_by_zero_is_undefined(self, a: float):
        assert isinstance(evaluate_binary(Operation.DIVIDE, a, 0), Undefined)


@pytest.mark.property
class TestFormattingProperties:
    @given(x=st.floats(allow_nan=False, allow_infinity=False))
    def test_format_round_trips(self, x: float):
        """Formatted results parse back to the same number."""
        assert parse_display(format_number(x)) == x

    @given(x=st.floats(allow_nan=False, allow_infinity=False))
    def test_format_has_at_most_one_point(self, x: float):
        assert format_number(x).count(".") <= 1

    @given(text=st.text())
    def test_parse_never_raises(self, text: str):
        parse_display(text)
