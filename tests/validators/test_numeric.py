"""Tests for numeric validators."""
# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false

from decimal import Decimal

import pytest

from fieldwarden import (
  Between,
  ConfigurationError,
  DecimalPlaces,
  GreaterThanOrEqual,
  ReasonCode,
  ValidByte,
  ValidDecimal,
  ValidInt,
  ValidPercentage,
)


class TestValidInt:
  """Tests for ValidInt validator."""

  @pytest.mark.parametrize("value", ["7", "007", " 42 ", "0", "-5", 42, "2147483647"])
  def test_check_passes(self, value):
    assert ValidInt().check(value)

  @pytest.mark.parametrize(
    "value", ["4.5", "abc", "1e3", "+5", "", "   ", None, "01x", "2147483648"]
  )
  def test_check_fails(self, value):
    assert not ValidInt().check(value)

  def test_all_zeros_strip_to_nothing(self):
    # "00" loses every digit once leading zeros are stripped
    assert not ValidInt().check("00")

  def test_evaluate_reports_reason(self):
    outcome = ValidInt().evaluate("4.5")
    assert not outcome.passed
    assert outcome.reason_code is ReasonCode.NOT_INTEGER
    assert dict(outcome.arguments) == {}


class TestValidDecimal:
  """Tests for ValidDecimal validator."""

  @pytest.mark.parametrize("value", ["1.5", " -3 ", "1.", ".25", Decimal("2.50"), 3])
  def test_check_passes(self, value):
    assert ValidDecimal().check(value)

  @pytest.mark.parametrize("value", ["", None, "1,5", "1e3", "1.2.3", "NaN"])
  def test_check_fails(self, value):
    assert not ValidDecimal().check(value)

  def test_rounds_past_max_scale(self):
    assert ValidDecimal().check("0." + "1" * 29)


class TestValidByte:
  """Tests for ValidByte validator."""

  def test_only_zero_and_one(self):
    v = ValidByte()
    assert v.check("0")
    assert v.check("1")
    assert not v.check("2")
    assert not v.check("-1")
    assert not v.check("a")

  def test_failure_arguments(self):
    outcome = ValidByte().evaluate("255")
    assert outcome.reason_code is ReasonCode.OUT_OF_RANGE
    assert dict(outcome.arguments) == {"From": 0, "To": 1}


class TestValidPercentage:
  """Tests for ValidPercentage validator."""

  @pytest.mark.parametrize("value", ["0", "100", "55.5", "100.000"])
  def test_check_passes(self, value):
    assert ValidPercentage().check(value)

  @pytest.mark.parametrize("value", ["100.01", "-0.01", "x", None])
  def test_check_fails(self, value):
    assert not ValidPercentage().check(value)

  def test_repr(self):
    assert repr(ValidPercentage()) == "ValidPercentage()"


class TestBetween:
  """Tests for Between validator."""

  def test_inclusive_bounds(self):
    v = Between(1, 10)
    assert v.check("1")
    assert v.check("10")
    assert v.check("5.5")
    assert not v.check("0.99")
    assert not v.check("10.0001")

  def test_non_numeric_fails(self):
    v = Between(1, 10)
    assert not v.check("abc")
    assert not v.check(None)

  def test_inverted_bounds_raise(self):
    with pytest.raises(ConfigurationError, match="greater than upper bound"):
      Between(5, 1)

  def test_failure_arguments(self):
    outcome = Between(1, 10).evaluate("11")
    assert outcome.reason_code is ReasonCode.OUT_OF_RANGE
    assert dict(outcome.arguments) == {"From": Decimal(1), "To": Decimal(10)}

  def test_repr_and_equality(self):
    assert repr(Between(0, 10)) == "Between(0, 10)"
    assert Between(0, 10) == Between(0, 10)
    assert Between(0, 10) != Between(0, 11)
    assert hash(Between(0, 10)) == hash(Between(0, 10))


class TestGreaterThanOrEqual:
  """Tests for GreaterThanOrEqual validator."""

  def test_inclusive_lower_bound(self):
    v = GreaterThanOrEqual(3)
    assert v.check("3")
    assert v.check("3.0001")
    assert not v.check("2.99")

  def test_out_of_range_reason(self):
    outcome = GreaterThanOrEqual(3).evaluate("2")
    assert outcome.reason_code is ReasonCode.OUT_OF_RANGE
    assert dict(outcome.arguments) == {"ComparisonValue": Decimal(3)}

  def test_non_numeric_fails_without_raising(self):
    outcome = GreaterThanOrEqual(3).evaluate("abc")
    assert not outcome.passed
    assert outcome.reason_code is ReasonCode.NOT_NUMERIC


class TestDecimalPlaces:
  """Tests for DecimalPlaces validator."""

  @pytest.mark.parametrize(
    "value", ["12.34", "12.3", "12", "12.340", Decimal("1.2300"), "0.000000"]
  )
  def test_check_passes(self, value):
    assert DecimalPlaces(2).check(value)

  def test_check_fails(self):
    outcome = DecimalPlaces(2).evaluate("12.345")
    assert not outcome.passed
    assert outcome.reason_code is ReasonCode.TOO_MANY_DECIMAL_PLACES
    assert dict(outcome.arguments) == {"MaxDecimalPlaces": 2, "ActualDecimalPlaces": 3}

  @pytest.mark.parametrize("value", ["abc", None, "", "1e-9"])
  def test_unparseable_passes(self, value):
    assert DecimalPlaces(0).check(value)

  def test_rounded_literal_reports_its_scale(self):
    outcome = DecimalPlaces(2).evaluate("0." + "1" * 29)
    assert not outcome.passed
    assert dict(outcome.arguments) == {"MaxDecimalPlaces": 2, "ActualDecimalPlaces": 28}

  def test_zero_places(self):
    v = DecimalPlaces(0)
    assert v.check("5.000")
    assert not v.check("5.1")

  def test_negative_limit_raises(self):
    with pytest.raises(ConfigurationError):
      DecimalPlaces(-1)


class TestOverlongInput:
  """Digit strings past the interpreter's int conversion limit are rejected."""

  LONG = "1" * 5000

  @pytest.mark.parametrize(
    "validator",
    [ValidInt(), ValidDecimal(), ValidByte(), ValidPercentage(), Between(0, 10)],
  )
  def test_fails_without_raising(self, validator):
    assert not validator.check(self.LONG)

  def test_greater_than_or_equal(self):
    outcome = GreaterThanOrEqual(0).evaluate(self.LONG)
    assert outcome.reason_code is ReasonCode.NOT_NUMERIC

  def test_decimal_places_treats_it_as_unparseable(self):
    assert DecimalPlaces(2).check(self.LONG)
