"""Tests for parsing helpers."""

import datetime
from decimal import Decimal

import numpy as np
import pandas as pd
import pytest

from fieldwarden.utils import (
  INT_MAX,
  INT_MIN,
  MAX_DATE,
  MIN_DATE,
  as_text,
  is_absent,
  is_blank,
  parse_date,
  parse_decimal,
  parse_int,
)


class TestParseInt:
  """Tests for parse_int."""

  @pytest.mark.parametrize(
    ("value", "expected"),
    [
      ("  12 ", 12),
      ("-7", -7),
      ("+7", 7),
      (str(INT_MAX), INT_MAX),
      (str(INT_MIN), INT_MIN),
      (5, 5),
      ("0" * 20 + "7", 7),
    ],
  )
  def test_parses(self, value, expected):
    assert parse_int(value) == expected

  @pytest.mark.parametrize(
    "value",
    ["1_000", "٣", "1.0", "", None, True, str(INT_MAX + 1), 2**40, "0x10", "1" * 5000],
  )
  def test_rejects(self, value):
    assert parse_int(value) is None


class TestAbsence:
  """Tests for is_absent, as_text and is_blank."""

  @pytest.mark.parametrize("value", [None, np.nan, pd.NaT, float("nan")])
  def test_absent(self, value):
    assert is_absent(value)
    assert as_text(value) is None

  @pytest.mark.parametrize("value", ["", "x", 0, [], datetime.date(2024, 1, 1)])
  def test_present(self, value):
    assert not is_absent(value)

  def test_blank(self):
    assert is_blank(None)
    assert is_blank("  \t")
    assert not is_blank(" a ")


class TestParseDecimal:
  """Tests for parse_decimal."""

  def test_parses_exactly(self):
    assert str(parse_decimal("12.340")) == "12.340"

  def test_rejects(self):
    assert parse_decimal("1e3") is None
    assert parse_decimal(None) is None
    assert parse_decimal("1" * 5000) is None

  def test_rounds_past_max_scale(self):
    assert parse_decimal("0." + "1" * 29) == Decimal("0." + "1" * 28)


class TestParseDate:
  """Tests for parse_date."""

  def test_drops_time_of_day(self):
    assert parse_date("2024-03-01T23:59:59") == datetime.date(2024, 3, 1)
    assert parse_date(datetime.datetime(2024, 3, 1, 8)) == datetime.date(2024, 3, 1)
    assert parse_date(pd.Timestamp("2024-03-01 08:00")) == datetime.date(2024, 3, 1)

  @pytest.mark.parametrize(
    "value", ["today", "NOW", pd.NaT, None, "31/31/2024", "2024", "20240115"]
  )
  def test_rejects(self, value):
    assert parse_date(value) is None

  def test_supported_range_is_pinned(self):
    assert parse_date(MIN_DATE.isoformat()) == MIN_DATE
    assert parse_date(MAX_DATE.isoformat()) == MAX_DATE
    assert parse_date("1677-09-21") is None
    assert parse_date("1600-01-01") is None
    assert parse_date("2262-04-12") is None
    assert parse_date("2300-01-01") is None

  def test_date_objects_are_not_range_limited(self):
    assert parse_date(datetime.date(1600, 1, 1)) == datetime.date(1600, 1, 1)
