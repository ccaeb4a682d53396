"""Utility functions for fieldwarden."""

from __future__ import annotations

import datetime
from decimal import Decimal
import re
from typing import Any

import pandas as pd

from fieldwarden.decimal_value import DecimalValue
from fieldwarden.exceptions import DecimalParseError

# Range of a 32-bit signed integer, the width integer candidates are parsed at.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_INT_MAX_DIGITS = len(str(INT_MAX))

# Text dates are limited to what a nanosecond timestamp can hold.
MIN_DATE = datetime.date(1677, 9, 22)
MAX_DATE = datetime.date(2262, 4, 11)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_RELATIVE_DATE_WORDS = frozenset({"now", "today"})


def is_absent(value: object) -> bool:
  """Check if a candidate is missing (None, NaN or NaT).

  Args:
    value: The candidate to check.

  Returns:
    True if the value should be treated as absent.
  """
  if value is None:
    return True
  if isinstance(value, (str, list, tuple, dict, set)):
    return False
  try:
    return bool(pd.isna(value))
  except (TypeError, ValueError):
    return False


def as_text(value: object) -> str | None:
  """Render a candidate as text, or None if it is absent."""
  if is_absent(value):
    return None
  if isinstance(value, str):
    return value
  return str(value)


def is_blank(value: object) -> bool:
  """Check if a candidate is absent, empty or whitespace only."""
  text = as_text(value)
  return text is None or not text.strip()


def parse_int(value: object) -> int | None:
  """Parse a candidate as a 32-bit signed integer.

  Accepts surrounding whitespace and an optional sign. Non-ASCII digits,
  underscores, decimal points and values outside [INT_MIN, INT_MAX] are
  rejected.

  Returns:
    The parsed integer, or None if the candidate is not an integer.
  """
  if isinstance(value, bool):
    return None
  if isinstance(value, int):
    return value if INT_MIN <= value <= INT_MAX else None

  text = as_text(value)
  if text is None:
    return None
  text = text.strip()
  if not _INTEGER.fullmatch(text):
    return None
  if len(text.lstrip("+-").lstrip("0")) > _INT_MAX_DIGITS:
    return None

  parsed = int(text)
  if not INT_MIN <= parsed <= INT_MAX:
    return None
  return parsed


def parse_decimal(value: object) -> Decimal | None:
  """Parse a candidate as an exact decimal.

  Returns:
    The exact Decimal, or None if the candidate is absent or not a decimal.
  """
  if is_absent(value):
    return None
  try:
    return DecimalValue.coerce(value).to_decimal()
  except DecimalParseError:
    return None


def parse_date(value: object) -> datetime.date | None:
  """Parse a candidate as a calendar date.

  Dates and datetimes are taken as-is. Text goes through pandas timestamp
  parsing (ISO 8601 plus the usual month-name and slash forms) and must fall
  within [MIN_DATE, MAX_DATE]. Digit-only text such as a bare year is not a
  date. The time of day, if any, is dropped.

  Returns:
    The date portion, or None if the candidate is absent or not a date.
  """
  if is_absent(value):
    return None
  if isinstance(value, datetime.datetime):
    return value.date()
  if isinstance(value, datetime.date):
    return value

  text = str(value).strip()
  # pandas resolves these against the clock instead of parsing them
  if not text or text.lower() in _RELATIVE_DATE_WORDS:
    return None
  if _INTEGER.fullmatch(text):
    return None

  try:
    timestamp: Any = pd.Timestamp(text)
  except (ValueError, TypeError, OverflowError):
    return None
  if pd.isna(timestamp):
    return None
  parsed = timestamp.date()
  if not MIN_DATE <= parsed <= MAX_DATE:
    return None
  return parsed
