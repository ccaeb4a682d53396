"""Calendar validators: months, years, dates and days of a month."""

from __future__ import annotations

import calendar
import datetime
from typing import override

from fieldwarden.base import Validator
from fieldwarden.config import get_config
from fieldwarden.exceptions import ConfigurationError
from fieldwarden.outcome import ReasonCode, ValidationOutcome
from fieldwarden.utils import parse_date, parse_int
from fieldwarden.validators.numeric import IntegerRangeValidator

# Non-leap year used to size months, so February always has 28 days.
DAY_OF_MONTH_REFERENCE_YEAR = 1950

_NOT_NUMERIC_MESSAGE = "is not a valid number"
_NOT_IN_MONTH_MESSAGE = "is not a valid date during the month given."


class ValidMonth(IntegerRangeValidator):
  """Validator for a month number in `[1, 12]`."""

  @override
  def bounds(self) -> tuple[int, int]:
    return 1, 12


class ValidYear(IntegerRangeValidator):
  """Validator for a year between `min_year` and a few years from now.

  Bounds come from the global config (1950 and current year + 2 by default)
  and are read on every evaluation, so a long-lived rule follows the clock.
  """

  @override
  def bounds(self) -> tuple[int, int]:
    config = get_config()
    return config.min_year, datetime.date.today().year + config.year_lookahead


class ValidDate(Validator[object]):
  """Validator for candidates that parse as a calendar date.

  Absent and blank candidates fail.
  """

  reason_code = ReasonCode.NOT_A_DATE

  @override
  def check(self, value: object) -> bool:
    return parse_date(value) is not None


class _DateComparisonValidator(Validator[object]):
  """Base class for Before/After.

  Only the date portion is compared on both sides; time of day is ignored
  and equal dates pass. Candidates that are not dates fail with NOT_A_DATE.
  """

  op_symbol: str = ""

  def __init__(self, reference: datetime.date | str) -> None:
    super().__init__()
    parsed = parse_date(reference)
    if parsed is None:
      raise ConfigurationError(f"Reference date is not a date: {reference!r}")
    self.reference = parsed

  @override
  def __repr__(self) -> str:
    return f"{self.__class__.__name__}({self.reference.isoformat()!r})"

  def compare(self, candidate: datetime.date) -> bool:
    raise NotImplementedError

  @override
  def check(self, value: object) -> bool:
    candidate = parse_date(value)
    return candidate is not None and self.compare(candidate)

  @override
  def failure_reason(self, value: object) -> ReasonCode:
    if parse_date(value) is None:
      return ReasonCode.NOT_A_DATE
    return self.reason_code

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    return {"ComparisonValue": self.reference}

  @override
  def describe(self) -> str:
    return f"{self.op_symbol} {self.reference.isoformat()}"


class Before(_DateComparisonValidator):
  """Validator that a date falls on or before the reference date."""

  reason_code = ReasonCode.TOO_LATE
  op_symbol = "<="

  @override
  def compare(self, candidate: datetime.date) -> bool:
    return candidate <= self.reference


class After(_DateComparisonValidator):
  """Validator that a date falls on or after the reference date."""

  reason_code = ReasonCode.TOO_EARLY
  op_symbol = ">="

  @override
  def compare(self, candidate: datetime.date) -> bool:
    return candidate >= self.reference


class DayOfMonth(Validator[object]):
  """Validator that a day number exists in a given month.

  The month is kept as raw text and only interpreted at evaluation time. If
  it is not a month number the check passes: the month field reports its own
  error. Month lengths come from the non-leap year 1950, so February 29 is
  always rejected.

  Example:
    ```python
    DayOfMonth("2").evaluate("29").reason_code  # ReasonCode.NOT_VALID_FOR_MONTH
    DayOfMonth("x").evaluate("31").passed       # True
    ```
  """

  def __init__(self, month: str | int | None) -> None:
    super().__init__()
    self.month = month

  @override
  def __repr__(self) -> str:
    return f"DayOfMonth({self.month!r})"

  def max_day(self) -> int | None:
    """Last day of the bound month, or None if the month is not usable."""
    month = parse_int(self.month)
    if month is None or not 1 <= month <= 12:
      return None
    return calendar.monthrange(DAY_OF_MONTH_REFERENCE_YEAR, month)[1]

  @override
  def evaluate(self, value: object) -> ValidationOutcome:
    day = parse_int(value)
    if day is None:
      return ValidationOutcome.failure(
        ReasonCode.NOT_NUMERIC, Message=_NOT_NUMERIC_MESSAGE
      )

    max_day = self.max_day()
    if max_day is None:
      return ValidationOutcome.success()

    if day > max_day:
      return ValidationOutcome.failure(
        ReasonCode.NOT_VALID_FOR_MONTH,
        Message=_NOT_IN_MONTH_MESSAGE,
        MaxDay=max_day,
      )
    return ValidationOutcome.success()

  @override
  def check(self, value: object) -> bool:
    return self.evaluate(value).passed

  @override
  def describe(self) -> str:
    return f"day of month {self.month}"
