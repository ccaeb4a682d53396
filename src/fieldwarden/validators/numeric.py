"""Numeric validators for text candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, override

from fieldwarden.base import Validator
from fieldwarden.constraints import RangeConstraint
from fieldwarden.decimal_value import DecimalValue
from fieldwarden.exceptions import ConfigurationError, DecimalParseError
from fieldwarden.outcome import ReasonCode
from fieldwarden.utils import as_text, parse_decimal, parse_int

if TYPE_CHECKING:
  from decimal import Decimal


class ValidInt(Validator[object]):
  """Validator for integers with no alternate representation.

  The candidate is trimmed and, if longer than one character, stripped of
  leading zeros. It passes only if it parses as an integer whose canonical
  text is exactly the stripped candidate, so `"007"` passes (as `"7"`) while
  `"4.5"`, `"1e3"` and `"+5"` do not.
  """

  reason_code = ReasonCode.NOT_INTEGER

  @override
  def check(self, value: object) -> bool:
    text = as_text(value)
    if text is None:
      return False
    text = text.strip()
    if len(text) > 1:
      text = text.lstrip("0")
    parsed = parse_int(text)
    return parsed is not None and str(parsed) == text


class ValidDecimal(Validator[object]):
  """Validator for decimal literals (optional sign, digits, one point)."""

  reason_code = ReasonCode.NOT_NUMERIC

  @override
  def check(self, value: object) -> bool:
    return parse_decimal(value) is not None


class IntegerRangeValidator(Validator[object]):
  """Base class for validators accepting an integer within fixed bounds."""

  reason_code = ReasonCode.OUT_OF_RANGE

  def bounds(self) -> tuple[int, int]:
    raise NotImplementedError

  @override
  def check(self, value: object) -> bool:
    parsed = parse_int(value)
    if parsed is None:
      return False
    low, high = self.bounds()
    return low <= parsed <= high

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    low, high = self.bounds()
    return {"From": low, "To": high}

  @override
  def describe(self) -> str:
    low, high = self.bounds()
    return f"{self.__class__.__name__}({low}..{high})"


class ValidByte(IntegerRangeValidator):
  """Validator for a boolean stored as a byte: the integers 0 and 1 only."""

  @override
  def bounds(self) -> tuple[int, int]:
    return 0, 1


class Between(Validator[object]):
  """Validator that a decimal candidate lies in `[lower, upper]` inclusive.

  Candidates that are not decimals fail.

  Example:
    ```python
    Between(0, 10).check("10")     # True
    Between(0, 10).check("10.01")  # False
    ```
  """

  reason_code = ReasonCode.OUT_OF_RANGE

  def __init__(self, lower: int | str | Decimal, upper: int | str | Decimal) -> None:
    super().__init__()
    self.constraint = RangeConstraint(lower, upper)

  @property
  def lower(self) -> Decimal:
    return self.constraint.lower

  @property
  def upper(self) -> Decimal:
    assert self.constraint.upper is not None
    return self.constraint.upper

  @override
  def __repr__(self) -> str:
    return f"{self.__class__.__name__}({self.lower}, {self.upper})"

  @override
  def check(self, value: object) -> bool:
    parsed = parse_decimal(value)
    return parsed is not None and self.constraint.contains(parsed)

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    return {"From": self.lower, "To": self.upper}

  @override
  def describe(self) -> str:
    return self.constraint.describe()


class ValidPercentage(Between):
  """Validator for a decimal percentage in `[0, 100]`."""

  def __init__(self) -> None:
    super().__init__(0, 100)

  @override
  def __repr__(self) -> str:
    return "ValidPercentage()"


class GreaterThanOrEqual(Validator[object]):
  """Validator that a decimal candidate is at least `target`.

  A candidate that is not a decimal fails with NOT_NUMERIC rather than
  raising, so this rule can be used without a preceding ValidDecimal.
  """

  def __init__(self, target: int | str | Decimal) -> None:
    super().__init__()
    self.constraint = RangeConstraint(target)

  @property
  def target(self) -> Decimal:
    return self.constraint.lower

  @override
  def __repr__(self) -> str:
    return f"GreaterThanOrEqual({self.target})"

  @override
  def check(self, value: object) -> bool:
    parsed = parse_decimal(value)
    return parsed is not None and self.constraint.contains(parsed)

  @override
  def failure_reason(self, value: object) -> ReasonCode:
    if parse_decimal(value) is None:
      return ReasonCode.NOT_NUMERIC
    return ReasonCode.OUT_OF_RANGE

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    return {"ComparisonValue": self.target}

  @override
  def describe(self) -> str:
    return self.constraint.describe()


class DecimalPlaces(Validator[object]):
  """Validator limiting the number of significant decimal places.

  Trailing zeros do not count (`"12.340"` has 2 places). Candidates that are
  absent or not decimals pass: numeric validity is left to ValidDecimal.

  Example:
    ```python
    DecimalPlaces(2).check("12.340")  # True
    DecimalPlaces(2).check("12.345")  # False
    ```
  """

  reason_code = ReasonCode.TOO_MANY_DECIMAL_PLACES

  def __init__(self, max_places: int) -> None:
    super().__init__()
    if max_places < 0:
      raise ConfigurationError(
        f"Maximum decimal places should not be negative, got {max_places}"
      )
    self.max_places = max_places

  @override
  def __repr__(self) -> str:
    return f"DecimalPlaces({self.max_places})"

  def _scale(self, value: object) -> int | None:
    if value is None:
      return None
    try:
      return DecimalValue.coerce(value).scale(ignore_trailing_zeros=True)
    except DecimalParseError:
      return None

  @override
  def check(self, value: object) -> bool:
    scale = self._scale(value)
    return scale is None or scale <= self.max_places

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    return {
      "MaxDecimalPlaces": self.max_places,
      "ActualDecimalPlaces": self._scale(value),
    }

  @override
  def describe(self) -> str:
    return f"at most {self.max_places} decimal places"
