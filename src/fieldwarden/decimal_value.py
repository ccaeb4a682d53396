"""Exact fixed-point decimal representation and scale analysis.

A `DecimalValue` keeps a decimal exactly as written: the sign, the unscaled
magnitude and the declared scale (number of fractional digits). It never goes
through a binary float, so `"12.340"` keeps its scale of 3 and the analyzer
can tell how many of those digits are significant.

Example:
  ```python
  value = DecimalValue.parse("12.340")
  value.scale(ignore_trailing_zeros=False)  # 3
  value.scale()                             # 2
  ```
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import re
from typing import override

from fieldwarden.exceptions import DecimalParseError

# Largest number of fractional digits a fixed-point value can carry.
MAX_SCALE = 28

# Longest unscaled magnitude accepted, in digits. Stays below the interpreter's
# int/str conversion limit (4300 by default).
MAX_DIGITS = 4000

_LITERAL = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")


def _round_to_max_scale(magnitude: int, scale: int) -> tuple[int, int]:
  """Round an unscaled magnitude half-to-even down to MAX_SCALE digits.

  The magnitude must have at most MAX_DIGITS digits.
  """
  if scale <= MAX_SCALE:
    return magnitude, scale
  surplus = scale - MAX_SCALE
  if surplus > MAX_DIGITS:
    # Every digit lies below the half-unit of the last kept place
    return 0, MAX_SCALE
  kept, remainder = divmod(magnitude, 10**surplus)
  half = 5 * 10 ** (surplus - 1)
  if remainder > half or (remainder == half and kept % 2):
    kept += 1
  return kept, MAX_SCALE


@dataclass(frozen=True, slots=True)
class DecimalValue:
  """Sign, unscaled magnitude and scale of a fixed-point decimal.

  The represented value is `(-1 if negative else 1) * magnitude * 10**-declared_scale`.

  Attributes:
    negative: Whether the literal carried a minus sign.
    declared_scale: Number of fractional digits, 0 to MAX_SCALE.
    magnitude: Unscaled non-negative integer (arbitrary precision).
  """

  negative: bool
  declared_scale: int
  magnitude: int

  def __post_init__(self) -> None:
    if not 0 <= self.declared_scale <= MAX_SCALE:
      raise ValueError(
        f"Scale must be between 0 and {MAX_SCALE}, got {self.declared_scale}"
      )
    if self.magnitude < 0:
      raise ValueError(f"Magnitude must be non-negative, got {self.magnitude}")

  @classmethod
  def parse(cls, text: str) -> DecimalValue:
    """Parse a locale-invariant decimal literal.

    Accepts surrounding whitespace, an optional leading sign, ASCII digits and
    at most one decimal point (`"1."` and `".5"` are valid). Exponents and
    grouping separators are rejected. Digits past MAX_SCALE are rounded
    half-to-even, so `"0." + "1" * 29` parses with a scale of 28.

    Raises:
      DecimalParseError: If the text is not a decimal literal, or has more
        than MAX_DIGITS significant digits.
    """
    if not isinstance(text, str):
      raise DecimalParseError(f"Expected text, got {type(text).__name__}")

    match = _LITERAL.fullmatch(text.strip())
    if match is None:
      raise DecimalParseError(f"Not a decimal literal: {text!r}")

    sign, integral, fraction = match.groups()
    fraction = fraction or ""
    if not integral and not fraction:
      raise DecimalParseError(f"Not a decimal literal: {text!r}")

    digits = (integral + fraction).lstrip("0")
    if len(digits) > MAX_DIGITS:
      raise DecimalParseError(
        f"More than {MAX_DIGITS} digits in decimal literal ({len(digits)})"
      )

    magnitude, scale = _round_to_max_scale(int(digits or "0"), len(fraction))
    return cls(negative=sign == "-", declared_scale=scale, magnitude=magnitude)

  @classmethod
  def from_decimal(cls, value: Decimal | int) -> DecimalValue:
    """Build from a binary decimal, keeping its exponent as the scale.

    A positive exponent (`Decimal("1E+3")`) is folded into the magnitude.

    Fractional digits past MAX_SCALE are rounded half-to-even.

    Raises:
      DecimalParseError: For NaN or infinite values, or magnitudes longer than
        MAX_DIGITS digits.
    """
    if isinstance(value, bool):
      raise DecimalParseError("Booleans are not decimal values")
    if isinstance(value, int):
      if abs(value) >= 10**MAX_DIGITS:
        raise DecimalParseError(f"More than {MAX_DIGITS} digits in decimal value")
      return cls(negative=value < 0, declared_scale=0, magnitude=abs(value))
    if not value.is_finite():
      raise DecimalParseError(f"Not a finite decimal: {value}")

    sign, digits, exponent = value.as_tuple()
    exponent = int(exponent)
    if len(digits) + max(exponent, 0) > MAX_DIGITS:
      raise DecimalParseError(f"More than {MAX_DIGITS} digits in decimal value")

    magnitude = 0
    for digit in digits:
      magnitude = magnitude * 10 + digit
    if exponent >= 0:
      return cls(negative=bool(sign), declared_scale=0, magnitude=magnitude * 10**exponent)

    magnitude, scale = _round_to_max_scale(magnitude, -exponent)
    return cls(negative=bool(sign), declared_scale=scale, magnitude=magnitude)

  @classmethod
  def coerce(cls, value: object) -> DecimalValue:
    """Convert an arbitrary candidate into a DecimalValue.

    Decimals and integers keep their exact form, floats go through their
    shortest repr, anything else is rendered with `str` and parsed.

    Raises:
      DecimalParseError: If the candidate is absent or not a decimal.
    """
    if isinstance(value, DecimalValue):
      return value
    if value is None:
      raise DecimalParseError("No value to parse")
    if isinstance(value, Decimal) or (
      isinstance(value, int) and not isinstance(value, bool)
    ):
      return cls.from_decimal(value)
    if isinstance(value, float):
      return cls.from_decimal(Decimal(repr(value)))
    return cls.parse(str(value))

  @property
  def trailing_zero_count(self) -> int:
    """Number of trailing zero digits in the fractional part.

    Counts divisions of the magnitude by ten with no remainder, never more
    than the declared scale. A zero magnitude is all trailing zeros.
    """
    count = 0
    remaining = self.magnitude
    while count < self.declared_scale and remaining % 10 == 0:
      remaining //= 10
      count += 1
    return count

  def scale(self, ignore_trailing_zeros: bool = True) -> int:
    """Return the number of fractional digits.

    Args:
      ignore_trailing_zeros: If True (default), trailing zeros are not
        counted, so `"12.340"` reports 2. If False, the declared scale is
        returned unchanged.
    """
    if ignore_trailing_zeros:
      return self.declared_scale - self.trailing_zero_count
    return self.declared_scale

  def is_zero(self) -> bool:
    return self.magnitude == 0

  def to_decimal(self) -> Decimal:
    """Return the exact `decimal.Decimal`, preserving the declared scale."""
    digits = tuple(int(d) for d in str(self.magnitude))
    return Decimal((int(self.negative), digits, -self.declared_scale))

  @override
  def __str__(self) -> str:
    digits = str(self.magnitude).rjust(self.declared_scale + 1, "0")
    if self.declared_scale:
      digits = f"{digits[: -self.declared_scale]}.{digits[-self.declared_scale :]}"
    return f"-{digits}" if self.negative else digits


def significant_scale(value: object) -> int:
  """Number of significant fractional digits of a decimal candidate.

  Raises:
    DecimalParseError: If the candidate is not a decimal.
  """
  return DecimalValue.coerce(value).scale(ignore_trailing_zeros=True)
