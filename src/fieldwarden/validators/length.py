"""Trimmed-length validators for text candidates."""

from __future__ import annotations

from typing import override

from fieldwarden.base import Validator
from fieldwarden.constraints import UNBOUNDED, LengthConstraint
from fieldwarden.outcome import ReasonCode, ValidationOutcome
from fieldwarden.utils import as_text


class TrimmedLength(Validator[str | None]):
  """Validator for the length of a candidate after trimming whitespace.

  Bounds are inclusive. With a single argument the length must match it
  exactly; pass UNBOUNDED (-1) as `max_length` for no upper bound. Invalid
  bounds raise ConfigurationError on construction. Absent candidates pass.

  On failure the outcome carries `MinLength`, `MaxLength` (-1 when unbounded)
  and `TotalLength`.

  Example:
    ```python
    TrimmedLength(2, 4).check("  ab  ")  # True
    TrimmedLength(2, 4).check("abcde")   # False
    TrimmedLength(3).check("abcd")       # False
    TrimmedLength(2, UNBOUNDED).check("abcd")  # True
    ```
  """

  reason_code = ReasonCode.INVALID_LENGTH

  def __init__(self, min_length: int, max_length: int | None = None) -> None:
    super().__init__()
    if max_length is None:
      self.constraint = LengthConstraint.exact(min_length)
    else:
      self.constraint = LengthConstraint(min_length, max_length)

  @property
  def min_length(self) -> int:
    return self.constraint.min_length

  @property
  def max_length(self) -> int | None:
    return self.constraint.max_length

  @override
  def __repr__(self) -> str:
    if self.constraint.is_exact:
      return f"{self.__class__.__name__}({self.min_length})"
    max_length = UNBOUNDED if self.max_length is None else self.max_length
    return f"{self.__class__.__name__}({self.min_length}, {max_length})"

  @override
  def evaluate(self, value: str | None) -> ValidationOutcome:
    text = as_text(value)
    if text is None:
      return ValidationOutcome.success()

    length = len(text.strip())
    if self.constraint.contains(length):
      return ValidationOutcome.success()
    return ValidationOutcome.failure(
      self.reason_code,
      MinLength=self.min_length,
      MaxLength=UNBOUNDED if self.max_length is None else self.max_length,
      TotalLength=length,
    )

  @override
  def check(self, value: str | None) -> bool:
    return self.evaluate(value).passed

  @override
  def describe(self) -> str:
    return f"trimmed length {self.constraint.describe()}"


class TrimmedExactLength(TrimmedLength):
  """Validator for an exact trimmed length; the length must be positive."""

  def __init__(self, length: int) -> None:
    super().__init__(length)


def trimmed_length(
  min_or_exact: int, max_length: int | None = None, *, exact: bool | None = None
) -> TrimmedLength:
  """Build a trimmed-length rule.

  `trimmed_length(3)` requires exactly 3 characters, `trimmed_length(2, 4)`
  between 2 and 4, `trimmed_length(2, None, exact=False)` at least 2.
  """
  if exact is None:
    exact = max_length is None
  if exact:
    return TrimmedExactLength(min_or_exact)
  return TrimmedLength(min_or_exact, UNBOUNDED if max_length is None else max_length)
