"""Base class for validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, override

import numpy as np
import pandas as pd

from fieldwarden.outcome import ReasonCode, ValidationOutcome

if TYPE_CHECKING:
  from collections.abc import Iterable

# Columnar candidates accepted by check_vectorized
ColumnData = pd.Series | pd.Index


class Validator[T]:
  """Base class for validation rules.

  A rule holds only the configuration captured at construction and never
  changes afterwards, so one instance can be evaluated from any number of
  threads.

  Predicate-style rules implement `check()` and, optionally,
  `failure_reason()` / `failure_arguments()`; the base class turns those into
  a ValidationOutcome. Rules with several failure causes override
  `evaluate()` directly.
  """

  reason_code: ReasonCode = ReasonCode.PREDICATE_FAILED

  def check(self, value: T) -> bool:
    """Return True if the candidate satisfies the rule."""
    raise NotImplementedError(
      f"Validator {self.__class__.__name__} does not implement check()"
    )

  def failure_reason(self, value: T) -> ReasonCode:  # noqa: ARG002
    """Reason code reported when `check()` rejects the candidate."""
    return self.reason_code

  def failure_arguments(self, value: T) -> dict[str, object]:  # noqa: ARG002
    """Named arguments reported when `check()` rejects the candidate."""
    return {}

  def evaluate(self, value: T) -> ValidationOutcome:
    """Evaluate a candidate and return its outcome.

    Never raises for a bad candidate; rejection is reported through the
    returned outcome.
    """
    if self.check(value):
      return ValidationOutcome.success()
    return ValidationOutcome.failure(
      self.failure_reason(value), **self.failure_arguments(value)
    )

  def describe(self) -> str:
    """Return a descriptive string for the validator."""
    return self.__class__.__name__

  def check_vectorized(self, data: ColumnData | Iterable[Any]) -> pd.Series:
    """Check every element of columnar data.

    Missing values (NaN, None, NaT) are handed to the rule as None.

    Returns:
      A boolean Series (True = passed) aligned with the input index.
    """
    if isinstance(data, pd.Series):
      series = data
    elif isinstance(data, pd.Index):
      series = pd.Series(list(data), index=data, dtype=object, name=data.name)
    else:
      series = pd.Series(list(data), dtype=object)
    values = series.to_numpy(dtype=object)
    present = series.notna().to_numpy()
    mask = np.fromiter(
      (self.check(v if ok else None) for v, ok in zip(values, present, strict=True)),
      dtype=bool,
      count=len(values),
    )
    return pd.Series(mask, index=series.index, name=series.name)

  @override
  def __repr__(self) -> str:
    return f"{self.__class__.__name__}()"

  @override
  def __eq__(self, other: object) -> bool:
    """Check equality based on type and attributes."""
    if not isinstance(other, type(self)):
      return NotImplemented
    return self.__dict__ == other.__dict__

  @override
  def __hash__(self) -> int:
    """Hash based on type and attributes."""
    return hash((type(self), tuple(sorted(self.__dict__.items()))))
