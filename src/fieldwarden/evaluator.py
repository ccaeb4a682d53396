"""Adapters turning rules and plain predicates into validation outcomes.

This is the seam to the host: whatever the rule (a Validator, any object with
an `evaluate()` method, or a bare callable returning a truthy value),
`evaluate()` answers with a ValidationOutcome.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, override

from loguru import logger
import pandas as pd

from fieldwarden.base import Validator
from fieldwarden.config import get_config
from fieldwarden.outcome import ReasonCode, ValidationOutcome
from fieldwarden.protocols import Evaluable

if TYPE_CHECKING:
  from collections.abc import Callable, Iterable

  from fieldwarden.base import ColumnData

type Rule = Validator[Any] | Evaluable | Callable[[Any], object]


class Predicate(Validator[Any]):
  """Rule wrapping a plain predicate function.

  The function and the failure context are fixed on construction.

  Example:
    ```python
    even = Predicate(lambda v: int(v) % 2 == 0, name="even")
    even.evaluate("3").reason_code  # ReasonCode.PREDICATE_FAILED
    ```
  """

  def __init__(
    self,
    func: Callable[[Any], object],
    *,
    name: str | None = None,
    reason_code: ReasonCode = ReasonCode.PREDICATE_FAILED,
    **arguments: object,
  ) -> None:
    super().__init__()
    if not callable(func):
      raise TypeError(f"Predicate requires a callable, got {type(func).__name__}")
    self.func = func
    self.name = name or getattr(func, "__name__", "predicate")
    self.reason_code = reason_code
    self.arguments = tuple(arguments.items())

  @override
  def __repr__(self) -> str:
    return f"Predicate({self.name})"

  @override
  def check(self, value: Any) -> bool:
    return bool(self.func(value))

  @override
  def failure_arguments(self, value: Any) -> dict[str, object]:
    return dict(self.arguments)

  @override
  def describe(self) -> str:
    return self.name


def as_validator(rule: Rule) -> Validator[Any] | Evaluable:
  """Return the rule itself, or wrap a bare callable in a Predicate.

  Raises:
    TypeError: If the rule is neither evaluable nor callable.
  """
  if isinstance(rule, (Validator, Evaluable)):
    return rule
  if callable(rule):
    return Predicate(rule)
  raise TypeError(f"Cannot evaluate with {type(rule).__name__}: not a rule or callable")


def _describe(rule: object) -> str:
  describe = getattr(rule, "describe", None)
  return describe() if callable(describe) else repr(rule)


def evaluate(rule: Rule, value: object) -> ValidationOutcome:
  """Evaluate one candidate against one rule.

  Honours `Config.skip_validation` (every candidate passes) and
  `Config.log_failures` (each rejection is logged as a warning).

  Raises:
    TypeError: If the rule is neither evaluable nor callable.
  """
  validator = as_validator(rule)
  config = get_config()
  if config.skip_validation:
    return ValidationOutcome.success()

  outcome = validator.evaluate(value)
  if not outcome.passed and config.log_failures:
    logger.warning(
      "Rule '{}' rejected {!r}: {}", _describe(validator), value, outcome.reason_code
    )
  return outcome


def evaluate_vectorized(rule: Rule, data: ColumnData | Iterable[Any]) -> pd.Series:
  """Check every element of columnar data against a rule.

  Returns:
    A boolean Series (True = passed) aligned with the input.
  """
  target = as_validator(rule)
  config = get_config()
  if config.skip_validation:
    return Predicate(lambda _: True).check_vectorized(data)

  if isinstance(target, Validator):
    validator = target
  else:
    validator = Predicate(lambda v: target.evaluate(v).passed, name=_describe(target))
  mask = validator.check_vectorized(data)

  rejected = int((~mask).sum())
  if rejected and config.log_failures:
    logger.warning(
      "Rule '{}' rejected {} of {} values", _describe(validator), rejected, len(mask)
    )
  return mask
