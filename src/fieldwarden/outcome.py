"""Validation outcomes and failure reason codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, override

if TYPE_CHECKING:
  from collections.abc import Mapping


class ReasonCode(StrEnum):
  """Why a candidate was rejected."""

  NOT_NUMERIC = "not_numeric"
  NOT_INTEGER = "not_integer"
  OUT_OF_RANGE = "out_of_range"
  TOO_MANY_DECIMAL_PLACES = "too_many_decimal_places"
  NOT_A_DATE = "not_a_date"
  TOO_LATE = "too_late"
  TOO_EARLY = "too_early"
  NOT_VALID_FOR_MONTH = "not_valid_date_during_month"
  NOT_ALLOWED = "not_allowed"
  ALREADY_EXISTS = "already_exists"
  NOT_UNIQUE = "not_unique"
  INVALID_LENGTH = "invalid_length"
  PREDICATE_FAILED = "predicate_failed"


_NO_ARGUMENTS: Mapping[str, object] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
  """Result of evaluating one candidate against one rule.

  Attributes:
    passed: Whether the candidate satisfied the rule.
    reason_code: Failure cause, None when the candidate passed.
    arguments: Named values for the host's message template (e.g. MinLength,
      MaxLength, TotalLength). Always empty when the candidate passed.
  """

  passed: bool
  reason_code: ReasonCode | None = None
  arguments: Mapping[str, object] = field(default_factory=lambda: _NO_ARGUMENTS)

  @classmethod
  def success(cls) -> ValidationOutcome:
    return cls(passed=True)

  @classmethod
  def failure(cls, reason_code: ReasonCode, **arguments: object) -> ValidationOutcome:
    return cls(
      passed=False,
      reason_code=reason_code,
      arguments=MappingProxyType(dict(arguments)),
    )

  def __bool__(self) -> bool:
    return self.passed

  @override
  def __repr__(self) -> str:
    if self.passed:
      return "ValidationOutcome(passed=True)"
    parts = [f"reason_code={str(self.reason_code)!r}"]
    parts.extend(f"{k}={v!r}" for k, v in self.arguments.items())
    return f"ValidationOutcome(passed=False, {', '.join(parts)})"
