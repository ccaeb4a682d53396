"""Protocols for fieldwarden rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
  from fieldwarden.outcome import ValidationOutcome


@runtime_checkable
class Evaluable(Protocol):
  """Protocol for rules that produce a full outcome for one candidate."""

  def evaluate(self, value: object) -> ValidationOutcome:
    """Evaluate the candidate, returning pass/fail plus failure arguments."""
    ...
