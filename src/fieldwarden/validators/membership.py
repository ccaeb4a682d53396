"""Membership and uniqueness validators for text candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, override

from fieldwarden.base import Validator
from fieldwarden.constraints import MembershipSet, UniquenessCorpus
from fieldwarden.exceptions import ConfigurationError
from fieldwarden.outcome import ReasonCode
from fieldwarden.utils import as_text, is_absent, is_blank

if TYPE_CHECKING:
  from collections.abc import Iterable


def format_options(options: tuple[str, ...]) -> str:
  """Join options for display, e.g. `"a, b or c"`."""
  if len(options) == 1:
    return options[0]
  return f"{', '.join(options[:-1])} or {options[-1]}"


class In(Validator[object]):
  """Validator that a candidate is one of the allowed options.

  The candidate is trimmed and compared case-insensitively; blank and absent
  candidates fail.

  Example:
    ```python
    In("Yes", "No").check(" yes ")  # True
    In("Yes", "No").check("")       # False
    ```
  """

  reason_code = ReasonCode.NOT_ALLOWED

  def __init__(self, *options: str) -> None:
    super().__init__()
    if not options:
      raise ConfigurationError("At least one valid option is expected")
    self.options = MembershipSet.of(options)

  @override
  def __repr__(self) -> str:
    args = ", ".join(repr(o) for o in self.options.options)
    return f"In({args})"

  @override
  def check(self, value: object) -> bool:
    if is_blank(value):
      return False
    return self.options.contains(str(value))

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    return {"ValidOptions": format_options(self.options.options)}

  @override
  def describe(self) -> str:
    return f"one of {format_options(self.options.options)}"


class NotIn(Validator[object]):
  """Validator that a candidate matches none of the existing options.

  Blank and absent candidates pass.
  """

  reason_code = ReasonCode.ALREADY_EXISTS

  def __init__(self, *options: str) -> None:
    super().__init__()
    self.options = MembershipSet.of(options)

  @override
  def __repr__(self) -> str:
    args = ", ".join(repr(o) for o in self.options.options)
    return f"NotIn({args})"

  @override
  def check(self, value: object) -> bool:
    if is_blank(value):
      return True
    return not self.options.contains(str(value))

  @override
  def describe(self) -> str:
    return f"none of {', '.join(self.options.options)}"


class Unique(Validator[object]):
  """Validator that a candidate occurs at most once in a corpus.

  The corpus is snapshotted on construction; null entries are skipped and the
  rest are compared trimmed and case-insensitively. A candidate that is itself
  part of the corpus counts once, so it passes only if no other entry matches.
  Absent candidates pass.

  Example:
    ```python
    Unique(["x", "y", "x"]).check("x")  # False (two matches)
    Unique(["x", "y", "x"]).check("y")  # True
    ```
  """

  reason_code = ReasonCode.NOT_UNIQUE

  def __init__(self, corpus: Iterable[object]) -> None:
    super().__init__()
    self.corpus = UniquenessCorpus.of(corpus)

  @override
  def __repr__(self) -> str:
    return f"Unique(<{self.corpus.size} entries>)"

  def occurrences(self, value: object) -> int:
    if is_absent(value):
      return 0
    return self.corpus.count(as_text(value))

  @override
  def check(self, value: object) -> bool:
    return self.occurrences(value) <= 1

  @override
  def failure_arguments(self, value: object) -> dict[str, object]:
    return {"Occurrences": self.occurrences(value)}

  @override
  def describe(self) -> str:
    return "unique"
