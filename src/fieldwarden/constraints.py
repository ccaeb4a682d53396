"""Immutable configuration objects shared by the rules.

Every constraint checks its own invariants on construction and raises
ConfigurationError straight away, so a rule that was built is always usable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING

from loguru import logger
import pandas as pd

from fieldwarden.decimal_value import DecimalValue
from fieldwarden.exceptions import ConfigurationError, DecimalParseError

if TYPE_CHECKING:
  from collections.abc import Iterable, Mapping

# Host convention for "no upper bound" on lengths
UNBOUNDED = -1


def _to_bound(value: object, name: str) -> Decimal:
  try:
    return DecimalValue.coerce(value).to_decimal()
  except DecimalParseError as e:
    raise ConfigurationError(f"{name} bound must be a number, got {value!r}") from e


@dataclass(frozen=True, slots=True)
class RangeConstraint:
  """Inclusive numeric range `[lower, upper]`.

  Attributes:
    lower: Lowest accepted value.
    upper: Highest accepted value, or None for a one-sided `>= lower` range.
  """

  lower: Decimal
  upper: Decimal | None = None

  def __post_init__(self) -> None:
    object.__setattr__(self, "lower", _to_bound(self.lower, "Lower"))
    if self.upper is not None:
      object.__setattr__(self, "upper", _to_bound(self.upper, "Upper"))
      if self.lower > self.upper:
        raise ConfigurationError(
          f"Lower bound {self.lower} is greater than upper bound {self.upper}"
        )

  def contains(self, value: Decimal) -> bool:
    if value < self.lower:
      return False
    return self.upper is None or value <= self.upper

  def describe(self) -> str:
    if self.upper is None:
      return f">= {self.lower}"
    return f"between {self.lower} and {self.upper}"


@dataclass(frozen=True, slots=True)
class LengthConstraint:
  """Inclusive bounds on a (trimmed) text length.

  Attributes:
    min_length: Shortest accepted length, non-negative.
    max_length: Longest accepted length, or None when unbounded. The host
      sentinel UNBOUNDED (-1) is accepted and stored as None.
  """

  min_length: int
  max_length: int | None = None

  def __post_init__(self) -> None:
    if self.max_length == UNBOUNDED:
      object.__setattr__(self, "max_length", None)
    if self.min_length < 0:
      raise ConfigurationError(
        f"Min length should not be negative, got {self.min_length}"
      )
    if self.max_length is not None and self.max_length < self.min_length:
      raise ConfigurationError(
        f"Max should be larger than min (min={self.min_length}, max={self.max_length})"
      )

  @classmethod
  def exact(cls, length: int) -> LengthConstraint:
    """Constraint accepting exactly `length` characters.

    Raises:
      ConfigurationError: If length is not positive.
    """
    if length <= 0:
      raise ConfigurationError(f"Length should be larger than 0, got {length}")
    return cls(length, length)

  @property
  def is_exact(self) -> bool:
    return self.max_length == self.min_length

  def contains(self, length: int) -> bool:
    if length < self.min_length:
      return False
    return self.max_length is None or length <= self.max_length

  def describe(self) -> str:
    if self.is_exact:
      return f"exactly {self.min_length}"
    if self.max_length is None:
      return f"at least {self.min_length}"
    return f"between {self.min_length} and {self.max_length}"


@dataclass(frozen=True, slots=True)
class MembershipSet:
  """Case-insensitive set of text options.

  Options are kept as given; candidates are trimmed before lookup.
  """

  options: tuple[str, ...]
  _folded: frozenset[str] = field(init=False, repr=False, compare=False)

  def __post_init__(self) -> None:
    object.__setattr__(self, "_folded", frozenset(o.lower() for o in self.options))

  @classmethod
  def of(cls, options: Iterable[object]) -> MembershipSet:
    """Build from caller-supplied options, skipping None entries."""
    return cls(tuple(str(o) for o in options if o is not None))

  def __len__(self) -> int:
    return len(self.options)

  def contains(self, candidate: str) -> bool:
    return candidate.strip().lower() in self._folded


@dataclass(frozen=True, eq=False)
class UniquenessCorpus:
  """Snapshot of existing values, indexed for case-insensitive counting.

  Attributes:
    counts: Occurrences per trimmed, lower-cased entry.
    size: Number of non-null entries indexed.
  """

  counts: Mapping[str, int]
  size: int

  @classmethod
  def of(cls, items: Iterable[object]) -> UniquenessCorpus:
    """Index a sequence of existing values.

    Null entries (None, NaN) are ignored. Everything else is rendered with
    `str`, trimmed and lower-cased before counting.
    """
    series = pd.Series(list(items), dtype=object)
    present = series[series.notna()]
    keys = present.astype(str).str.strip().str.lower()
    counts = keys.value_counts()
    logger.debug(
      "Indexed {} corpus entries ({} nulls skipped)",
      len(present),
      len(series) - len(present),
    )
    return cls(
      counts=MappingProxyType({str(k): int(v) for k, v in counts.items()}),
      size=len(present),
    )

  def count(self, candidate: object) -> int:
    """Number of corpus entries matching the candidate."""
    return self.counts.get(str(candidate).strip().lower(), 0)
