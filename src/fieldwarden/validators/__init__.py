"""Re-export all validators from submodules."""

from fieldwarden.validators.dates import (
  After,
  Before,
  DayOfMonth,
  ValidDate,
  ValidMonth,
  ValidYear,
)
from fieldwarden.validators.length import (
  TrimmedExactLength,
  TrimmedLength,
  trimmed_length,
)
from fieldwarden.validators.membership import In, NotIn, Unique
from fieldwarden.validators.numeric import (
  Between,
  DecimalPlaces,
  GreaterThanOrEqual,
  ValidByte,
  ValidDecimal,
  ValidInt,
  ValidPercentage,
)

__all__ = [
  "After",
  "Before",
  "Between",
  "DayOfMonth",
  "DecimalPlaces",
  "GreaterThanOrEqual",
  "In",
  "NotIn",
  "TrimmedExactLength",
  "TrimmedLength",
  "Unique",
  "ValidByte",
  "ValidDate",
  "ValidDecimal",
  "ValidInt",
  "ValidMonth",
  "ValidPercentage",
  "ValidYear",
  "trimmed_length",
]
