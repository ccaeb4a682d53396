"""Fieldwarden - composable validation rules for business-object properties."""

__version__ = "0.1.0"

# Base classes
from fieldwarden.base import Validator

# Configuration
from fieldwarden.config import get_config, overrides, reset_config

# Constraints
from fieldwarden.constraints import (
  LengthConstraint,
  MembershipSet,
  RangeConstraint,
  UniquenessCorpus,
)

# Decimal analysis
from fieldwarden.decimal_value import DecimalValue, significant_scale

# Evaluation
from fieldwarden.evaluator import Predicate, evaluate, evaluate_vectorized

# Exceptions
from fieldwarden.exceptions import (
  ConfigurationError,
  DecimalParseError,
  FieldwardenError,
)

# Outcomes
from fieldwarden.outcome import ReasonCode, ValidationOutcome

# All validators
from fieldwarden.validators import (
  After,
  Before,
  Between,
  DayOfMonth,
  DecimalPlaces,
  GreaterThanOrEqual,
  In,
  NotIn,
  TrimmedExactLength,
  TrimmedLength,
  Unique,
  ValidByte,
  ValidDate,
  ValidDecimal,
  ValidInt,
  ValidMonth,
  ValidPercentage,
  ValidYear,
  trimmed_length,
)

__all__ = [
  "After",
  "Before",
  "Between",
  "ConfigurationError",
  "DayOfMonth",
  "DecimalParseError",
  "DecimalPlaces",
  "DecimalValue",
  "FieldwardenError",
  "GreaterThanOrEqual",
  "In",
  "LengthConstraint",
  "MembershipSet",
  "NotIn",
  "Predicate",
  "RangeConstraint",
  "ReasonCode",
  "TrimmedExactLength",
  "TrimmedLength",
  "Unique",
  "UniquenessCorpus",
  "ValidByte",
  "ValidDate",
  "ValidDecimal",
  "ValidInt",
  "ValidMonth",
  "ValidPercentage",
  "ValidYear",
  "ValidationOutcome",
  "Validator",
  "__version__",
  "evaluate",
  "evaluate_vectorized",
  "get_config",
  "overrides",
  "reset_config",
  "significant_scale",
  "trimmed_length",
]
