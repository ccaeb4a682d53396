"""Custom exceptions for fieldwarden."""


class FieldwardenError(Exception):
  """Base class for all fieldwarden errors."""


class ConfigurationError(FieldwardenError, ValueError):
  """Raised when a rule is constructed with impossible or contradictory bounds."""


class DecimalParseError(FieldwardenError, ValueError):
  """Raised when a text is not a valid decimal literal."""
