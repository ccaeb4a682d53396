"""Global configuration for the fieldwarden library."""

from __future__ import annotations

import contextlib
import dataclasses
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Iterator


@dataclasses.dataclass
class Config:
  """Global configuration settings.

  Attributes:
    skip_validation: Whether `evaluate()` should pass every candidate without
      running the rule (default: False).
    log_failures: Whether `evaluate()` logs a warning for each rejected
      candidate (default: False).
    min_year: Lowest year accepted by ValidYear (default: 1950).
    year_lookahead: How many years past the current one ValidYear accepts
      (default: 2).
  """

  skip_validation: bool = False
  log_failures: bool = False
  min_year: int = 1950
  year_lookahead: int = 2


# Singleton instance
_config = Config()


def get_config() -> Config:
  """Get the global configuration."""
  return _config


def reset_config() -> None:
  """Reset configuration to defaults (mostly for testing)."""
  global _config
  _config = Config()


@contextlib.contextmanager
def overrides(**kwargs: Any) -> Iterator[None]:
  """Context manager to temporarily override configuration.

  Useful for:
  - Temporarily disabling validation (skip_validation=True)
  - Tracing rejected candidates (log_failures=True)
  - Pinning the accepted year window (min_year=2000, year_lookahead=0)

  Example:
    ```python
    with overrides(log_failures=True):
      outcome = evaluate(ValidYear(), "1949")
    ```
  """
  original = {}
  for key, value in kwargs.items():
    if hasattr(_config, key):
      original[key] = getattr(_config, key)
      setattr(_config, key, value)
    else:
      raise AttributeError(f"Config has no attribute '{key}'")

  try:
    yield
  finally:
    for key, value in original.items():
      setattr(_config, key, value)
