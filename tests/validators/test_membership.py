"""Tests for membership and uniqueness validators."""

import numpy as np
import pandas as pd
import pytest

from fieldwarden import ConfigurationError, In, NotIn, ReasonCode, Unique
from fieldwarden.validators.membership import format_options


class TestIn:
  """Tests for In validator."""

  def test_case_insensitive_trimmed_match(self):
    v = In("Yes", "No")
    assert v.check(" yes ")
    assert v.check("NO")

  def test_sharp_s_is_not_folded(self):
    v = In("Straße")
    assert v.check("STRAßE")
    assert not v.check("strasse")

  @pytest.mark.parametrize("value", ["maybe", "", "   ", None])
  def test_check_fails(self, value):
    assert not In("Yes", "No").check(value)

  def test_failure_arguments(self):
    outcome = In("a", "b", "c").evaluate("d")
    assert outcome.reason_code is ReasonCode.NOT_ALLOWED
    assert dict(outcome.arguments) == {"ValidOptions": "a, b or c"}

  def test_requires_options(self):
    with pytest.raises(ConfigurationError, match="At least one valid option"):
      In()

  def test_format_options(self):
    assert format_options(("a",)) == "a"
    assert format_options(("a", "b")) == "a or b"


class TestNotIn:
  """Tests for NotIn validator."""

  def test_rejects_existing_option(self):
    outcome = NotIn("admin", "root").evaluate(" ADMIN ")
    assert not outcome.passed
    assert outcome.reason_code is ReasonCode.ALREADY_EXISTS

  @pytest.mark.parametrize("value", ["user", "", "  ", None])
  def test_check_passes(self, value):
    assert NotIn("admin", "root").check(value)

  def test_no_options_accepts_everything(self):
    assert NotIn().check("anything")


class TestUnique:
  """Tests for Unique validator."""

  def test_duplicate_in_corpus_fails(self):
    outcome = Unique(["x", "y", "x"]).evaluate("x")
    assert not outcome.passed
    assert outcome.reason_code is ReasonCode.NOT_UNIQUE
    assert dict(outcome.arguments) == {"Occurrences": 2}

  def test_single_or_missing_match_passes(self):
    v = Unique(["x", "y", "x"])
    assert v.check("y")
    assert v.check("z")

  def test_match_is_trimmed_and_case_insensitive(self):
    assert not Unique(["x", "X "]).check(" x")

  def test_null_entries_are_ignored(self):
    v = Unique(["x", None, np.nan, None])
    assert v.check("x")

  def test_absent_candidate_passes(self):
    assert Unique(["x", "x"]).check(None)

  def test_corpus_from_series(self):
    v = Unique(pd.Series(["a", "A", "b"]))
    assert not v.check("a")
    assert v.check("b")

  def test_sharp_s_does_not_match_double_s(self):
    v = Unique(["Straße", "strasse"])
    assert v.occurrences("strasse") == 1
    assert v.occurrences("STRASSE") == 1
    assert v.check("straße")

  def test_corpus_is_snapshotted(self):
    items = ["x"]
    v = Unique(items)
    items.append("x")
    assert v.check("x")
