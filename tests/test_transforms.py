"""Tests for stacking transformed copies of a table into panels."""
import numpy as np
import pandas as pd
import pytest

from groupcompare.analysis.transforms import stack_transforms
from groupcompare.errors import ConfigurationError


@pytest.fixture
def small_df():
    return pd.DataFrame({"group": ["x", "x", "y"], "value": [1.0, np.e, 100.0]})


def test_raw_and_log_panels(small_df):
    out = stack_transforms(small_df)

    assert len(out) == 6
    assert out["panel"].tolist() == ["raw"] * 3 + ["log"] * 3
    log_vals = out.loc[out["panel"] == "log", "value"].to_numpy()
    np.testing.assert_allclose(log_vals, [0.0, 1.0, np.log(100.0)])
    # input not mutated
    assert "panel" not in small_df.columns
    assert small_df["value"].tolist() == [1.0, np.e, 100.0]


def test_named_builtins(small_df):
    out = stack_transforms(small_df, transforms=["sqrt", "log10"], panel_col="transform_type")
    assert set(out["transform_type"]) == {"sqrt", "log10"}
    log10 = out.loc[out["transform_type"] == "log10", "value"].to_numpy()
    np.testing.assert_allclose(log10, np.log10([1.0, np.e, 100.0]))


def test_custom_callables(small_df):
    out = stack_transforms(small_df, transforms={"raw": lambda v: v, "neg": lambda v: -v})
    assert out.loc[out["panel"] == "neg", "value"].tolist() == [-1.0, -np.e, -100.0]


def test_log_of_non_positive_raises():
    df = pd.DataFrame({"group": ["x", "y"], "value": [0.0, 3.0]})
    with pytest.raises(ValueError, match="positive"):
        stack_transforms(df, transforms=["log"])


def test_sqrt_of_negative_raises():
    df = pd.DataFrame({"group": ["x"], "value": [-1.0]})
    with pytest.raises(ValueError, match="non-negative"):
        stack_transforms(df, transforms=["sqrt"])


def test_unknown_transform_name(small_df):
    with pytest.raises(ConfigurationError, match="Unknown transform"):
        stack_transforms(small_df, transforms=["raw", "boxcox"])


def test_missing_value_column(small_df):
    with pytest.raises(ConfigurationError, match="not found"):
        stack_transforms(small_df, value_col="measurement")
