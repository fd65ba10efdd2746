#!/usr/bin/env python3
# src/groupcompare/analysis/transforms.py

import numpy as np
import pandas as pd

from groupcompare.errors import ConfigurationError


def _log(values: pd.Series) -> pd.Series:
    if (values <= 0).any():
        raise ValueError("log transform requires strictly positive values")
    return np.log(values)


def _log10(values: pd.Series) -> pd.Series:
    if (values <= 0).any():
        raise ValueError("log10 transform requires strictly positive values")
    return np.log10(values)


def _sqrt(values: pd.Series) -> pd.Series:
    if (values < 0).any():
        raise ValueError("sqrt transform requires non-negative values")
    return np.sqrt(values)


TRANSFORMS = {
    "raw": lambda values: values,
    "log": _log,
    "log10": _log10,
    "sqrt": _sqrt,
}


def stack_transforms(
    df: pd.DataFrame,
    value_col: str = "value",
    transforms=("raw", "log"),
    panel_col: str = "panel",
) -> pd.DataFrame:
    """
    Repeat the records once per transform, writing the transform name to ``panel_col``.

    ``transforms`` is a sequence of built-in names (raw, log, log10, sqrt) or a
    dict mapping panel names to callables taking and returning a Series.
    """
    if value_col not in df.columns:
        raise ConfigurationError(
            f"Column '{value_col}' not found in dataset. "
            f"Available columns: {list(df.columns)}"
        )

    if isinstance(transforms, dict):
        funcs = dict(transforms)
    else:
        unknown = [name for name in transforms if name not in TRANSFORMS]
        if unknown:
            raise ConfigurationError(
                f"Unknown transform(s) {unknown}. Available: {list(TRANSFORMS)}"
            )
        funcs = {name: TRANSFORMS[name] for name in transforms}

    values = pd.to_numeric(df[value_col], errors="raise")
    frames = []
    for name, func in funcs.items():
        out = df.copy()
        out[value_col] = func(values)
        out[panel_col] = name
        frames.append(out)

    if not frames:
        return df.iloc[0:0].assign(**{panel_col: pd.Series(dtype=object)})
    return pd.concat(frames, ignore_index=True)
