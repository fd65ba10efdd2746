#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# src/groupcompare/generate_synthetic/synthetic_data.py

import numpy as np
import pandas as pd
from scipy import stats

from groupcompare.errors import ConfigurationError

# location/scale chosen so every group stays positive (log panel is defined)
DEFAULT_GROUP_SPEC = {
    "x": ("normal", 20.0, 2.0),
    "y": ("t", 10, 15.0, 2.0),
    "z": ("t", 10, 30.0, 3.0),
}


# helpers

def _draw(dist: tuple, n: int, rng: np.random.Generator) -> np.ndarray:
    kind = dist[0]
    if kind == "normal":
        _, loc, scale = dist
        return rng.normal(loc, scale, size=n)
    if kind == "t":
        # scaled, shifted Student t
        _, df, loc, scale = dist
        return stats.t.rvs(df, loc=loc, scale=scale, size=n, random_state=rng)
    raise ConfigurationError(f"Unknown distribution '{kind}'. Use 'normal' or 't'.")


# table generators

def simulate_groups(n: int = 20, seed=None, spec: dict = None,
                    group_col: str = "group", value_col: str = "value") -> pd.DataFrame:
    """Simulate ``n`` observations per group in long format (group, value)."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    spec = DEFAULT_GROUP_SPEC if spec is None else spec
    rng = np.random.default_rng(seed)

    frames = []
    for group, dist in spec.items():
        frames.append(pd.DataFrame({group_col: group, value_col: _draw(dist, n, rng)}))

    if not frames:
        return pd.DataFrame({group_col: pd.Series(dtype=object),
                             value_col: pd.Series(dtype=float)})
    return pd.concat(frames, ignore_index=True)
