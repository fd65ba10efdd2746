# src/groupcompare/analysis/summaries.py

import numpy as np
import pandas as pd
from scipy.stats import sem

BOX_COLUMNS = [
    "group", "n", "lower_whisker", "q1", "median", "q3",
    "upper_whisker", "iqr", "n_outliers",
]


def box_summary(values, whis: float = 1.5) -> dict:
    """
    Tukey box statistics for one sample.

    - hinges are the 25th/75th percentiles (linear interpolation)
    - whiskers reach the most extreme values within ``whis`` * IQR of the hinges
    - values beyond the whiskers are counted as outliers
    """
    arr = np.asarray(values, dtype=float)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        raise ValueError("Cannot compute a box summary of an empty sample")
    if not np.isfinite(arr).all():
        raise ValueError("Cannot compute a box summary with infinite values")

    q1, median, q3 = np.percentile(arr, [25, 50, 75])
    iqr = q3 - q1
    lower_fence = q1 - whis * iqr
    upper_fence = q3 + whis * iqr

    inside = arr[(arr >= lower_fence) & (arr <= upper_fence)]
    return {
        "n": int(arr.size),
        "lower_whisker": float(inside.min()),
        "q1": float(q1),
        "median": float(median),
        "q3": float(q3),
        "upper_whisker": float(inside.max()),
        "iqr": float(iqr),
        "n_outliers": int(arr.size - inside.size),
    }


def summarise_boxes(df: pd.DataFrame, group_col: str = "group", value_col: str = "value",
                    whis: float = 1.5) -> pd.DataFrame:
    # One box summary per group, each computed only from that group's values
    rows = []
    for group, sub in df.groupby(group_col, sort=True, observed=True):
        stats = box_summary(sub[value_col], whis=whis)
        stats["group"] = group
        rows.append(stats)
    return pd.DataFrame(rows, columns=BOX_COLUMNS)


def describe_groups(df: pd.DataFrame, group_col: str = "group",
                    value_col: str = "value") -> pd.DataFrame:
    """Per-group n, mean, median, sample standard deviation and standard error."""
    rows = []
    for group, sub in df.groupby(group_col, sort=True, observed=True):
        x = sub[value_col].dropna().to_numpy(dtype=float)
        n = len(x)
        rows.append({
            "group": group,
            "n": n,
            "mean": x.mean() if n else np.nan,
            "median": np.median(x) if n else np.nan,
            "std_dev": x.std(ddof=1) if n > 1 else np.nan,
            "std_err": sem(x) if n > 1 else np.nan,
        })
    cols = ["group", "n", "mean", "median", "std_dev", "std_err"]
    return pd.DataFrame(rows, columns=cols)
