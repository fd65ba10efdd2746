import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from groupcompare.generate_synthetic import simulate_groups


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def groups_df():
    """20 observations for each of the canonical groups x, y, z."""
    return simulate_groups(n=20, seed=42)


@pytest.fixture
def transformed_df(groups_df):
    """Same data stacked as a raw and a log panel."""
    raw = groups_df.assign(panel="raw")
    log = groups_df.assign(panel="log", value=np.log(groups_df["value"]))
    return pd.concat([raw, log], ignore_index=True)
