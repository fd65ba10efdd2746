#!/usr/bin/env python3
# scripts/01_plot_group_comparison.py

import os
import sys
import time
import logging
import yaml
import pandas as pd

# add src/ to sys.path so we can import groupcompare without installing
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from groupcompare.analysis import describe_groups, stack_transforms
from groupcompare.config import load_config as load_plot_config
from groupcompare.visualization import GroupedComparisonPlotter

# repo root
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

CONFIG_PATH = os.path.join(REPO_ROOT, "scripts", "config", "plot_group_comparison.yaml")

def load_config(config_path=CONFIG_PATH):
    with open(config_path, "r") as f:
        return yaml.safe_load(f)

def main():
    start = time.time()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    config = load_config()

    in_path = os.path.join(REPO_ROOT, config["input_csv"])
    out_dir = os.path.join(REPO_ROOT, config["output_dir"])
    os.makedirs(out_dir, exist_ok=True)

    df = pd.read_csv(in_path)
    print(f"[INFO] Loaded {df.shape[0]} rows from {in_path}")

    # plot: block goes through the package loader (defaults + validation)
    plotter = GroupedComparisonPlotter(load_plot_config(CONFIG_PATH, section="plot"))
    group_col = plotter.config["group_col"]
    value_col = plotter.config["value_col"]

    # descriptive table next to the plots
    summary = describe_groups(df, group_col, value_col)
    summary_path = os.path.join(out_dir, "group_summary.csv")
    summary.to_csv(summary_path, index=False)
    print(f"[INFO] Saved {summary_path}")

    # single panel
    fig, layout = plotter.plot(df, facet=False)
    raw_path = os.path.join(out_dir, "group_comparison.png")
    plotter.save_plot(fig, raw_path)
    print(f"[INFO] Saved plot with {layout['n_points']} points -> {raw_path}")

    # one free-scaled panel per transform
    transforms = config.get("transforms", ["raw", "log"])
    stacked = stack_transforms(df, value_col=value_col, transforms=transforms,
                               panel_col=plotter.config["panel_col"])
    fig, layout = plotter.plot(stacked, facet=True)
    facet_path = os.path.join(out_dir, "group_comparison_transforms.png")
    plotter.save_plot(fig, facet_path)
    print(f"[INFO] Saved {len(layout['panels'])}-panel plot -> {facet_path}")

    elapsed = time.time() - start
    print(f"[INFO] Completed in {elapsed:.2f}s.")

if __name__ == "__main__":
    main()
