#!/usr/bin/env python3
# src/groupcompare/visualization/boxplots.py

import logging
import warnings
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.lines import Line2D

from groupcompare.analysis.summaries import BOX_COLUMNS, summarise_boxes
from groupcompare.config import merge_config
from groupcompare.errors import ConfigurationError, EmptyInputWarning, UnknownGroupError

logger = logging.getLogger(__name__)

POINT_COLUMNS = ["group", "value", "x", "color", "size"]
MM_TO_PT = 72.27 / 25.4  # ggplot point sizes are given in mm


class GroupedComparisonPlotter:
    """Box-and-jitter comparison of groups, optionally split into free-scaled panels."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize plotter with configuration (merged over DEFAULT_CONFIG)."""
        self.config = merge_config(config)

    # input checks

    def _validate(self, df: pd.DataFrame, facet: bool) -> None:
        """Fail before any plotting if the table cannot be drawn as requested."""
        if not isinstance(df, pd.DataFrame):
            raise ConfigurationError(
                f"Input data must be a pandas DataFrame, got {type(df).__name__}"
            )

        group_col = self.config["group_col"]
        value_col = self.config["value_col"]
        panel_col = self.config["panel_col"]

        required = [group_col, value_col] + ([panel_col] if facet else [])
        missing = [col for col in required if col not in df.columns]
        if missing:
            hint = " (required when facet=True)" if panel_col in missing else ""
            raise ConfigurationError(
                f"Column(s) {missing} not found in dataset{hint}. "
                f"Available columns: {list(df.columns)}"
            )

        for col in required:
            n_null = int(df[col].isna().sum())
            if n_null:
                raise ConfigurationError(
                    f"Column '{col}' has {n_null} missing value(s); "
                    f"every record needs a {col}"
                )

        if len(df) and not pd.api.types.is_numeric_dtype(df[value_col]):
            raise ConfigurationError(
                f"Column '{value_col}' must be numeric, got dtype {df[value_col].dtype}"
            )

        if len(df):
            n_bad = int((~np.isfinite(df[value_col].to_numpy(dtype=float))).sum())
            if n_bad:
                raise ConfigurationError(
                    f"Column '{value_col}' has {n_bad} non-finite value(s) (inf)"
                )

    def _resolve_colors(self, groups) -> Dict[Any, str]:
        """Look up each group's colour, applying the unknown_group policy."""
        palette = self.config["palette"]
        unknown = [g for g in groups if str(g) not in palette]
        if unknown and self.config["unknown_group"] == "error":
            raise UnknownGroupError(unknown, palette)
        if unknown:
            logger.warning(
                "Group(s) %s not in palette, drawing them in %s",
                unknown, self.config["fallback_color"],
            )
        return {g: palette.get(str(g), self.config["fallback_color"]) for g in groups}

    # layout

    def _build_panel(self, panel_df: pd.DataFrame, name, colors: Dict[Any, str],
                     rng: np.random.Generator) -> Dict[str, Any]:
        """Box summaries, jittered points and value range for a single panel."""
        group_col = self.config["group_col"]
        value_col = self.config["value_col"]
        width = self.config["jitter_width"]

        boxes = summarise_boxes(panel_df, group_col, value_col)
        groups = boxes["group"].tolist()
        positions = {g: float(i) for i, g in enumerate(groups)}
        boxes.insert(1, "position", [positions[g] for g in groups])

        base_x = panel_df[group_col].map(positions).to_numpy(dtype=float)
        points = pd.DataFrame({
            "group": panel_df[group_col].to_numpy(),
            "value": panel_df[value_col].to_numpy(dtype=float),
            "x": base_x + rng.uniform(-width, width, size=len(panel_df)),
            "color": panel_df[group_col].map(colors).to_numpy(),
            "size": self.config["point_size"],
        }, columns=POINT_COLUMNS)

        if len(points):
            lo, hi = points["value"].min(), points["value"].max()
            margin = (hi - lo) * 0.05 if hi > lo else 1.0
            y_limits = (float(lo - margin), float(hi + margin))
        else:
            y_limits = None

        logger.debug("Panel %r: %d group(s), %d point(s)", name, len(groups), len(points))
        return {
            "panel": name,
            "groups": groups,
            "boxes": boxes,
            "points": points,
            "y_limits": y_limits,
        }

    def _empty_panel(self) -> Dict[str, Any]:
        boxes = pd.DataFrame(columns=BOX_COLUMNS)
        boxes.insert(1, "position", pd.Series(dtype=float))
        return {
            "panel": None,
            "groups": [],
            "boxes": boxes,
            "points": pd.DataFrame(columns=POINT_COLUMNS),
            "y_limits": None,
        }

    def build(self, df: pd.DataFrame, facet: Optional[bool] = None) -> Dict[str, Any]:
        """
        Describe the plot without drawing it.

        Returns a dict with one entry per panel under ``panels`` (a single panel
        named None when not facetting), each holding its box summaries, its
        jittered points and its own value-axis limits.
        """
        facet = self.config["facet"] if facet is None else bool(facet)
        self._validate(df, facet)

        layout = {
            "facet": facet,
            "x_label": "",
            "y_label": self.config["y_label"] or self.config["value_col"],
            "show_legend": self.config["show_legend"],
            "colors": {},
            "panels": [],
            "n_points": 0,
        }

        if len(df) == 0:
            warnings.warn("No records to plot; returning an empty plot frame.",
                          EmptyInputWarning, stacklevel=2)
            layout["panels"].append(self._empty_panel())
            return layout

        group_col = self.config["group_col"]
        # same ordering as the per-panel groupby in summarise_boxes
        colors = self._resolve_colors(list(df.groupby(group_col, sort=True, observed=True).groups))
        rng = np.random.default_rng(self.config["seed"])

        if facet:
            panel_col = self.config["panel_col"]
            for name, panel_df in df.groupby(panel_col, sort=True, observed=True):
                layout["panels"].append(self._build_panel(panel_df, name, colors, rng))
        else:
            layout["panels"].append(self._build_panel(df, None, colors, rng))

        layout["colors"] = colors
        layout["n_points"] = int(sum(len(p["points"]) for p in layout["panels"]))
        logger.info("Built %d panel(s) with %d point(s)", len(layout["panels"]), layout["n_points"])
        return layout

    # drawing

    def _draw_panel(self, ax, panel: Dict[str, Any], layout: Dict[str, Any]) -> None:
        boxes = panel["boxes"]
        if len(boxes):
            stats = [
                {
                    "label": str(row.group),
                    "med": row.median,
                    "q1": row.q1,
                    "q3": row.q3,
                    "whislo": row.lower_whisker,
                    "whishi": row.upper_whisker,
                    "fliers": [],
                }
                for row in boxes.itertuples(index=False)
            ]
            ax.bxp(
                stats,
                positions=boxes["position"].tolist(),
                widths=self.config["box_width"],
                showfliers=False,
                patch_artist=True,
                boxprops={"facecolor": "white", "edgecolor": "black"},
                medianprops={"color": "black", "linewidth": 2},
                whiskerprops={"color": "black"},
                capprops={"color": "black"},
            )
            ax.set_xticks(boxes["position"].tolist())
            ax.set_xticklabels([str(g) for g in panel["groups"]])
            # room for the widest of box and jitter band around the outer groups
            pad = max(self.config["jitter_width"], self.config["box_width"] / 2) + 0.1
            ax.set_xlim(-pad, len(boxes) - 1 + pad)

        points = panel["points"]
        if len(points):
            ax.scatter(
                points["x"],
                points["value"],
                c=points["color"].tolist(),
                s=(points["size"].to_numpy(dtype=float) * MM_TO_PT) ** 2,
                zorder=3,
            )

        if panel["y_limits"] is not None:
            ax.set_ylim(*panel["y_limits"])
        if layout["facet"] and panel["panel"] is not None:
            ax.set_title(str(panel["panel"]))
        ax.set_xlabel(layout["x_label"])
        ax.set_ylabel(layout["y_label"])

    def render(self, layout: Dict[str, Any]):
        """Draw a layout from build() into a new matplotlib Figure (one row of panels)."""
        panels: List[Dict[str, Any]] = layout["panels"]
        width, height = self.config["panel_size"]
        base = self.config["base_size"]
        rc = {
            "font.size": base,
            "axes.labelsize": base,
            "axes.titlesize": base,
            "xtick.labelsize": base * 0.8,
            "ytick.labelsize": base * 0.8,
        }

        with sns.axes_style("whitegrid"), sns.plotting_context("notebook", rc=rc):
            fig, axes = plt.subplots(
                1, len(panels),
                figsize=(width * len(panels), height),
                sharey=False,
                squeeze=False,
            )
            for ax, panel in zip(axes[0], panels):
                self._draw_panel(ax, panel, layout)

            if layout["show_legend"] and layout["colors"]:
                handles = [
                    Line2D([], [], marker="o", linestyle="", color=color, label=str(group))
                    for group, color in layout["colors"].items()
                ]
                fig.legend(handles=handles, loc="lower center", ncol=len(handles),
                           frameon=False)
            fig.tight_layout()
        return fig

    def plot(self, df: pd.DataFrame, facet: Optional[bool] = None):
        """Build and render; returns (figure, layout)."""
        layout = self.build(df, facet=facet)
        return self.render(layout), layout

    def save_plot(self, fig, out_path: str, dpi: Optional[int] = None) -> None:
        """Save figure to disk and close it."""
        fig.savefig(out_path, dpi=dpi or self.config["dpi"], bbox_inches="tight")
        plt.close(fig)
        logger.info("Saved plot -> %s", out_path)


def make_group_boxplot(df: pd.DataFrame, facet: bool = False,
                       config: Optional[Dict[str, Any]] = None):
    """Grouped boxplot with jittered points, one free-scaled panel per panel value if facet."""
    fig, _ = GroupedComparisonPlotter(config).plot(df, facet=facet)
    return fig
