"""Per-variant replicate plots.

Implements:
 - high-quality depth by variant (log scale)
 - variant allele fraction by variant

Both join the wide table's ``concordance_col`` back onto the long table by
``var_key`` and draw one point per observation. Variants are listed on the
vertical axis in first-seen order of the long table (first variant at the
top), marker shape encodes the genotype call and the point colour is taken
literally from ``concordance_col``.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.ticker import NullLocator

from ..config import DEPTH_BREAKS, GENOTYPE_MARKERS, MISSING_CONCORDANCE_COLOUR, POINT_SIZE
from ..metrics.reshape import apply_concordance_colours
from .base import set_plot_style, save_figure

__all__ = [
	"join_colours_to_long",
	"plot_vars_by_coverage",
	"plot_vars_by_vaf",
]


def join_colours_to_long(
	wide: pd.DataFrame,
	long: pd.DataFrame,
	missing_colour: str = MISSING_CONCORDANCE_COLOUR,
) -> pd.DataFrame:
	"""Attach each variant's concordance colour to its long-table rows.

	Every long row is kept, in order. Rows whose ``var_key`` is not in
	``wide`` get ``missing_colour``. If ``wide`` lists a variant twice the
	first colour wins.
	"""
	if not {"var_key", "concordance_col"}.issubset(wide.columns):
		raise ValueError("Wide DataFrame must contain var_key and concordance_col columns")
	if "var_key" not in long.columns:
		raise ValueError("Long DataFrame must contain var_key column")
	colours = wide[["var_key", "concordance_col"]].drop_duplicates(subset="var_key", keep="first")
	long_cols = [c for c in long.columns if c != "concordance_col"]
	joined = long[long_cols].merge(colours, on="var_key", how="left", sort=False)
	joined["concordance_col"] = joined["concordance_col"].fillna(missing_colour)
	return joined


def _variant_scatter(
	joined: pd.DataFrame,
	value_col: str,
	*,
	title: str,
	value_label: str,
	log_scale: bool = False,
	output_path: Optional[str] = None,
) -> Optional[plt.Figure]:
	if joined.empty:
		raise ValueError("No variant observations to plot")
	if not {value_col, "genotype"}.issubset(joined.columns):
		raise ValueError(f"DataFrame must contain {value_col} and genotype columns")
	set_plot_style()
	categories = list(pd.unique(joined["var_key"]))
	positions = {key: i for i, key in enumerate(categories)}
	genotypes = joined["genotype"].fillna("NA").astype(str)

	fig, ax = plt.subplots(figsize=(9, max(4.0, 0.3 * len(categories) + 1.5)))
	handles = []
	for i, gt in enumerate(sorted(genotypes.unique())):
		marker = GENOTYPE_MARKERS[i % len(GENOTYPE_MARKERS)]
		sub = joined[genotypes == gt]
		ax.scatter(
			sub[value_col].astype(float),
			sub["var_key"].map(positions),
			c=list(sub["concordance_col"]),
			marker=marker,
			s=POINT_SIZE,
			edgecolors="none",
		)
		handles.append(Line2D([], [], marker=marker, linestyle="", color="#444444", label=gt))

	ax.set_yticks(np.arange(len(categories)))
	ax.set_yticklabels(categories)
	ax.set_ylim(-0.5, len(categories) - 0.5)
	ax.invert_yaxis()
	if log_scale:
		ax.set_xscale("log")
		# Fixed breaks must not widen the data range
		xlim = ax.get_xlim()
		ax.set_xticks(DEPTH_BREAKS)
		ax.set_xticklabels([str(b) for b in DEPTH_BREAKS])
		ax.xaxis.set_minor_locator(NullLocator())
		ax.set_xlim(xlim)
	ax.legend(handles=handles, title="genotype", loc="center left", bbox_to_anchor=(1.01, 0.5))
	ax.set_title(title)
	ax.set_ylabel("Variant")
	ax.set_xlabel(value_label)
	fig.tight_layout()
	return save_figure(fig, output_path)


def plot_vars_by_coverage(
	wide: pd.DataFrame,
	long: pd.DataFrame,
	sample_name: str,
	*,
	colour_fn: Optional[Callable[[pd.DataFrame], pd.DataFrame]] = None,
	output_path: Optional[str] = None,
) -> Optional[plt.Figure]:
	"""High-quality depth of every observation, one row per variant.

	``colour_fn`` is the optional concordance colour function applied to
	``wide`` before joining; without it the colours already in
	``concordance_col`` are used.
	"""
	joined = join_colours_to_long(apply_concordance_colours(wide, colour_fn), long)
	return _variant_scatter(
		joined,
		"hq_depth",
		title=f"Coverage Depth for {sample_name} Replicate SNVs",
		value_label="High-quality Depth",
		log_scale=True,
		output_path=output_path,
	)


def plot_vars_by_vaf(
	wide: pd.DataFrame,
	long: pd.DataFrame,
	sample_name: str,
	*,
	colour_fn: Optional[Callable[[pd.DataFrame], pd.DataFrame]] = None,
	output_path: Optional[str] = None,
) -> Optional[plt.Figure]:
	"""Variant allele fraction (percent) of every observation, one row per variant."""
	joined = join_colours_to_long(apply_concordance_colours(wide, colour_fn), long)
	return _variant_scatter(
		joined,
		"vaf_numeric",
		title=f"Variant allele fraction for {sample_name} Replicate SNVs",
		value_label="Variant Allele Fraction",
		output_path=output_path,
	)
