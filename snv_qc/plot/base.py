"""Shared style and output handling for the per-variant plots.

``plot_vars_by_coverage`` and ``plot_vars_by_vaf`` both hand their figure
to ``save_figure``: given an ``output_path`` the figure is written (format
taken from the file suffix, e.g. the CLI's png/pdf/svg choice), closed and
``None`` is returned, otherwise the open Figure goes back to the caller.
"""

from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import seaborn as sns

__all__ = [
	"set_plot_style",
	"save_figure",
]


def set_plot_style() -> None:
	"""Whitegrid seaborn theme with the font sizes used for variant labels."""
	sns.set_theme(style="whitegrid")
	plt.rcParams.update({
		"axes.titlesize": 13,
		"axes.labelsize": 11,
		"font.size": 10,
		"ytick.labelsize": 9,
		"figure.dpi": 100,
	})


def save_figure(fig: plt.Figure, output_path: Optional[str]) -> Optional[plt.Figure]:
	"""Write and close ``fig`` when ``output_path`` is set, else return it open."""
	if output_path:
		fig.savefig(output_path, bbox_inches="tight")
		plt.close(fig)
		return None
	return fig
