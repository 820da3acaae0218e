"""High-level plotting API for the snv_qc package.

	variant_plots – per-variant depth and VAF scatter plots coloured by
	                replicate concordance

Import convenience: ``from snv_qc.plot import plot_vars_by_coverage``.
"""

from .variant_plots import *  # noqa: F401,F403
from .variant_plots import __all__  # noqa: F401
