"""snv_qc – helpers for replicate SNV/indel QC reports.

Subpackages:
	io        – reading the positional 'long, filled' variant TSV sheets
	metrics   – GATK FORMAT splitting and long/wide reshaping
	plot      – per-variant depth and VAF plots coloured by concordance

Typical use::

	from snv_qc.io import read_filled_variant_tsv
	from snv_qc.metrics import spread_filled_snv_df_to_wide
	from snv_qc.plot import plot_vars_by_coverage

	long_df = read_filled_variant_tsv("replicates.tsv")
	wide_df = spread_filled_snv_df_to_wide(long_df)
	fig = plot_vars_by_coverage(wide_df, long_df, "NA12878", colour_fn=my_colours)
"""

from .exceptions import (  # noqa: F401
	SnvQcError,
	MalformedRow,
	MalformedFormatField,
	MalformedAlleleDepth,
	ParseError,
	DuplicateObservation,
	ColourAssignmentError,
)
from .io import read_filled_variant_tsv  # noqa: F401
from .metrics import split_gatk_format_vals, spread_filled_snv_df_to_wide, gather_wide_to_long  # noqa: F401
from .plot import plot_vars_by_coverage, plot_vars_by_vaf  # noqa: F401

__version__ = "0.1.0"
__all__ = [
	"SnvQcError",
	"MalformedRow",
	"MalformedFormatField",
	"MalformedAlleleDepth",
	"ParseError",
	"DuplicateObservation",
	"ColourAssignmentError",
	"read_filled_variant_tsv",
	"split_gatk_format_vals",
	"spread_filled_snv_df_to_wide",
	"gather_wide_to_long",
	"plot_vars_by_coverage",
	"plot_vars_by_vaf",
	"__version__",
]
