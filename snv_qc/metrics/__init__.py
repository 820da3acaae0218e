"""Table transformations: GATK FORMAT splitting and long/wide reshaping."""

from .gatk_format import split_gatk_format_vals  # noqa: F401
from .reshape import (  # noqa: F401
    spread_filled_snv_df_to_wide,
    gather_wide_to_long,
    sample_columns,
    apply_concordance_colours,
)

__all__ = [
    "split_gatk_format_vals",
    "spread_filled_snv_df_to_wide",
    "gather_wide_to_long",
    "sample_columns",
    "apply_concordance_colours",
]
