"""Configuration constants shared across the snv_qc package.

The long TSV sheets carry no header, so the column names are bound
positionally from ``LONG_COLUMNS`` at read time.
"""

from typing import List, Tuple

__all__ = [
    "LONG_COLUMNS",
    "NUMERIC_LONG_COLUMNS",
    "CALLED_GENOTYPES",
    "MISSING_TOKENS",
    "WIDE_DROP_COLUMNS",
    "DEFAULT_CONCORDANCE_COLOUR",
    "MISSING_CONCORDANCE_COLOUR",
    "DEPTH_BREAKS",
    "GENOTYPE_MARKERS",
    "POINT_SIZE",
    "FORMAT_COLUMN",
]

# Fixed positional schema of the 'long, filled' variant sheets
LONG_COLUMNS: List[str] = [
    "chr",
    "pos",
    "ref",
    "alt",
    "sample",
    "gene",
    "transcript",
    "protein",
    "genotype",
    "hq_depth",
    "vaf",
]

NUMERIC_LONG_COLUMNS: Tuple[str, ...] = ("pos", "hq_depth")

# Any het or hom-alt call, phased or not. 0|1 and 1|0 are deliberately equal.
CALLED_GENOTYPES = frozenset({"0/1", "1/1", "0|1", "1|0", "1|1"})

# Text treated as "no value" in numeric columns
MISSING_TOKENS = frozenset({"", "NA", "."})

# Columns not needed once samples are spread to wide format
WIDE_DROP_COLUMNS: List[str] = ["genotype", "hq_depth", "vaf", "vaf_numeric"]

# Placeholder until the concordance colours are assigned upstream
DEFAULT_CONCORDANCE_COLOUR = "black"
# grey50, used for points whose variant has no colour assigned
MISSING_CONCORDANCE_COLOUR = "#7F7F7F"

DEPTH_BREAKS: List[int] = [1, 2, 5, 10, 20, 50, 100, 200, 500, 1000, 2000]

GENOTYPE_MARKERS: List[str] = ["o", "^", "s", "D", "v", "P", "X", "*"]
POINT_SIZE = 60

FORMAT_COLUMN = "format_vals"
