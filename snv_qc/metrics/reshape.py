"""Long <-> wide reshaping of variant observations.

The wide table has one row per variant and one column per sample holding
that sample's ``bool_genotype``. It is the table handed to the concordance
colour function before plotting.
"""
from __future__ import annotations

from typing import Callable, List, Optional

import pandas as pd

from ..config import DEFAULT_CONCORDANCE_COLOUR, LONG_COLUMNS, WIDE_DROP_COLUMNS
from ..exceptions import ColourAssignmentError, DuplicateObservation, SnvQcError

__all__ = [
    "spread_filled_snv_df_to_wide",
    "gather_wide_to_long",
    "sample_columns",
    "apply_concordance_colours",
]

ColourFn = Callable[[pd.DataFrame], pd.DataFrame]

_NON_SAMPLE_COLUMNS = set(LONG_COLUMNS) | {
    "vaf_numeric",
    "var_key",
    "var_hgvs",
    "bool_genotype",
    "concordance_col",
}


def sample_columns(wide: pd.DataFrame) -> List[str]:
    """Return the per-sample columns of a wide table.

    Uses the sample list recorded by ``spread_filled_snv_df_to_wide`` when
    still attached, otherwise every column that is not a known variant field.
    """
    recorded = wide.attrs.get("sample_columns")
    if recorded is not None:
        return [c for c in recorded if c in wide.columns]
    return [c for c in wide.columns if c not in _NON_SAMPLE_COLUMNS]


def spread_filled_snv_df_to_wide(
    df: pd.DataFrame,
    default_colour: str = DEFAULT_CONCORDANCE_COLOUR,
    *,
    verbose: bool = False,
) -> pd.DataFrame:
    """Convert a long, filled table to one row per variant.

    A ``concordance_col`` holding ``default_colour`` is added, the
    per-observation columns (genotype, hq_depth, vaf, vaf_numeric) are
    dropped, and samples are spread into columns of ``bool_genotype``.
    Samples without an observation for a variant get ``<NA>``, not 0.

    Returns
    -------
    pd.DataFrame
        Grouping columns first (sorted), then one nullable ``Int64`` column
        per sample (sorted by name).

    Raises
    ------
    DuplicateObservation
        If a sample appears twice for the same variant.
    SnvQcError
        If a sample name equals one of the variant columns.
    """
    for col in ("sample", "bool_genotype", "var_key"):
        if col not in df.columns:
            raise ValueError(f"DataFrame must contain '{col}' column to spread to wide format")

    out = df.copy()
    out["concordance_col"] = default_colour
    out = out.drop(columns=[c for c in WIDE_DROP_COLUMNS if c in out.columns])
    key_cols = [c for c in out.columns if c not in ("sample", "bool_genotype")]

    clashing = sorted({str(s) for s in out["sample"].unique()} & {str(c) for c in key_cols})
    if clashing:
        raise SnvQcError(f"sample name(s) clash with variant columns: {', '.join(clashing)}")

    dup_mask = out.duplicated(subset=key_cols + ["sample"], keep=False)
    if dup_mask.any():
        dups = out.loc[dup_mask, ["var_key", "sample"]].drop_duplicates()
        shown = ", ".join(f"{k} / {s}" for k, s in dups.head(5).itertuples(index=False))
        raise DuplicateObservation(f"{len(dups)} variant/sample pair(s) observed more than once: {shown}")

    if out.empty:
        wide = pd.DataFrame(columns=key_cols)
        samples: List[str] = []
    else:
        wide = out.pivot(index=key_cols, columns="sample", values="bool_genotype")
        samples = [str(s) for s in wide.columns]
        wide.columns = samples
        wide = wide.astype("Int64").reset_index()
    wide.attrs["sample_columns"] = samples

    if verbose:
        print(f"Wide table: {len(wide):,} variants x {len(samples):,} samples")
    return wide


def gather_wide_to_long(wide: pd.DataFrame) -> pd.DataFrame:
    """Expand each sample column of a wide table back into rows.

    Returns the grouping columns plus ``sample`` and ``bool_genotype``;
    absent cells produce no row.
    """
    samples = sample_columns(wide)
    id_cols = [c for c in wide.columns if c not in samples]
    long_df = wide.melt(id_vars=id_cols, value_vars=samples, var_name="sample", value_name="bool_genotype")
    long_df = long_df.dropna(subset=["bool_genotype"])
    long_df["bool_genotype"] = long_df["bool_genotype"].astype("int64")
    return long_df.reset_index(drop=True)


def apply_concordance_colours(wide: pd.DataFrame, colour_fn: Optional[ColourFn]) -> pd.DataFrame:
    """Run a caller-supplied colour function over a wide table.

    ``colour_fn`` takes and returns a wide table with the same rows and a
    filled ``concordance_col``. None leaves the placeholder colours as-is.
    """
    if colour_fn is None:
        return wide
    coloured = colour_fn(wide.copy())
    if not isinstance(coloured, pd.DataFrame):
        raise ColourAssignmentError(f"colour function returned {type(coloured).__name__}, expected DataFrame")
    if len(coloured) != len(wide):
        raise ColourAssignmentError(f"colour function changed row count from {len(wide)} to {len(coloured)}")
    for col in ("var_key", "concordance_col"):
        if col not in coloured.columns:
            raise ColourAssignmentError(f"colour function output lacks '{col}' column")
    return coloured
