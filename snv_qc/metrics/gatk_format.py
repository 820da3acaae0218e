"""Splitting of GATK HaplotypeCaller combined FORMAT values.

A table with a ``format_vals`` column holding 'GT:AD:DP:GQ' strings (e.g.
'0/1:7,3:10:40') is augmented with typed columns so depth and allele
fraction can be compared with other callers.
"""
from __future__ import annotations

import pandas as pd

from ..config import FORMAT_COLUMN
from ..exceptions import SnvQcError
from ..utils import split_format_value

__all__ = ["FORMAT_SPLIT_COLUMNS", "split_gatk_format_vals"]

FORMAT_SPLIT_COLUMNS = [
    "genotype",
    "allele_depth",
    "ref_depth",
    "alt_depth",
    "vaf",
    "reported_depth",
    "genotype_quality",
]

_INT_COLUMNS = ["ref_depth", "alt_depth", "reported_depth", "genotype_quality"]


def split_gatk_format_vals(df: pd.DataFrame, column: str = FORMAT_COLUMN) -> pd.DataFrame:
    """Return a copy of ``df`` with the FORMAT value split into columns.

    Added columns: genotype, allele_depth, ref_depth, alt_depth, vaf,
    reported_depth, genotype_quality. ``vaf`` is a percentage and is NaN
    when both allele depths are zero. Existing columns of the same name are
    overwritten; row order and index are kept.

    Raises
    ------
    MalformedFormatField, MalformedAlleleDepth, ParseError
        On the first row that cannot be split; the message names the row.
    """
    if column not in df.columns:
        raise ValueError(f"DataFrame must contain '{column}' column for FORMAT splitting")

    records = []
    for label, value in df[column].items():
        try:
            records.append(split_format_value(value))
        except SnvQcError as exc:
            raise type(exc)(f"row {label!r}: {exc}") from exc

    parsed = pd.DataFrame(records, columns=FORMAT_SPLIT_COLUMNS)
    out = df.copy()
    for col in FORMAT_SPLIT_COLUMNS:
        out[col] = parsed[col].to_numpy()
    out = out.astype({c: "int64" for c in _INT_COLUMNS})
    out["vaf"] = out["vaf"].astype("float64")
    return out
