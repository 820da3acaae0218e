"""Example: per-variant replicate plots with a simple concordance colouring.

Usage (adjust path):
    PYTHONPATH=.. python3 examples/replicate_concordance_plots.py \
        --tsv replicates.long.tsv --sample-name NA12878 --outdir replicate_plots
"""
from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from snv_qc.io import read_filled_variant_tsv, write_table_tsv
from snv_qc.metrics import sample_columns, spread_filled_snv_df_to_wide
from snv_qc.plot import plot_vars_by_coverage, plot_vars_by_vaf


def colour_by_agreement(wide: pd.DataFrame) -> pd.DataFrame:
    """Green if every replicate made the same call, red otherwise."""
    calls = wide[sample_columns(wide)]
    concordant = calls.nunique(axis=1, dropna=False) == 1
    wide["concordance_col"] = concordant.map({True: "#2E7D32", False: "#C62828"})
    return wide


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--tsv", required=True, help="Long, filled variant TSV")
    ap.add_argument("--sample-name", required=True, help="Sample name for plot titles")
    ap.add_argument("--outdir", required=True, help="Output directory for plots")
    args = ap.parse_args()

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    long_df = read_filled_variant_tsv(args.tsv, verbose=True)
    wide_df = spread_filled_snv_df_to_wide(long_df, verbose=True)
    write_table_tsv(colour_by_agreement(wide_df.copy()), outdir / "wide.tsv")

    plot_vars_by_coverage(
        wide_df, long_df, args.sample_name,
        colour_fn=colour_by_agreement,
        output_path=str(outdir / "coverage.png"),
    )
    plot_vars_by_vaf(
        wide_df, long_df, args.sample_name,
        colour_fn=colour_by_agreement,
        output_path=str(outdir / "vaf.png"),
    )
    print(f"Plots written to: {outdir}")


if __name__ == "__main__":
    main()
