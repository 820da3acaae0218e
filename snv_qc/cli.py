"""Command line interface for snv_qc.

Current subcommands:
	wide         – spread a long variant TSV to one row per variant
	plot         – depth and VAF per-variant plots for a replicate set
	split-format – split a GATK 'GT:AD:DP:GQ' column into typed columns

Example:
	python -m snv_qc.cli plot --tsv replicates.tsv --sample-name NA12878 --out plots
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

from .config import DEFAULT_CONCORDANCE_COLOUR, FORMAT_COLUMN
from .exceptions import SnvQcError
from .io import read_filled_variant_tsv, write_table_tsv
from .metrics import spread_filled_snv_df_to_wide, split_gatk_format_vals
from .plot import plot_vars_by_coverage, plot_vars_by_vaf


def cmd_wide(args: argparse.Namespace) -> None:
	long_df = read_filled_variant_tsv(args.tsv, verbose=True)
	wide_df = spread_filled_snv_df_to_wide(long_df, default_colour=args.default_colour, verbose=True)
	out = Path(args.out)
	out.parent.mkdir(parents=True, exist_ok=True)
	write_table_tsv(wide_df, out)
	print(f"Wide table written to {out}")


def cmd_plot(args: argparse.Namespace) -> None:
	outdir = Path(args.out)
	outdir.mkdir(parents=True, exist_ok=True)

	long_df = read_filled_variant_tsv(args.tsv, verbose=True)
	if long_df.empty:
		print("No variant observations found.")
		return
	wide_df = spread_filled_snv_df_to_wide(long_df, default_colour=args.default_colour)

	prefix = args.sample_name.replace(" ", "_")
	coverage_path = outdir / f"{prefix}_coverage.{args.format}"
	vaf_path = outdir / f"{prefix}_vaf.{args.format}"
	plot_vars_by_coverage(wide_df, long_df, args.sample_name, output_path=str(coverage_path))
	plot_vars_by_vaf(wide_df, long_df, args.sample_name, output_path=str(vaf_path))
	print(f"Variant plots written to {outdir}")


def cmd_split_format(args: argparse.Namespace) -> None:
	df = pd.read_csv(args.tsv, sep="\t", dtype=str, keep_default_na=False)
	split_df = split_gatk_format_vals(df, column=args.column)
	out = Path(args.out)
	out.parent.mkdir(parents=True, exist_ok=True)
	write_table_tsv(split_df, out)
	print(f"Split {len(split_df):,} FORMAT values; written to {out}")


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="snv_qc", description="Replicate SNV/indel QC helpers")
	sub = p.add_subparsers(dest="command")

	sp = sub.add_parser("wide", help="Spread a long variant TSV to wide format")
	sp.add_argument("--tsv", required=True, help="Long, filled variant TSV (no header; may be .gz)")
	sp.add_argument("--out", required=True, help="Output TSV path")
	sp.add_argument("--default-colour", default=DEFAULT_CONCORDANCE_COLOUR, help="Placeholder concordance colour")
	sp.set_defaults(func=cmd_wide)

	sp2 = sub.add_parser("plot", help="Per-variant depth and VAF plots")
	sp2.add_argument("--tsv", required=True, help="Long, filled variant TSV (no header; may be .gz)")
	sp2.add_argument("--out", required=True, help="Output directory for plots")
	sp2.add_argument("--sample-name", required=True, help="Sample name used in plot titles and file names")
	sp2.add_argument("--default-colour", default=DEFAULT_CONCORDANCE_COLOUR, help="Colour for all points")
	sp2.add_argument("--format", default="png", choices=["png", "pdf", "svg"], help="Image format")
	sp2.set_defaults(func=cmd_plot)

	sp3 = sub.add_parser("split-format", help="Split a GATK FORMAT value column")
	sp3.add_argument("--tsv", required=True, help="Input TSV with a header row")
	sp3.add_argument("--out", required=True, help="Output TSV path")
	sp3.add_argument("--column", default=FORMAT_COLUMN, help="Column holding GT:AD:DP:GQ values")
	sp3.set_defaults(func=cmd_split_format)
	return p


def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if not hasattr(args, 'func'):
		parser.print_help()
		return 1
	try:
		args.func(args)
	except SnvQcError as exc:
		print(f"[ERROR] {exc}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":  # pragma: no cover
	sys.exit(main())
