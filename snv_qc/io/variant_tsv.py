"""Reader for the 'long, filled' variant TSV sheets.

Each line holds one (variant, sample) observation with eleven unnamed,
tab-separated columns in the order given by ``config.LONG_COLUMNS``. The
reader binds names positionally, then derives the fields used by the
reshaping and plotting code:

	vaf_numeric   – VAF percentage string with '%' stripped, as float
	var_key       – 'chr_pos_ref_alt', the join key between long and wide
	var_hgvs      – 'gene;transcript;protein' display label
	bool_genotype – 1 if a variant was called for that sample, else 0
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator, List, Union
import gzip

import pandas as pd

from ..config import LONG_COLUMNS
from ..exceptions import MalformedRow
from ..utils import (
	genotype_is_called,
	make_var_hgvs,
	make_var_key,
	parse_float,
	parse_int,
	parse_vaf_percent,
)

__all__ = ["read_filled_variant_tsv", "add_derived_fields", "write_table_tsv"]

Source = Union[str, Path, IO]


def _iter_lines(source: Source) -> Iterator[str]:
	if hasattr(source, "read"):
		for i, line in enumerate(source):  # type: ignore[arg-type]
			if isinstance(line, bytes):
				line = line.decode("utf-8-sig" if i == 0 else "utf-8")
			elif i == 0:
				line = line.lstrip("\ufeff")
			yield line
		return
	path = str(source)
	opener = gzip.open if path.endswith(".gz") else open
	# utf-8-sig drops a leading byte-order mark
	with opener(path, "rt", encoding="utf-8-sig") as fh:
		yield from fh


def _split_rows(source: Source) -> List[List[str]]:
	rows = []
	n_cols = len(LONG_COLUMNS)
	for lineno, line in enumerate(_iter_lines(source), start=1):
		line = line.rstrip("\r\n")
		if not line:
			continue
		fields = line.split("\t")
		if len(fields) != n_cols:
			raise MalformedRow(f"line {lineno}: expected {n_cols} tab-separated fields, got {len(fields)}")
		rows.append(fields)
	return rows


def add_derived_fields(df: pd.DataFrame) -> pd.DataFrame:
	"""Return a copy of a long table with the four derived columns appended.

	Parameters
	----------
	df : pd.DataFrame
		Long table containing at least ``LONG_COLUMNS``.

	Raises
	------
	ParseError
		If a VAF value is not numeric once '%' is stripped.
	"""
	missing = [c for c in LONG_COLUMNS if c not in df.columns]
	if missing:
		raise ValueError(f"DataFrame is missing long-table columns: {', '.join(missing)}")
	out = df.copy()
	out["vaf_numeric"] = pd.Series([parse_vaf_percent(v) for v in out["vaf"]], index=out.index, dtype="float64")
	out["var_key"] = [make_var_key(*r) for r in zip(out["chr"], out["pos"], out["ref"], out["alt"])]
	out["var_hgvs"] = [make_var_hgvs(*r) for r in zip(out["gene"], out["transcript"], out["protein"])]
	out["bool_genotype"] = out["genotype"].map(genotype_is_called).astype("int64")
	return out


def read_filled_variant_tsv(source: Source, *, verbose: bool = False) -> pd.DataFrame:
	"""Read a long variant TSV (path, .gz path or open text handle).

	Columns: chr, pos, ref, alt, sample, gene, transcript, protein, genotype,
	hq_depth, vaf, vaf_numeric, var_key, var_hgvs, bool_genotype

	Text columns are kept verbatim. ``pos`` is an integer; ``hq_depth`` is a
	float where '', 'NA' and '.' become NaN. Input row order is preserved.

	Raises
	------
	MalformedRow
		If any non-blank line does not have exactly eleven fields.
	ParseError
		If ``pos``, ``hq_depth`` or ``vaf`` hold non-numeric text.
	"""
	rows = _split_rows(source)
	df = pd.DataFrame.from_records(rows, columns=LONG_COLUMNS)
	# Keys are built from the raw text so positions are never re-formatted
	df = add_derived_fields(df)
	df["pos"] = pd.Series([parse_int(v, "pos") for v in df["pos"]], index=df.index, dtype="int64")
	df["hq_depth"] = pd.Series([parse_float(v, "hq_depth") for v in df["hq_depth"]], index=df.index, dtype="float64")
	if verbose:
		print(f"Read {len(df):,} observations: {df['var_key'].nunique():,} variants across {df['sample'].nunique():,} samples")
	return df


def write_table_tsv(df: pd.DataFrame, path: Union[str, Path]) -> None:
	"""Write a table as tab-separated text with a header and no index."""
	df.to_csv(path, sep="\t", index=False)
