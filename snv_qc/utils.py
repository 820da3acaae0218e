"""Small utility helpers used across the snv_qc package.

Pure-Python, per-value helpers that the table level functions in
``snv_qc.io`` and ``snv_qc.metrics`` apply row by row. Kept free of pandas
so they are easy to unit-test.
"""
import math
import re
from typing import Dict, Optional, Tuple, Union

from .config import CALLED_GENOTYPES, MISSING_TOKENS
from .exceptions import MalformedAlleleDepth, MalformedFormatField, ParseError


# Plain ASCII numbers only; no digit-group underscores, inf or nan
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_int(value: str, field: str) -> int:
    """Parse ``value`` as an integer, raising ``ParseError`` naming ``field``."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if not _INT_RE.fullmatch(text):
        raise ParseError(f"{field}: expected an integer, got {value!r}")
    return int(text)


def parse_float(value: Optional[str], field: str) -> float:
    """Parse ``value`` as a float.

    Missing tokens ('', 'NA', '.') and None map to NaN; any other
    non-numeric text raises ``ParseError``.
    """
    if value is None:
        return math.nan
    if isinstance(value, float) and math.isnan(value):
        return math.nan
    text = str(value).strip()
    if text in MISSING_TOKENS:
        return math.nan
    if not _FLOAT_RE.fullmatch(text):
        raise ParseError(f"{field}: expected a number, got {value!r}")
    return float(text)


def parse_vaf_percent(vaf: Optional[str]) -> float:
    """Strip every '%' from a VAF string and parse the rest as a float.

    Example: '12.5%' -> 12.5, '12.5' -> 12.5, '' -> NaN
    """
    if vaf is None:
        return math.nan
    return parse_float(str(vaf).replace("%", ""), "vaf")


def make_var_key(chrom, pos, ref, alt) -> str:
    """Variant key 'chr_pos_ref_alt' used to join long and wide tables."""
    return "_".join(str(v) for v in (chrom, pos, ref, alt))


def make_var_hgvs(gene, transcript, protein) -> str:
    """Display label 'gene;transcript;protein'."""
    return ";".join(str(v) for v in (gene, transcript, protein))


def genotype_is_called(gt: Optional[str]) -> int:
    """Return 1 for a het or hom-alt call, else 0.

    Exact match only, so './.', '0/0', '' and None are all 0.
    """
    return 1 if gt in CALLED_GENOTYPES else 0


def split_allele_depth(ad: str) -> Tuple[int, int]:
    """Split an AD sub-field 'ref,alt' into two ints."""
    parts = ad.split(",")
    if len(parts) != 2:
        raise MalformedAlleleDepth(f"allele depth must be 'ref,alt', got {ad!r}")
    return parse_int(parts[0], "ref_depth"), parse_int(parts[1], "alt_depth")


def vaf_from_depths(ref_depth: int, alt_depth: int) -> float:
    """Alt allele percentage; NaN when there are no reads at all."""
    total = ref_depth + alt_depth
    if total == 0:
        return math.nan
    return alt_depth / total * 100.0


def split_format_value(value: str) -> Dict[str, Union[str, int, float]]:
    """Parse a GATK 'GT:AD:DP:GQ' sample value into typed fields.

    Example: '0/1:7,3:10:40' ->
    {'genotype': '0/1', 'allele_depth': '7,3', 'ref_depth': 7,
     'alt_depth': 3, 'vaf': 30.0, 'reported_depth': 10,
     'genotype_quality': 40}
    Segments past the fourth are ignored.
    """
    if not isinstance(value, str):
        raise MalformedFormatField(f"format value must be text, got {value!r}")
    parts = value.split(":")
    if len(parts) < 4:
        raise MalformedFormatField(f"expected GT:AD:DP:GQ, got {value!r}")
    ref_depth, alt_depth = split_allele_depth(parts[1])
    return {
        "genotype": parts[0],
        "allele_depth": parts[1],
        "ref_depth": ref_depth,
        "alt_depth": alt_depth,
        "vaf": vaf_from_depths(ref_depth, alt_depth),
        "reported_depth": parse_int(parts[2], "reported_depth"),
        "genotype_quality": parse_int(parts[3], "genotype_quality"),
    }


__all__ = [
    "parse_int",
    "parse_float",
    "parse_vaf_percent",
    "make_var_key",
    "make_var_hgvs",
    "genotype_is_called",
    "split_allele_depth",
    "vaf_from_depths",
    "split_format_value",
]
