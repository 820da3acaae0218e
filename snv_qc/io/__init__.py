"""I/O subpackage.

Reads the positional 'long, filled' variant TSV sheets and writes derived
tables back out as TSV.
"""

from .variant_tsv import read_filled_variant_tsv, add_derived_fields, write_table_tsv  # noqa: F401

__all__ = ["read_filled_variant_tsv", "add_derived_fields", "write_table_tsv"]
