import io

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from snv_qc.io import read_filled_variant_tsv  # noqa: E402

LONG_ROWS = [
    ["chr1", "100", "A", "T", "S1", "BRCA1", "NM_007294.3", "p.Val10Asp", "0/1", "120", "45.5%"],
    ["chr1", "100", "A", "T", "S2", "BRCA1", "NM_007294.3", "p.Val10Asp", "0/1", "98", "51%"],
    ["chr2", "2000", "G", "C", "S1", "TP53", "NM_000546.5", "p.Arg72Pro", "1|1", "35", "99.1%"],
    ["chr2", "2000", "G", "C", "S2", "TP53", "NM_000546.5", "p.Arg72Pro", "./.", "4", "0%"],
    ["chr3", "50", "T", "TA", "S1", "EGFR", "NM_005228.4", "p.Leu858fs", "1|0", "12", "25.0%"],
]


def to_tsv(rows):
    return "".join("\t".join(r) + "\n" for r in rows)


@pytest.fixture
def long_tsv_text():
    return to_tsv(LONG_ROWS)


@pytest.fixture
def long_tsv_path(tmp_path, long_tsv_text):
    path = tmp_path / "replicates.tsv"
    path.write_text(long_tsv_text)
    return path


@pytest.fixture
def long_df(long_tsv_text):
    return read_filled_variant_tsv(io.StringIO(long_tsv_text))


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
