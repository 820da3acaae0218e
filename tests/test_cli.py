import pandas as pd

from snv_qc.cli import build_parser, main

from conftest import LONG_ROWS, to_tsv


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_wide_command(tmp_path, long_tsv_path):
    out = tmp_path / "wide" / "wide.tsv"
    assert main(["wide", "--tsv", str(long_tsv_path), "--out", str(out)]) == 0
    wide = pd.read_csv(out, sep="\t")
    assert list(wide.columns[-2:]) == ["S1", "S2"]
    assert len(wide) == 3
    assert wide["S2"].isna().sum() == 1


def test_plot_command(tmp_path, long_tsv_path):
    outdir = tmp_path / "plots"
    rc = main(["plot", "--tsv", str(long_tsv_path), "--out", str(outdir), "--sample-name", "NA 12878"])
    assert rc == 0
    assert (outdir / "NA_12878_coverage.png").exists()
    assert (outdir / "NA_12878_vaf.png").exists()


def test_split_format_command(tmp_path):
    src = tmp_path / "gatk.tsv"
    src.write_text("var_key\tformat_vals\nchr1_100_A_T\t0/1:7,3:10:40\nchr2_5_G_C\t0/0:0,0:0:10\n")
    out = tmp_path / "split.tsv"
    assert main(["split-format", "--tsv", str(src), "--out", str(out)]) == 0
    split = pd.read_csv(out, sep="\t")
    assert split["vaf"].iloc[0] == 30.0
    assert split["vaf"].isna().iloc[1]
    assert split["genotype_quality"].tolist() == [40, 10]


def test_malformed_input_reports_error(tmp_path, capsys):
    bad = tmp_path / "bad.tsv"
    bad.write_text(to_tsv([LONG_ROWS[0][:5]]))
    assert main(["wide", "--tsv", str(bad), "--out", str(tmp_path / "w.tsv")]) == 1
    assert "expected 11 tab-separated fields" in capsys.readouterr().err
    assert not (tmp_path / "w.tsv").exists()


def test_parser_defaults():
    args = build_parser().parse_args(["split-format", "--tsv", "a", "--out", "b"])
    assert args.column == "format_vals"
