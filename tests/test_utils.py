import math

import pytest

from snv_qc.exceptions import MalformedAlleleDepth, MalformedFormatField, ParseError
from snv_qc.utils import (
    genotype_is_called,
    make_var_hgvs,
    make_var_key,
    parse_float,
    parse_int,
    parse_vaf_percent,
    split_format_value,
    vaf_from_depths,
)


@pytest.mark.parametrize("gt", ["0/1", "1/1", "0|1", "1|0", "1|1"])
def test_called_genotypes(gt):
    assert genotype_is_called(gt) == 1


@pytest.mark.parametrize("gt", ["0/0", "./.", "", None, "1/0", "0|0", "1/2", "1", " 0/1"])
def test_uncalled_genotypes(gt):
    assert genotype_is_called(gt) == 0


def test_parse_vaf_percent_strips_percent():
    assert parse_vaf_percent("12.5%") == 12.5
    assert parse_vaf_percent("12.5") == 12.5
    assert parse_vaf_percent("%12.5%") == 12.5


@pytest.mark.parametrize("value", ["", "NA", ".", None, "%"])
def test_parse_vaf_percent_missing(value):
    assert math.isnan(parse_vaf_percent(value))


def test_parse_vaf_percent_rejects_text():
    with pytest.raises(ParseError):
        parse_vaf_percent("high%")


def test_var_key_and_hgvs():
    assert make_var_key("chr1", 100, "A", "T") == "chr1_100_A_T"
    assert make_var_hgvs("BRCA1", "NM_007294.3", "p.Val10Asp") == "BRCA1;NM_007294.3;p.Val10Asp"


def test_split_format_value():
    assert split_format_value("0/1:7,3:10:40") == {
        "genotype": "0/1",
        "allele_depth": "7,3",
        "ref_depth": 7,
        "alt_depth": 3,
        "vaf": 30.0,
        "reported_depth": 10,
        "genotype_quality": 40,
    }


def test_split_format_value_ignores_extra_segments():
    parsed = split_format_value("1/1:0,20:20:60:0,60,900")
    assert parsed["vaf"] == 100.0
    assert parsed["genotype_quality"] == 60


def test_split_format_value_zero_depth_is_nan():
    parsed = split_format_value("0/0:0,0:0:10")
    assert math.isnan(parsed["vaf"])
    assert parsed["reported_depth"] == 0
    assert math.isnan(vaf_from_depths(0, 0))


@pytest.mark.parametrize("value", ["0/1:7,3:10", "0/1", "", None, 5])
def test_split_format_value_too_few_segments(value):
    with pytest.raises(MalformedFormatField):
        split_format_value(value)


@pytest.mark.parametrize("value", ["0/1:7:10:40", "1/2:7,3,2:12:40"])
def test_split_format_value_bad_allele_depth(value):
    with pytest.raises(MalformedAlleleDepth):
        split_format_value(value)


@pytest.mark.parametrize(
    "value",
    ["0/1:7,x:10:40", "0/1:7,3:.:40", "0/1:7,3:10:4.5", "0/1:7,3:1_0:40", "0/1:7,3:inf:40", "0/1:7,3:10:\uff14\uff10"],
)
def test_split_format_value_non_numeric(value):
    with pytest.raises(ParseError):
        split_format_value(value)


@pytest.mark.parametrize("value", ["1_0", "inf", "nan", "-Infinity", "1e", "\u0661\u0662"])
def test_parse_float_rejects_lenient_forms(value):
    with pytest.raises(ParseError):
        parse_float(value, "hq_depth")


def test_parse_float_plain_numbers():
    assert parse_float("1e3", "hq_depth") == 1000.0
    assert parse_float(" .5 ", "hq_depth") == 0.5
    assert parse_float("-2.", "hq_depth") == -2.0


@pytest.mark.parametrize("value", ["1_0", "+", "7.0", "\u0667"])
def test_parse_int_rejects_lenient_forms(value):
    with pytest.raises(ParseError):
        parse_int(value, "pos")


def test_parse_int_plain_numbers():
    assert parse_int(" 42 ", "pos") == 42
    assert parse_int("-3", "pos") == -3
    assert parse_int(7, "pos") == 7
