import pandas as pd
import pytest

from movie_pipeline.transform.year_tokens import (
    RomanToken,
    UnknownToken,
    YearInfo,
    YearToken,
    classify_token,
    parse_year_column,
    parse_year_field,
    split_year_field,
    tokenize_year_field,
)


@pytest.mark.parametrize("year", [1920, 1999, 2019, 2023])
def test_plain_year(year: int) -> None:
    assert parse_year_field(f"({year})") == YearInfo(start_year=year)


def test_closed_range() -> None:
    info = parse_year_field("(2019–2021)")
    assert (info.start_year, info.end_year, info.roman_suffix) == (2019, 2021, None)


def test_open_range_has_no_end_year() -> None:
    info = parse_year_field("(2019– )")
    assert info.start_year == 2019
    assert info.end_year is None


def test_year_with_roman_suffix() -> None:
    info = parse_year_field("(2019) (I)")
    assert (info.start_year, info.end_year, info.roman_suffix) == (2019, None, "(I)")


def test_roman_before_year_and_without_space() -> None:
    assert parse_year_field("(II)(2010–2015)") == YearInfo(2010, 2015, "(II)")


@pytest.mark.parametrize("raw", ["(I)", "", "   ", "garbage", None, float("nan"), "(TV Special)"])
def test_unparseable_year_is_absent(raw) -> None:
    info = parse_year_field(raw)
    assert info.start_year is None
    assert info.end_year is None


def test_roman_only_keeps_suffix() -> None:
    assert parse_year_field("(I)").roman_suffix == "(I)"


def test_non_numeric_year_content_degrades_to_absent() -> None:
    info = parse_year_field("(2019 TV Movie)")
    assert info == YearInfo()


def test_multiple_year_tokens_pick_smallest() -> None:
    info = parse_year_field("(2020) (2018–2019)")
    assert (info.start_year, info.end_year) == (2018, 2019)
    assert info.ambiguous is True


def test_multiple_roman_tokens_pick_smallest() -> None:
    # "(II)" < "(IV)" lexikografisch
    assert parse_year_field("(2001) (IV) (II)").roman_suffix == "(II)"


def test_split_inserts_delimiter_between_groups() -> None:
    assert split_year_field(" (2019) (I) ") == ["(2019)", "(I)"]
    assert split_year_field("(2019)(I)") == ["(2019)", "(I)"]


def test_classify_token_variants() -> None:
    assert classify_token("(2019)") == YearToken("(2019)")
    assert classify_token("(XLI)") == RomanToken("(XLI)")
    assert classify_token("(XXIV)") == UnknownToken("(XXIV)")
    assert classify_token("(I") == UnknownToken("(I")


def test_tokenize_year_field() -> None:
    assert tokenize_year_field("(2019– ) (III)") == [YearToken("(2019– )"), RomanToken("(III)")]


def test_parse_year_column_keeps_index_and_nullable_dtypes() -> None:
    years = pd.Series(["(2020)", "(2019–2021)", "(I)"], index=[10, 11, 12])
    parsed = parse_year_column(years)

    assert list(parsed.index) == [10, 11, 12]
    assert str(parsed["start_year"].dtype) == "Int64"
    assert parsed.loc[10, "start_year"] == 2020
    assert parsed.loc[11, "end_year"] == 2021
    assert pd.isna(parsed.loc[12, "start_year"])
    assert parsed.loc[12, "roman_suffix"] == "(I)"
    assert pd.isna(parsed.loc[10, "roman_suffix"])
