from pathlib import Path

import pandas as pd
import yaml

from movie_pipeline.utils.data_profile import log_profile, profile_movies, save_profile


def _raw() -> pd.DataFrame:
    return pd.DataFrame({
        "id": [1, 2, 3, 4],
        "title": ["Foo", "Foo", "Foo", " Bar"],
        "year": ["(2020)", "(2020)", "(2021)", "(2019) (II)"],
        "genre": ["g", "g ", "g", "g"],
        "description": ["d", "d", "d", "e"],
        "stars": ["s", "s", "s", "s"],
        "runtime": ["90", "90", "90", "100"],
        "gross": ["$1.00M", "", "  ", "$2.50M"],
    })


def test_profile_counts() -> None:
    profile = profile_movies(_raw())

    assert profile["rows"] == 4
    assert profile["distinct_titles"] == 2
    assert profile["distinct_title_year"] == 3
    assert profile["distinct_year_values"] == 3
    assert profile["duplicate_rows"] == 1
    assert profile["untrimmed"] == {"title": 1, "genre": 1, "description": 0, "stars": 0}
    assert profile["gross_present"] == 2
    assert profile["gross_missing"] == 2


def test_profile_of_partial_frame() -> None:
    profile = profile_movies(pd.DataFrame({"title": ["a"]}))

    assert profile == {"rows": 1, "distinct_titles": 1, "untrimmed": {"title": 0}}


def test_save_profile_writes_yaml(tmp_path: Path) -> None:
    path = save_profile({"rows": 2, "untrimmed": {"title": 0}}, tmp_path / "p" / "profile.yaml")

    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {"rows": 2, "untrimmed": {"title": 0}}


def test_log_profile_uses_module_logger(caplog) -> None:
    caplog.set_level("INFO", logger="movie_pipeline.utils.data_profile")

    log_profile({"rows": 3})

    assert [r.name for r in caplog.records] == ["movie_pipeline.utils.data_profile"]
    assert "Rohdaten – rows: 3" in caplog.text
