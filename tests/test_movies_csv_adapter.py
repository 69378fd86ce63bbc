from pathlib import Path

import pandas as pd
import pytest

from movie_pipeline.adapters.base_adapter import MissingColumnsError
from movie_pipeline.adapters.movies_csv_adapter import RAW_FIELDS, MoviesCsvAdapter

KAGGLE_HEADER = "MOVIES,YEAR,GENRE,RATING,ONE-LINE,STARS,VOTES,RunTime,Gross\n"


def _write(tmp_path: Path, body: str, header: str = KAGGLE_HEADER) -> Path:
    path = tmp_path / "movies.csv"
    path.write_text(header + body, encoding="utf-8")
    return path


def test_extract_and_transform_renames_and_assigns_ids(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'Blood Red Sky,(2021),"\nAction, Horror            ",6.1,"\nA woman...",'
        '"\n    Director:\nPeter Thorwarth",21062,121,\n'
        'The Walking Dead,(2010–2022),"\nDrama",8.2,"\nSheriff...",Stars,"885,805",44,$75.47M\n',
    )
    adapter = MoviesCsvAdapter({"file_path": path})

    df = adapter.transform(adapter.extract())

    assert list(df.columns) == ["id"] + RAW_FIELDS
    assert list(df["id"]) == [1, 2]
    assert df.loc[0, "title"] == "Blood Red Sky"
    assert df.loc[1, "votes"] == "885,805"
    # leere Zellen bleiben Rohtext
    assert df.loc[0, "gross"] == ""


def test_custom_column_mapping(tmp_path: Path) -> None:
    header = "name,yr,genre,rating,description,stars,votes,runtime,gross\n"
    path = _write(tmp_path, "Foo,(2020),g,5.0,d,s,1,90,\n", header=header)
    adapter = MoviesCsvAdapter({
        "file_path": path,
        "column_mapping": {"name": "title", "yr": "year"},
    })

    df = adapter.transform(adapter.extract())

    assert df.loc[0, "title"] == "Foo"
    assert df.loc[0, "year"] == "(2020)"


def test_missing_columns_raise(tmp_path: Path) -> None:
    path = _write(tmp_path, "Foo,(2020)\n", header="MOVIES,YEAR\n")
    adapter = MoviesCsvAdapter({"file_path": path})

    with pytest.raises(MissingColumnsError, match="genre"):
        adapter.transform(adapter.extract())


def test_unreadable_source_raises(tmp_path: Path) -> None:
    adapter = MoviesCsvAdapter({"file_path": tmp_path / "missing.csv"})

    with pytest.raises(FileNotFoundError):
        adapter.extract()


def test_transform_accepts_in_memory_frame() -> None:
    raw = pd.DataFrame([{field: "" for field in RAW_FIELDS}])

    df = MoviesCsvAdapter({}).transform(raw)

    assert df.loc[0, "id"] == 1
