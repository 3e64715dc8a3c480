"""Tests for the college list loader and trend helpers."""

from pathlib import Path

import pandas as pd

from kcet_predictor import utils


def test_load_colleges_cleans_names(college_csv) -> None:
    colleges = utils.load_colleges()

    assert [college.code for college in colleges] == ["E101", "E102"]
    assert colleges[0].name == "Alpha Institute of Technology"
    assert colleges[1].name == "Beta College of Engineering"


def test_load_colleges_caches_frame(college_csv) -> None:
    utils.load_colleges()
    (college_csv / "kcet_colleges.csv").unlink()

    assert len(utils.load_colleges()) == 2


def test_missing_college_list_yields_empty(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("KCET_DATA_DIR", str(tmp_path))

    assert utils.load_colleges() == []
    assert list(utils.load_college_data().columns) == ["code", "name"]


def test_find_college(college_csv) -> None:
    assert utils.find_college(" e102 ").name == "Beta College of Engineering"
    assert utils.find_college("E999") is None


def test_clean_college_names() -> None:
    names = pd.Series(["E: Foo   Bar :", "Baz:", "  Qux  "])

    assert utils.clean_college_names(names).tolist() == ["Foo Bar", "Baz", "Qux"]


def test_trend_frame() -> None:
    df = utils.get_trend_frame()

    assert list(df.columns) == ["checkpoint", "2022", "2023", "2024"]
    assert len(df) == 15
    assert df["2023"].iloc[2] == 1300


def test_trend_figure_has_a_line_per_year() -> None:
    fig = utils.build_trend_figure()

    assert fig is not None
    assert sorted(trace.name for trace in fig.data) == ["2022", "2023", "2024"]


def test_college_list_ships_inside_package(monkeypatch) -> None:
    """Without KCET_DATA_DIR the list is read from the installed package."""
    monkeypatch.delenv("KCET_DATA_DIR", raising=False)
    package_dir = Path(utils.__file__).resolve().parent

    assert Path(utils.get_data_dir()).resolve() == package_dir / "data"
    assert (package_dir / "data" / "kcet_colleges.csv").is_file()

    colleges = utils.load_colleges()
    assert len(colleges) == 12
    assert utils.find_college("E006").name == "B. M. S. College of Engineering Bangalore"


def test_pyproject_declares_college_list_as_package_data() -> None:
    pyproject = (Path(__file__).resolve().parents[1] / "pyproject.toml").read_text()

    assert "[tool.setuptools.package-data]" in pyproject
    assert 'kcet_predictor = ["data/*.csv"]' in pyproject
