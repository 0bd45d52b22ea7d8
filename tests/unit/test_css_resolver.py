import pytest

from webpages.core.css import find_stylesheet
from webpages.errors import NoStylesheetError, OutsideRootError

def test_stylesheet_in_start_dir(tmp_path, monkeypatch) -> None:
    (tmp_path / "site.css").write_text("body {}", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert find_stylesheet(tmp_path) == "./site.css"

def test_ascends_one_level_per_parent(tmp_path, monkeypatch) -> None:
    (tmp_path / "site.css").write_text("body {}", encoding="utf-8")
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)
    monkeypatch.chdir(deep)

    found = find_stylesheet(tmp_path)

    assert found == "./../../site.css"
    assert found.count("../") == 2
    assert (deep / found).resolve() == (tmp_path / "site.css").resolve()

def test_nearest_stylesheet_wins(tmp_path, monkeypatch) -> None:
    (tmp_path / "site.css").write_text("", encoding="utf-8")
    section = tmp_path / "section"
    (section / "page").mkdir(parents=True)
    (section / "section.css").write_text("", encoding="utf-8")
    monkeypatch.chdir(section / "page")
    assert find_stylesheet(tmp_path) == "./../section.css"

def test_css_anywhere_in_name_matches(tmp_path, monkeypatch) -> None:
    (tmp_path / "theme.css.orig").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert find_stylesheet(tmp_path) == "./theme.css.orig"

def test_not_found_stops_at_boundary(tmp_path, monkeypatch) -> None:
    # a stylesheet above the boundary must never be reached
    (tmp_path / "outer.css").write_text("", encoding="utf-8")
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    monkeypatch.chdir(root / "sub")
    with pytest.raises(NoStylesheetError):
        find_stylesheet(root)

def test_boundary_trailing_slash(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(NoStylesheetError):
        find_stylesheet(str(tmp_path) + "/")

def test_outside_boundary_is_reported(tmp_path, monkeypatch) -> None:
    boundary = tmp_path / "html"
    boundary.mkdir()
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)
    with pytest.raises(OutsideRootError):
        find_stylesheet(boundary)

def test_start_dir_without_trailing_slash(tmp_path, monkeypatch) -> None:
    (tmp_path / "site.css").write_text("", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)
    assert find_stylesheet(tmp_path, start_dir="sub") == "sub/../site.css"
