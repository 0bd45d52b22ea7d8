import pytest

from webpages import errors
from webpages.page_cli import main

@pytest.fixture
def page_dir(tmp_path, monkeypatch):
    (tmp_path / "page.md").write_text("Some *text*\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path

def test_help_exits_zero_without_building(page_dir, capsys) -> None:
    assert main(["-h", "page.md"]) == 0
    out = capsys.readouterr().out
    assert "usage: webpage" in out
    assert "-c <abs path to html root>" in out
    assert not (page_dir / "page.html").exists()

def test_builds_page_in_cwd(page_dir) -> None:
    assert main(["-f", "f", "page.md"]) == 0
    html = (page_dir / "page.html").read_text(encoding="utf-8")
    assert html == "<html>\n<head>\n</head>\n<body>\n<p>Some <em>text</em></p>\n</body>\n</html>\n"

def test_nav_and_css_options(page_dir) -> None:
    (page_dir / "look.css").write_text("", encoding="utf-8")
    assert main(["-v", "-c", str(page_dir), "-n", "<nav/>", "page.md"]) == 0
    html = (page_dir / "page.html").read_text(encoding="utf-8")
    assert 'href="./look.css"' in html
    assert "<nav/>-->\n</body>" in html

@pytest.mark.parametrize(
    "argv, code",
    [
        ([], errors.EXIT_NO_MARKDOWN),
        (["-v"], errors.EXIT_NO_MARKDOWN),
        (["page.md", "-f"], errors.EXIT_MISSING_VALUE),
        (["-x", "page.md"], errors.EXIT_UNKNOWN_OPTION),
        (["page.md", "extra.md"], errors.EXIT_UNKNOWN_OPTION),
        (["-c", "relative/root", "page.md"], errors.EXIT_ABS_PATH_REQUIRED),
        (["-f", "nothex", "page.md"], errors.EXIT_BAD_FLAGS),
    ],
)
def test_usage_errors(page_dir, argv, code) -> None:
    assert main(argv) == code
    assert not (page_dir / "page.html").exists()

def test_no_stylesheet_exit_code(page_dir) -> None:
    assert main(["-c", str(page_dir), "page.md"]) == errors.EXIT_NO_CSS_FILE

def test_outside_root_exit_code(page_dir, tmp_path_factory) -> None:
    elsewhere = tmp_path_factory.mktemp("html_root")
    assert main(["-c", str(elsewhere), "page.md"]) == errors.EXIT_INVOKED_OUTSIDE_HTML_ROOT

def test_help_wins_over_unknown_option(page_dir, capsys) -> None:
    assert main(["-h", "-x"]) == 0
    assert "usage: webpage" in capsys.readouterr().out
    assert not (page_dir / "page.html").exists()
