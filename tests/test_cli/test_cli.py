"""Tests for the DyeScript CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dyescript import __version__
from dyescript.cli.main import cli


@pytest.fixture()
def source(tmp_path: Path) -> Path:
    path = tmp_path / "theme.dye"
    path.write_text("# main\n@ primary red\n$ .box color &primary\n", encoding="utf-8")
    return path


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "other.dye"
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "check" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_to_stdout(self, source: Path) -> None:
        result = CliRunner().invoke(cli, ["build", str(source)])
        assert result.exit_code == 0
        assert ".box{color:red;}" in result.output

    def test_build_minified_to_file(self, source: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(cli, ["build", str(source), "--minify", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == ".box{color:red}"

    def test_build_reports_statement_errors(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "import colors\n$ .a color red\n")
        result = CliRunner().invoke(cli, ["build", str(path)])
        assert result.exit_code == 0
        assert "import is not supported yet" in result.output
        assert ".a{color:red;}" in result.output

    def test_build_parse_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '@ a "unterminated\n')
        result = CliRunner().invoke(cli, ["build", str(path)])
        assert result.exit_code == 1
        assert "Parse error" in result.output
        assert "line 1, column 5" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["build", str(tmp_path / "nope.dye")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean_file(self, source: Path) -> None:
        result = CliRunner().invoke(cli, ["check", str(source)])
        assert result.exit_code == 0
        assert "OK: theme.dye" in result.output

    def test_errors_fail(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "@ 1bad x\n")
        result = CliRunner().invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert "other.dye: 1 error(s), 0 warning(s)" in result.output

    def test_warnings_pass(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "!version 0.0.1\n")
        result = CliRunner().invoke(cli, ["check", str(path)])
        assert result.exit_code == 0
        assert "other.dye: 0 error(s), 1 warning(s)" in result.output
        assert "ERROR" not in result.output

    def test_strict_flag(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "$ .a color &nope\n")
        assert CliRunner().invoke(cli, ["check", str(path)]).exit_code == 0
        assert CliRunner().invoke(cli, ["check", "--strict", str(path)]).exit_code == 1


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_shows_store(self, source: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(source)])
        assert result.exit_code == 0
        assert "Statements: 3" in result.output
        assert "main  type=implicit" in result.output
        assert "&primary = red" in result.output
        assert ".box  (1 properties)" in result.output

    def test_shows_fonts_and_animations(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "# fade\n!type animation\n$ from opacity 0\n# fonts\n!type font\n$ Inter src a.woff2\n",
        )
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "fade  [from]" in result.output
        assert "Inter  src=a.woff2" in result.output

    def test_empty_store(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "# main\n@ primary red\n")
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "Nothing to render." in result.output
        assert "Selectors:" not in result.output

    def test_shows_raw_type_tag(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "# fx\n!type keyframes\n")
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert "fx  type=keyframes" in result.output
