import json
from pathlib import Path
from typing import Callable

import pytest

from lp.cli import build_parser, main
from prompt_builder import NOT_FOUND_MARKER, REFERENCES_HEADING


def _run(argv: list[str]) -> int:
    try:
        main(argv)
    except SystemExit as e:
        return int(e.code or 0)
    return 0


class TestParser:
    def test_subcommands_registered(self) -> None:
        parser = build_parser()

        args = parser.parse_args(["build", "p.lp", "--out", "x.md"])

        assert args.command == "build"
        assert args.out == "x.md"
        assert args.templates is None

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestValidate:
    def test_valid_file(self, sample_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run(["validate", str(sample_project)])

        out = capsys.readouterr().out
        assert code == 0
        assert "Validation passed" in out

    def test_prints_each_diagnostic(
        self, write_project: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_project("bogus\n  a\nproject\n    b\n")

        code = _run(["validate", str(path)])

        out = capsys.readouterr().out
        assert code == 1
        assert "Line 1: Unknown section 'bogus'" in out
        assert "Line 2: Should use tabs for indentation, not spaces" in out
        assert "Line 4: Should use tabs for indentation, not spaces" in out
        assert out.count("Line ") == 3
        assert "Validation failed: 3 error(s)" in out

    def test_json_output(
        self, write_project: Callable[..., Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_project("settings\n")

        code = _run(["validate", str(path), "--json-output"])

        data = json.loads(capsys.readouterr().out)
        assert code == 1
        assert data["is_valid"] is False
        assert data["count"] == 1
        assert data["diagnostics"][0]["line"] == 1
        assert data["diagnostics"][0]["code"] == "W_UNKNOWN_SECTION"

    def test_missing_file_exit_code(self, tmp_path: Path) -> None:
        assert _run(["validate", str(tmp_path / "brak.lp")]) == 2


class TestBuild:
    def test_prompt_on_stdout_and_warning_on_stderr(
        self, sample_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = _run(["build", str(sample_project)])

        captured = capsys.readouterr()
        assert code == 0
        assert REFERENCES_HEADING in captured.out
        assert captured.out.count(NOT_FOUND_MARKER) == 1
        assert "missing.txt" in captured.err

    def test_out_file(self, sample_project: Path, tmp_path: Path) -> None:
        out_path = tmp_path / "prompt.md"

        code = _run(["build", str(sample_project), "--out", str(out_path)])

        assert code == 0
        assert "print('hello')" in out_path.read_text(encoding="utf-8")

    def test_templates_from_environment(
        self,
        sample_project: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        tpl = tmp_path / "tpl"
        tpl.mkdir()
        (tpl / "preamble.md").write_text("MY PREAMBLE", encoding="utf-8")
        (tpl / "footer.md").write_text("MY FOOTER", encoding="utf-8")
        monkeypatch.setenv("LP_TEMPLATES_DIR", str(tpl))

        _run(["build", str(sample_project)])

        out = capsys.readouterr().out
        assert out.startswith("MY PREAMBLE\n\n")
        assert out.endswith("MY FOOTER\n")

    def test_missing_templates_exit_code(self, sample_project: Path, tmp_path: Path) -> None:
        assert _run(["build", str(sample_project), "--templates", str(tmp_path / "x")]) == 2

    def test_missing_input_exit_code(self, tmp_path: Path) -> None:
        assert _run(["build", str(tmp_path / "brak.lp")]) == 2


class TestOutline:
    def test_lists_sections_and_paths(
        self, sample_project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = _run(["outline", str(sample_project)])

        out = capsys.readouterr().out
        assert code == 0
        assert "environment" in out
        assert "src/main.py" in out
        assert "NOT FOUND" in out
