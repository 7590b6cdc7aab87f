from pathlib import Path
from typing import Callable

import pytest

from data_model.loader import ProjectFileError, load_document
from data_model.project_file import Document
from prompt_builder import (
    CONTENT_HEADING,
    NOT_FOUND_MARKER,
    REFERENCES_HEADING,
    PromptAssembler,
    PromptTemplates,
    build_prompt,
)


@pytest.fixture
def templates() -> PromptTemplates:
    return PromptTemplates(preamble="PREAMBLE\n", footer="FOOTER\n")


def _content_block(text: str) -> str:
    start = text.index(CONTENT_HEADING) + len(CONTENT_HEADING) + len("\n\n```\n")
    end = text.index("```\n", start)
    return text[start:end]


class TestAssemble:
    def test_layout_without_references(self, templates: PromptTemplates) -> None:
        doc = Document.from_text("project\n\tname: x\n", "p.lp")

        result = PromptAssembler(templates).assemble(doc)

        assert result.text == (
            "PREAMBLE\n\n"
            f"{CONTENT_HEADING}\n\n```\nproject\n\tname: x\n```\n\n"
            "FOOTER\n"
        )
        assert REFERENCES_HEADING not in result.text
        assert result.references == []

    def test_other_markers_produce_no_references(self, templates: PromptTemplates) -> None:
        doc = Document.from_text("environment\n\t@git\n\t\trepo.git\n", "p.lp")

        result = PromptAssembler(templates).assemble(doc)

        assert REFERENCES_HEADING not in result.text

    def test_content_is_passed_through_verbatim(self, templates: PromptTemplates) -> None:
        text = "# c\nproject\n    spaced: yes\n\t@file\n\t\tx.txt\n\n- stray\nbogus\n"
        doc = Document.from_text(text, "p.lp")

        result = PromptAssembler(templates).assemble(doc)

        assert _content_block(result.text) == text

    def test_found_and_missing_in_listed_order(
        self, tmp_path: Path, templates: PromptTemplates
    ) -> None:
        (tmp_path / "a.txt").write_text("AAA\n", encoding="utf-8")
        doc = Document.from_text(
            "environment\n\t@file\n\t\tmissing.txt\n\t\ta.txt\n", tmp_path / "proj.lp"
        )

        result = PromptAssembler(templates).assemble(doc)
        text = result.text

        refs_part = text[text.index(REFERENCES_HEADING):]
        assert refs_part.count(NOT_FOUND_MARKER) == 1
        assert refs_part.count("AAA\n") == 1
        assert refs_part.index(str(tmp_path / "missing.txt")) < refs_part.index(
            str(tmp_path / "a.txt") + "\n"
        )
        assert [r.requested for r in result.missing] == ["missing.txt"]
        assert text.endswith("FOOTER\n")

    def test_nul_in_path_becomes_not_found_block(
        self, tmp_path: Path, templates: PromptTemplates
    ) -> None:
        doc = Document.from_text("environment\n\t@file\n\t\ta\x00b.txt\n", tmp_path / "p.lp")

        result = PromptAssembler(templates).assemble(doc)

        assert result.text.count(NOT_FOUND_MARKER) == 1
        assert len(result.missing) == 1

    def test_references_section_sits_between_content_and_footer(
        self, tmp_path: Path, templates: PromptTemplates
    ) -> None:
        doc = Document.from_text("environment\n\t@file\n\t\tgone.txt\n", tmp_path / "p.lp")

        text = PromptAssembler(templates).assemble(doc).text

        assert text.index(CONTENT_HEADING) < text.index(REFERENCES_HEADING) < text.index("FOOTER")


class TestBuildPrompt:
    def test_default_templates_are_used(self, sample_project: Path) -> None:
        text = build_prompt(sample_project)
        defaults = PromptTemplates.load()

        assert text.startswith(defaults.preamble.rstrip("\n"))
        assert text.endswith(defaults.footer.rstrip("\n") + "\n")
        assert "print('hello')" in text
        assert text.count(NOT_FOUND_MARKER) == 1

    def test_build_is_idempotent(self, sample_project: Path) -> None:
        assert build_prompt(sample_project) == build_prompt(sample_project)

    def test_missing_input_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectFileError):
            build_prompt(tmp_path / "brak.lp")

    def test_verbatim_matches_file(self, sample_project: Path) -> None:
        text = build_prompt(sample_project)

        assert _content_block(text) == sample_project.read_text(encoding="utf-8")


class TestTemplates:
    def test_load_custom_directory(self, tmp_path: Path) -> None:
        (tmp_path / "preamble.md").write_text("P", encoding="utf-8")
        (tmp_path / "footer.md").write_text("F", encoding="utf-8")

        t = PromptTemplates.load(tmp_path)

        assert (t.preamble, t.footer) == ("P", "F")

    def test_missing_template_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Brak pliku szablonu"):
            PromptTemplates.load(tmp_path)


class TestLoadDocument:
    def test_missing_final_newline(self, write_project: Callable[..., Path]) -> None:
        path = write_project("project\n\tname: x")

        doc = load_document(path)

        assert [line.text for line in doc.lines] == ["project", "\tname: x"]
        assert doc.base_dir == path.parent

    def test_invalid_utf8_is_fatal(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.lp"
        path.write_bytes(b"project\n\xff\xfe\n")

        with pytest.raises(ProjectFileError, match="UTF-8"):
            load_document(path)
