from pathlib import Path
from typing import Callable

import pytest

SAMPLE_PROJECT = (
    "# przykładowy opis projektu\n"
    "project\n"
    "\tname: demo\n"
    "\tlanguage: python\n"
    "\n"
    "environment\n"
    "\t@file\n"
    "\t\tsrc/main.py\n"
    "\t\tmissing.txt\n"
    "\t@git\n"
    "\t\thttps://example.com/repo.git\n"
    "structure\n"
    "\tsrc\n"
    "\t\tmain.py\n"
)


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """Zapisuje plik opisu projektu w tmp_path i zwraca jego ścieżkę."""

    def _write(text: str, name: str = "proj.lp") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_project(tmp_path: Path, write_project: Callable[..., Path]) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hello')\n", encoding="utf-8")
    return write_project(SAMPLE_PROJECT, "proj.lp")
