"""
prompt_builder — budowanie dokumentu promptu z pliku opisu projektu.

Publiczne API:
  build_prompt(path, templates)            -> str
  PromptAssembler(templates).assemble(doc) -> AssembledPrompt
  ReferenceResolver(base_dir).resolve(p)   -> ResolvedReference
  format_reference(ref)                    -> str
  PromptTemplates.load(directory)          -> PromptTemplates
"""

from .assembler import (
    CONTENT_HEADING,
    REFERENCES_HEADING,
    AssembledPrompt,
    PromptAssembler,
    build_prompt,
)
from .resolver import NOT_FOUND_MARKER, ReferenceResolver, code_fence, format_reference
from .templates import DEFAULT_TEMPLATES_DIR, PromptTemplates

__all__ = [
    "CONTENT_HEADING",
    "REFERENCES_HEADING",
    "AssembledPrompt",
    "PromptAssembler",
    "build_prompt",
    "NOT_FOUND_MARKER",
    "ReferenceResolver",
    "code_fence",
    "format_reference",
    "DEFAULT_TEMPLATES_DIR",
    "PromptTemplates",
]
