"""Shader source preprocessing with ``#include`` support."""

from __future__ import annotations

from dataclasses import dataclass, field

_DIRECTIVE = "#include"


@dataclass
class PreprocessorConfig:
    """Named include files available to ``#include`` directives."""

    includes: list[tuple[str, str]] = field(default_factory=list)

    def lookup(self, filename: str) -> str:
        """Return the content of the first include named ``filename``."""
        for name, content in self.includes:
            if name == filename:
                return content
        raise KeyError(f'Include file {filename} in not on "includes" list')


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every ``#include "name"`` directive with the named content.

    Included text is scanned again, so includes may themselves include.
    """
    result = source
    position = result.find(_DIRECTIVE)
    while position != -1:
        cursor = position + len(_DIRECTIVE)
        while cursor < len(result) and result[cursor] == " ":
            cursor += 1
        if cursor >= len(result) or result[cursor] != '"':
            raise ValueError(f"expected '\"' after {_DIRECTIVE} at offset {position}")
        name_start = cursor + 1
        name_end = result.find('"', name_start)
        if name_end == -1:
            raise ValueError(f"unterminated include file name at offset {name_start}")
        content = config.lookup(result[name_start:name_end])
        result = result[:position] + content + result[name_end + 1:]
        position = result.find(_DIRECTIVE, position)
    return result