"""Character-count word wrapping for translated text."""

from __future__ import annotations

from typing import List

from .errors import InvalidConfigurationError


def wrap_line_wordwise(line: str, max_len: int = 60) -> List[str]:
    """Greedily wrap ``line`` into lines of at most ``max_len`` characters.

    Words longer than ``max_len`` are broken into ``max_len - 1`` character
    chunks followed by a hyphen; the last piece keeps accumulating normally.
    """
    if max_len < 2:
        raise InvalidConfigurationError(f"max_len must be at least 2, got {max_len}")

    out: List[str] = []
    current = ""
    for word in line.split():
        while len(word) > max_len:
            if current:
                out.append(current)
                current = ""
            out.append(word[: max_len - 1] + "-")
            word = word[max_len - 1 :]

        if not current:
            current = word
        elif len(current) + 1 + len(word) <= max_len:
            current += " " + word
        else:
            out.append(current)
            current = word

    if current:
        out.append(current)
    return out


def wrap_text(text: str, max_len: int = 60) -> List[str]:
    """Wrap each newline-separated paragraph of ``text`` in turn."""
    lines: List[str] = []
    for paragraph in text.split("\n"):
        lines.extend(wrap_line_wordwise(paragraph, max_len))
    return lines


def normalize_line_text(line: str) -> str:
    return line.strip().replace("…", ".")


__all__ = ["wrap_line_wordwise", "wrap_text", "normalize_line_text"]
