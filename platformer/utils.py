"""Small text helpers used by the scene and asset loaders."""

from __future__ import annotations


def split(line: str, delimiter: str = "\t") -> list[str]:
    """Split ``line`` on ``delimiter``, keeping empty fields.

    After each match the scan resumes one character past the start of the
    match, so a multi-character delimiter leaves its tail on the next token.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    tokens: list[str] = []
    last = 0
    while (found := line.find(delimiter, last)) != -1:
        tokens.append(line[last:found])
        last = found + 1
    tokens.append(line[last:])
    return tokens