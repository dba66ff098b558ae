"""Delimited text parsing for account imports.

Input containing any tab character is treated as tab-separated (no quoting).
Everything else is read as comma-separated text with double-quote quoting,
where ``""`` inside a quoted cell stands for a literal quote.
"""

import re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _keep(row: list[str]) -> bool:
    return len(row) > 1 or row[0] != ""


def parse_table(text: str) -> list[list[str]]:
    """Parse raw delimited text into rows of cell strings.

    Args:
        text: Whole file contents

    Returns:
        List of rows; blank lines are dropped
    """
    if "\t" in text:
        return parse_tsv(text)
    return parse_csv(text)


def parse_tsv(text: str) -> list[list[str]]:
    """Split tab-separated text on line breaks and tabs."""
    stripped = text.strip("\r\n")
    if not stripped:
        return []
    rows = [line.split("\t") for line in _LINE_BREAK.split(stripped)]
    return [row for row in rows if _keep(row)]


def parse_csv(text: str) -> list[list[str]]:
    """Parse comma-separated text in a single left-to-right scan.

    An unterminated quoted cell at end of input keeps what was read so far.
    """
    rows: list[list[str]] = []
    row = [""]
    quoted = False
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        following = text[i + 1] if i + 1 < length else ""

        if char == '"':
            if quoted and following == '"':
                row[-1] += '"'
                i += 1
            else:
                quoted = not quoted
        elif char == "," and not quoted:
            row.append("")
        elif char in "\r\n" and not quoted:
            if char == "\r" and following == "\n":
                i += 1
            if _keep(row):
                rows.append(row)
            row = [""]
        else:
            row[-1] += char
        i += 1

    if _keep(row):
        rows.append(row)
    return rows
