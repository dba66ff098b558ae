"""Import file reading utilities."""

from pathlib import Path

from salesmaster.domain.errors import ValidationError

ACCEPTED_SUFFIXES = {".csv", ".txt"}


def read_import_file(file_path: str) -> str:
    """Read a whole import file into memory as text.

    Args:
        file_path: Path to a .csv or .txt file

    Returns:
        File contents, with any UTF-8 byte order mark removed

    Raises:
        ValidationError: If the file type is not accepted
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(file_path)
    if path.suffix.lower() not in ACCEPTED_SUFFIXES:
        raise ValidationError(
            f"Unsupported file type '{path.suffix or path.name}'. Use a .csv or .txt file"
        )
    if not path.exists():
        raise FileNotFoundError(f"Import file not found: {file_path}")
    # newline="" keeps \r\n so the tokenizer sees the original line breaks
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return f.read()
