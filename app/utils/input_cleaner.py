"""Normalization of free-text form input."""


def clean_input(value: str | None) -> str:
    """
    Clean a raw form value before validation and storage.

    Strips surrounding whitespace, converts CRLF and CR line endings to LF
    and drops NUL bytes. ``None`` (field absent) becomes an empty string.

    Args:
        value: Raw submitted value

    Returns:
        Cleaned string
    """
    if value is None:
        return ""

    value = value.replace("\x00", "")
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    return value.strip()
