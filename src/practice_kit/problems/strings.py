"""Text formatting problems."""


def format_string(text: str, to_upper: bool = True) -> str:
    """Return text upper-cased, or lower-cased when to_upper is False."""
    return text.upper() if to_upper else text.lower()
