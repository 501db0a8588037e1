"""Fixed-width column formatting for table rows."""


def get_column_string(text: str, width: int) -> str:
    """Fit text into exactly width characters.

    Shorter text is padded with spaces, longer text is cut to width - 3
    characters followed by "...". Widths below 4 leave room only for dots:

    "testmetest", 6 → "tes...", "testmetest", 2 → ".."
    """
    if len(text) <= width:
        return text.ljust(width)
    if width <= 3:
        return "." * width
    return text[: width - 3] + "..."
