"""
Offset to line/column conversion for diagnostics
"""

from ..models.regions import SourcePosition


def position_fromOffset(text: str, offset: int) -> SourcePosition:
    """
    Convert a character offset into a 1-based line/column pair

    Args:
        text: Source text
        offset: Offset in range 0..len(text)

    Returns:
        SourcePosition for the offset

    Raises:
        ValueError: If offset points outside of the text

    Example:
        >>> position_fromOffset("ab\\ncd", 4)
        SourcePosition(line=2, col=2)
    """
    if offset < 0 or offset > len(text):
        raise ValueError(
            f"Invalid offset {offset}. Offset is pointing outside of text (length {len(text)})."
        )
    line = text.count("\n", 0, offset) + 1
    col = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return SourcePosition(line=line, col=col)
