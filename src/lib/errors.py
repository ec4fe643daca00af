"""
Error types raised while extracting regions

InvalidDirectiveError covers syntax and argument faults of a single
directive, InvalidRegionError covers structural faults (unbalanced scopes,
malformed emit regions). Both carry the resolved source position.
"""

from typing import Optional

from ..models.regions import SourcePosition


class DirectiveSyntaxError(ValueError):
    """Raised by the directive parser; carries no source position."""


class InvalidSourceError(Exception):
    """
    Base class for faults in annotated source text

    Attributes:
        reason: Message without position prefix
        position: Source position of the offending directive, if known
    """

    def __init__(self, reason: str, position: Optional[SourcePosition] = None) -> None:
        self.reason = reason
        self.position = position
        super().__init__(f"{position} {reason}" if position is not None else reason)


class InvalidDirectiveError(InvalidSourceError):
    """Unknown directive name, bad parentheses or bad JSON argument."""


class InvalidRegionError(InvalidSourceError):
    """Unclosed scope or malformed emit region."""
