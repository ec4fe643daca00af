"""
Directive tokenizer

Locates directive comment lines in source text and turns them into
typed Directive values.

The scan is a single forward pass of a multi-line pattern, so occurrences
come out in source order, one per physical line.

Example:
    >>> matcher = matcher_create("inj")
    >>> [o.body for o in occurrences_find("a\\n  // inj:begin\\n", matcher)]
    ['begin']
"""

import re
from typing import List, Optional

from ..config import appsettings
from ..models.directives import Directive, DirectiveOccurrence
from .errors import DirectiveSyntaxError, InvalidDirectiveError
from .log import LOG
from .parser import directive_parse
from .position import position_fromOffset


def matcher_create(prefix: Optional[str] = None, comment_marker: Optional[str] = None) -> re.Pattern:
    """
    Compile the directive line pattern for a prefix

    Args:
        prefix: Directive prefix (e.g. "inj"), defaults to INCODE_DIRECTIVE_PREFIX
        comment_marker: Line comment marker, defaults to INCODE_COMMENT_MARKER

    Returns:
        Multi-line pattern; group 1 is the comment text, group 2 the body

    Raises:
        ValueError: If prefix or comment marker is empty

    Example:
        >>> matcher_create("gen").match("  // gen:end").group(2)
        'end'
    """
    if prefix == "" or comment_marker == "":
        raise ValueError("Directive prefix and comment marker must not be empty")
    return re.compile(appsettings.pattern_make(prefix, comment_marker), re.MULTILINE)


def occurrences_find(text: str, matcher: re.Pattern) -> List[DirectiveOccurrence]:
    """
    Find all directive lines in text

    Args:
        text: Source text
        matcher: Pattern from matcher_create() or any multi-line pattern
                 with the same two groups

    Returns:
        Occurrences in source order
    """
    occurrences = []
    for match in matcher.finditer(text):
        occurrences.append(DirectiveOccurrence(
            line=match.group(0),
            comment=match.group(1),
            body=match.group(2),
            start=match.start(),
            end=match.end(),
        ))
    return occurrences


def directives_extract(text: str, matcher: re.Pattern) -> List[Directive]:
    """
    Tokenize and parse every directive in text

    Args:
        text: Source text
        matcher: Directive line pattern

    Returns:
        Parsed directives in source order

    Raises:
        InvalidDirectiveError: First directive that fails to parse, with
                               the position of its line
    """
    directives = []
    for occurrence in occurrences_find(text, matcher):
        try:
            directive_type, arg = directive_parse(occurrence.body)
        except DirectiveSyntaxError as e:
            raise InvalidDirectiveError(
                str(e), position_fromOffset(text, occurrence.start)
            ) from e

        directives.append(Directive(
            type=directive_type,
            arg=arg,
            padding=occurrence.padding,
            start=occurrence.start,
            end=occurrence.end,
        ))
        LOG(f"Directive {directive_type.value} at offset {occurrence.start}", level=2)

    return directives
