"""
Parser for directive bodies

Converts the text following the directive prefix into a typed directive
payload.

Grammar:
    name                 begin, end
    name(<json-args>)    assign({...}), merge({...}), emit(value, ...)

Key features:
- Parenthesis matching with string-literal tracking, so ")" inside a JSON
  string never closes the argument list
- Text after the closing parenthesis is ignored
- assign/merge arguments must decode to a JSON object
- emit arguments are any number of comma separated JSON values

Example:
    >>> directive_parse('assign({"schema": "User"})')
    (<DirectiveType.ASSIGN: 'assign'>, {'schema': 'User'})
    >>> directive_parse('emit("pck", 1)')
    (<DirectiveType.EMIT: 'emit'>, ['pck', 1])
"""

import json
from typing import Any, Tuple

from ..models.directives import DirectiveArgument, DirectiveType
from .errors import DirectiveSyntaxError


def directiveType_fromString(name: str) -> DirectiveType:
    """
    Look up a directive kind by name

    Raises:
        DirectiveSyntaxError: If name is not a known directive
    """
    try:
        return DirectiveType(name)
    except ValueError:
        raise DirectiveSyntaxError(f"Invalid directive type: {name}.") from None


def parenthesis_findMatching(body: str, start_pos: int) -> int:
    """
    Find the closing parenthesis matching the one at start_pos

    Tracks parenthesis depth outside of JSON string literals. Characters
    inside "..." (including escaped quotes) are ignored.

    Args:
        body: Directive body
        start_pos: Position of the opening '('

    Returns:
        Position of the matching ')'

    Raises:
        DirectiveSyntaxError: If the end of body is reached first

    Example:
        For body 'emit(")", 1)' and start_pos 4:
        Returns 11
    """
    depth = 0
    in_string = False
    escaped = False

    for pos in range(start_pos, len(body)):
        c = body[pos]
        if in_string:
            if escaped:
                escaped = False
            elif c == '\\':
                escaped = True
            elif c == '"':
                in_string = False
        elif c == '"':
            in_string = True
        elif c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth == 0:
                return pos

    raise DirectiveSyntaxError(
        f'Invalid directive. Unable to find closing parenthesis in a directive "{body}".'
    )


def _constant_reject(name: str) -> Any:
    # json accepts NaN/Infinity by default; they are not JSON literals
    raise ValueError(f"{name} is not a valid JSON value")


def json_parse(text: str, source: str) -> Any:
    """
    Decode strict JSON

    Args:
        text: JSON text to decode
        source: Argument text quoted in the error message

    Raises:
        DirectiveSyntaxError: If text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_constant_reject)
    except ValueError as e:
        raise DirectiveSyntaxError(
            f'Invalid directive. Unable to parse directive argument "{source}": {e}.'
        ) from e


def arguments_parse(directive_type: DirectiveType, text: str) -> DirectiveArgument:
    """
    Decode the argument text of a directive

    Args:
        directive_type: ASSIGN, MERGE or EMIT
        text: Text between the parentheses

    Returns:
        dict for ASSIGN/MERGE, list for EMIT

    Raises:
        DirectiveSyntaxError: Malformed JSON or wrong argument shape
    """
    if directive_type is DirectiveType.EMIT:
        wrapped = f"[{text}]"
        return json_parse(wrapped, wrapped)

    arg = json_parse(text, text)
    if not isinstance(arg, dict):
        raise DirectiveSyntaxError(
            f"Invalid {directive_type.label} directive. Argument should have an object type."
        )
    return arg


def directive_parse(body: str) -> Tuple[DirectiveType, DirectiveArgument]:
    """
    Parse a directive body into its kind and argument

    Args:
        body: Text following "<prefix>:" on the directive line

    Returns:
        (DirectiveType, argument) where argument is None for begin/end

    Raises:
        DirectiveSyntaxError: Unknown name, missing or forbidden arguments,
                              unbalanced parentheses, malformed JSON

    Example:
        >>> directive_parse("begin")
        (<DirectiveType.BEGIN: 'begin'>, None)
    """
    body = body.rstrip()
    p_start = body.find('(')

    if p_start == -1:
        directive_type = directiveType_fromString(body)
        if directive_type.arguments_required:
            raise DirectiveSyntaxError(
                f"Invalid directive. {directive_type.label} directive should have arguments."
            )
        return directive_type, None

    directive_type = directiveType_fromString(body[:p_start])
    if not directive_type.arguments_required:
        raise DirectiveSyntaxError(
            f"Invalid directive. {directive_type.label} directive should not have arguments."
        )

    # text after the matching ")" (e.g. a trailing comment) is not part of the directive
    p_end = parenthesis_findMatching(body, p_start)

    return directive_type, arguments_parse(directive_type, body[p_start + 1:p_end])
