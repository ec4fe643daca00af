"""
Region extraction and text injection

Public entry points of incode:

    regions_extract(text, matcher=None, data=None) -> List[InjectableRegion]
    inject(text, render, matcher=None, data=None) -> str

Both run the extraction pipeline:
1. directives_stage: tokenize directive lines and parse them
2. regions_stage: resolve scopes and collect regions

Example:
    >>> source = '// inj:emit("x")\\nold\\n// inj:end\\n'
    >>> inject(source, lambda region: region.args[0])
    '// inj:emit("x")\\nx\\n// inj:end\\n'
"""

import copy
import re
from typing import Any, Callable, List, Mapping, Optional

from ..models.regions import InjectableRegion
from ..models.state import ExtractionState, pipeline
from .log import LOG
from .resolver import ScopeResolver
from .scanner import directives_extract, matcher_create


def directives_stage(inputstate: ExtractionState) -> ExtractionState:
    """
    Tokenize and parse directives.

    Returns:
        ExtractionState with added field:
            - directives: List[Directive] in source order
    """
    state = inputstate.copy()
    state.directives = directives_extract(state.text, state.matcher)
    LOG(f"Found {len(state.directives)} directives", level=2)
    return state


def regions_stage(inputstate: ExtractionState) -> ExtractionState:
    """
    Resolve scopes into regions.

    Returns:
        ExtractionState with added field:
            - regions: List[InjectableRegion] in source order
    """
    state = inputstate.copy()
    state.regions = ScopeResolver(state.text, state.directives, state.data).resolve()
    LOG(f"Extracted {len(state.regions)} regions", level=1)
    return state


def regions_extract(
    text: str,
    matcher: Optional[re.Pattern] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> List[InjectableRegion]:
    """
    Extract injectable regions from annotated text

    Args:
        text: Source text
        matcher: Directive line pattern, defaults to matcher_create()
        data: Initial data of the root scope

    Returns:
        Regions ordered by start offset

    Raises:
        InvalidDirectiveError: Malformed directive
        InvalidRegionError: Structural fault
        TypeError: If data is not a mapping
    """
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise TypeError(f"Initial data should be a mapping, got {type(data).__name__}")

    state = ExtractionState(
        text=text,
        matcher=matcher if matcher is not None else matcher_create(),
        data=copy.deepcopy(dict(data)),
    )
    return pipeline(state, directives_stage, regions_stage).regions


def newline_surround(s: str) -> str:
    """
    Make s start and end with a newline

    Example:
        >>> newline_surround("")
        '\\n'
        >>> newline_surround("a")
        '\\na\\n'
    """
    if not s.endswith("\n"):
        s += "\n"
    if not s.startswith("\n"):
        s = "\n" + s
    return s


def inject(
    text: str,
    render: Callable[[InjectableRegion], str],
    *,
    matcher: Optional[re.Pattern] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Replace every region's content with render(region)

    Directive lines are preserved; only the text between an emit line and
    its end line is replaced.

    Args:
        text: Source text
        render: Callback producing the new content of a region
        matcher: Directive line pattern, defaults to matcher_create()
        data: Initial data of the root scope

    Returns:
        Text with regions replaced
    """
    chunks = []
    cursor = 0
    for region in regions_extract(text, matcher, data):
        chunks.append(text[cursor:region.start])
        chunks.append(newline_surround(render(region)))
        cursor = region.end
    chunks.append(text[cursor:])
    return "".join(chunks)
