"""
Scope resolver

Walks the directive stream, tracking nested begin/end scopes and the data
each scope accumulates, and produces the injectable regions.

Scope rules:
- The document root is an implicit scope holding the initial data
- begin opens a child scope that starts from the parent's current data
- assign/merge replace the current scope's data with an updated copy;
  the parent scope never observes the change
- emit must be followed directly by end; the text between them is a region
- end at the root stops the walk; remaining directives are not examined

Data values are never mutated in place, so a child scope can start from the
parent's dict object and replace it on its first update.

Example:
    // inj:assign({"schema": "User"})
    // inj:begin
    // inj:merge({"opts": {"strict": true}})
    // inj:emit("pck")
    ...replaced...
    // inj:end
    // inj:end

    produces one region with args ["pck"] and
    data {"schema": "User", "opts": {"strict": true}}
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..models.directives import Directive, DirectiveType
from ..models.regions import InjectableRegion
from .errors import InvalidRegionError
from .log import LOG
from .position import position_fromOffset


def data_assign(data: Mapping[str, Any], arg: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Shallow overlay: top-level keys of arg replace those of data

    Example:
        >>> data_assign({"a": {"x": 1}, "b": 2}, {"a": {"y": 2}})
        {'a': {'y': 2}, 'b': 2}
    """
    return {**data, **copy.deepcopy(dict(arg))}


def data_merge(data: Mapping[str, Any], arg: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep merge: nested objects combine key-wise at every depth, arrays and
    scalars from arg replace the existing value

    Example:
        >>> data_merge({"a": {"x": 1}, "l": [1, 2]}, {"a": {"y": 2}, "l": [3]})
        {'a': {'x': 1, 'y': 2}, 'l': [3]}
    """
    result = dict(data)
    for key, value in arg.items():
        current = result.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            result[key] = data_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


@dataclass
class Scope:
    """
    One open scope on the resolver stack

    Attributes:
        data: Data visible in this scope
        opener: The begin directive that opened it (None for the root)
    """
    data: Dict[str, Any]
    opener: Optional[Directive] = None


class ScopeResolver:
    """
    Resolver for a parsed directive stream

    Handles:
    - Nested begin/end scopes with copy-on-write data
    - Shallow (assign) and deep (merge) data updates
    - Emit regions closed by a single end directive
    - Error reporting with source positions
    """

    def __init__(self, text: str, directives: List[Directive], data: Mapping[str, Any]):
        """
        Initialize resolver

        Args:
            text: Source text the directives were extracted from (for positions)
            directives: Parsed directives in source order
            data: Initial data of the root scope

        Attributes:
            regions: Accumulated regions, in source order
        """
        self.text = text
        self.directives = directives
        self.data = dict(data)
        self.regions: List[InjectableRegion] = []

    def resolve(self) -> List[InjectableRegion]:
        """
        Walk all directives and collect regions

        Returns:
            Regions ordered by start offset

        Raises:
            InvalidRegionError: Unclosed begin or malformed emit region
        """
        scopes: List[Scope] = [Scope(data=self.data)]
        index = 0

        while index < len(self.directives):
            directive = self.directives[index]
            index += 1
            scope = scopes[-1]

            if directive.type is DirectiveType.BEGIN:
                scopes.append(Scope(data=scope.data, opener=directive))
                LOG(f"Scope opened, depth {len(scopes) - 1}", level=2)

            elif directive.type is DirectiveType.END:
                if len(scopes) == 1:
                    LOG(f"End at document root (offset {directive.start}), stopping", level=2)
                    return self.regions
                scopes.pop()
                LOG(f"Scope closed, depth {len(scopes) - 1}", level=2)

            elif directive.type is DirectiveType.ASSIGN:
                scope.data = data_assign(scope.data, directive.arg)
                LOG(f"assign -> {scope.data}", level=3)

            elif directive.type is DirectiveType.MERGE:
                scope.data = data_merge(scope.data, directive.arg)
                LOG(f"merge -> {scope.data}", level=3)

            elif directive.type is DirectiveType.EMIT:
                index = self.emit_enter(index, directive, scope.data)

        if len(scopes) > 1:
            opener = scopes[-1].opener
            raise InvalidRegionError(
                "All scopes should end with End directive.",
                position_fromOffset(self.text, opener.start),
            )

        return self.regions

    def emit_enter(self, index: int, emit: Directive, data: Dict[str, Any]) -> int:
        """
        Consume the end directive closing an emit region

        Args:
            index: Index of the directive following the emit
            emit: The emit directive
            data: Scope data at the emit directive

        Returns:
            Index past the closing end directive

        Raises:
            InvalidRegionError: If another directive comes first, or the
                                directives run out
        """
        if index >= len(self.directives):
            raise InvalidRegionError(
                "Emit region should end with End directive.",
                position_fromOffset(self.text, emit.start),
            )

        directive = self.directives[index]
        if directive.type is not DirectiveType.END:
            raise InvalidRegionError(
                "Emit region should not contain any directives.",
                position_fromOffset(self.text, directive.start),
            )

        self.regions.append(InjectableRegion(
            args=copy.deepcopy(emit.arg),
            data=copy.deepcopy(data),
            padding=emit.padding,
            start=emit.end,
            end=directive.start,
        ))
        LOG(f"Region {emit.arg} at {emit.end}..{directive.start}", level=2)
        return index + 1
