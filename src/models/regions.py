"""
Region and position models

Output values of the extraction pipeline.
"""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class SourcePosition:
    """1-based line/column pair used in diagnostics"""
    line: int
    col: int

    def __str__(self) -> str:
        return f"[{self.line}:{self.col}]"


@dataclass(frozen=True)
class InjectableRegion:
    """
    Span of source text bounded by an emit directive and its matching end

    Attributes:
        args: Emission arguments copied from the emit directive
        data: Scope data at the moment the emit directive was reached
        padding: Leading whitespace of the emit directive line
        start: Offset immediately after the emit directive line
        end: Offset of the start of the closing end directive line

    Example:
        For source:
            // inj:assign({"schema": "User"})
            // inj:emit("pck")
            generated
            // inj:end

        InjectableRegion(args=["pck"], data={"schema": "User"}, padding="",
                         start=<after emit line>, end=<start of end line>)
    """
    args: List[Any]
    data: Dict[str, Any]
    padding: str
    start: int
    end: int
