"""
Directive models

Defines the five directive kinds understood by incode, the raw occurrence
produced by the tokenizer and the typed directive produced by the parser.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, List, Union


class DirectiveType(Enum):
    """
    Kinds of incode directives

    Begin/End delimit a scope, Assign/Merge update the scope data and
    Emit opens an injectable region.
    """
    BEGIN = "begin"      # // inj:begin
    END = "end"          # // inj:end
    ASSIGN = "assign"    # // inj:assign({"key": "value"})
    MERGE = "merge"      # // inj:merge({"key": {"nested": 1}})
    EMIT = "emit"        # // inj:emit("name", 1, true)

    @property
    def label(self) -> str:
        """Capitalized name used in diagnostics (e.g. 'Assign')"""
        return self.value.capitalize()

    @property
    def arguments_required(self) -> bool:
        """Whether the directive must be written as name(...)"""
        return self not in (DirectiveType.BEGIN, DirectiveType.END)


DirectiveArgument = Union[None, Dict[str, Any], List[Any]]


@dataclass(frozen=True)
class DirectiveOccurrence:
    """
    Raw directive line located by the tokenizer

    Attributes:
        line: Full matched line, including leading horizontal whitespace
        comment: Substring of the line from the comment marker onward
        body: Text following the "<prefix>:" delimiter
        start: Offset of the first character of the matched line
        end: Offset one past the last character of the matched line

    Example:
        For "  // inj:end" at offset 10:
        DirectiveOccurrence(line="  // inj:end", comment="// inj:end",
                            body="end", start=10, end=22)
    """
    line: str
    comment: str
    body: str
    start: int
    end: int

    @property
    def padding(self) -> str:
        """Leading whitespace of the line (line minus comment)"""
        return self.line[: len(self.line) - len(self.comment)]


@dataclass(frozen=True)
class Directive:
    """
    Parsed directive

    Attributes:
        type: Directive kind
        arg: None for Begin/End, dict for Assign/Merge, list for Emit
        padding: Leading whitespace of the directive line
        start: Offset of the first character of the matched line
        end: Offset one past the matched line
    """
    type: DirectiveType
    arg: DirectiveArgument
    padding: str
    start: int
    end: int
