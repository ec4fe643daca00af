"""
Extraction state model and pipeline helper

Defines ExtractionState dataclass for the functional pipeline pattern and
the pipeline() helper for composing extraction stages.
"""

import re
from typing import Any, Callable, Dict, List, Optional, TypeVar
from dataclasses import dataclass, field

from .directives import Directive
from .regions import InjectableRegion


ES = TypeVar("ES", bound="ExtractionState")


@dataclass
class ExtractionState:
    """
    State container carried through the extraction pipeline.

    Pipeline stages and their state additions:
        - Initial: text, matcher, data
        - directives_stage: directives
        - regions_stage: regions

    Attributes:
        text: Source text being scanned
        matcher: Compiled directive line pattern
        data: Initial data of the root scope
        directives: Parsed directives in source order
        regions: Resolved injectable regions in source order
    """

    text: str = field(default="")
    matcher: Optional[re.Pattern] = field(default=None)
    data: Dict[str, Any] = field(default_factory=dict)

    directives: List[Directive] = field(default_factory=list)
    regions: List[InjectableRegion] = field(default_factory=list)

    def copy(self: ES) -> ES:
        """
        Creates a shallow copy of the ExtractionState instance.

        Returns:
            A new ExtractionState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ExtractionState, *stages: Callable[[ExtractionState], ExtractionState]
) -> ExtractionState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ExtractionState) -> ExtractionState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(initial_state, directives_stage, regions_stage)

    This is equivalent to:
        regions_stage(directives_stage(initial_state))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
