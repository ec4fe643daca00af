"""
Models package for incode

Contains data structures and type definitions for the extraction pipeline.
"""

from .state import ExtractionState, pipeline
from .directives import Directive, DirectiveOccurrence, DirectiveType
from .regions import InjectableRegion, SourcePosition

__all__ = [
    "ExtractionState",
    "pipeline",
    "Directive",
    "DirectiveOccurrence",
    "DirectiveType",
    "InjectableRegion",
    "SourcePosition",
]
