"""
incode - Code injection from comment directives

Finds regions delimited by // inj:emit(...) and // inj:end in source text,
resolves the data accumulated by enclosing assign/merge directives and
replaces each region with text produced by a render callback.
"""

__version__ = "0.3.1"

from .lib import (
    regions_extract,
    inject,
    matcher_create,
    InvalidSourceError,
    InvalidDirectiveError,
    InvalidRegionError,
    LOG,
    verbosity_set,
    sink_add,
)
from .models import InjectableRegion, SourcePosition

__all__ = [
    "regions_extract",
    "inject",
    "matcher_create",
    "InvalidSourceError",
    "InvalidDirectiveError",
    "InvalidRegionError",
    "InjectableRegion",
    "SourcePosition",
    "LOG",
    "verbosity_set",
    "sink_add",
    "__version__",
]
