"""
incode - Code injection from comment directives

Extracts regions marked with // inj: directives and injects generated text.
"""

__version__ = "0.3.1"

from .injector import regions_extract, inject
from .scanner import matcher_create
from .errors import InvalidSourceError, InvalidDirectiveError, InvalidRegionError
from .log import LOG, sink_add, verbosity_set

__all__ = [
    "regions_extract",
    "inject",
    "matcher_create",
    "InvalidSourceError",
    "InvalidDirectiveError",
    "InvalidRegionError",
    "LOG",
    "verbosity_set",
    "sink_add",
    "__version__",
]
