"""sesemit: heuristic JSON graph extraction + SES sentence emission."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("sesemit")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from sesemit.api import (
    ConversionResult,
    convert,
    convert_file,
    convert_text,
    emit,
    extract_graph,
)
from sesemit.kernel.graph import CanonicalGraph, EdgeDef, NodeDef
from sesemit.codes import ExitCode

__all__ = [
    "__version__",
    "extract_graph",
    "emit",
    "convert",
    "convert_text",
    "convert_file",
    "ConversionResult",
    "CanonicalGraph",
    "NodeDef",
    "EdgeDef",
    "ExitCode",
]
