"""Public API for sesemit.

High-level functions over the kernel pipeline:
JSON tree -> CanonicalGraph -> SES text.
"""

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel

from sesemit.kernel.graph import CanonicalGraph
from sesemit.kernel.extract import extract_canonical_graph
from sesemit.kernel.emit import build_scopes, emit_ses, render_scopes
from sesemit._internal.io.files import (
    load_json_tree,
    parse_json_text,
    prepare_destination,
    write_text_file,
)


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class ConversionResult(BaseModel):
    """Summary of a file conversion."""
    output_path: str  # absolute
    node_count: int  # nodes in the canonical graph
    edge_count: int  # edges in the canonical graph (before sibling filtering)
    scope_count: int  # rendered composition sentences
    flow_count: int  # rendered flow sentences
    ses_sha256: str
    graph_path: Optional[str] = None


def extract_graph(root: Any) -> CanonicalGraph:
    """Extract the canonical graph from a parsed JSON value."""
    return extract_canonical_graph(root)


def emit(graph: CanonicalGraph) -> str:
    """Render a canonical graph as SES text."""
    return emit_ses(graph)


def convert(root: Any) -> str:
    """Parsed JSON value -> SES text."""
    return emit(extract_graph(root))


def convert_text(raw: str) -> str:
    """JSON text -> SES text. Raises ValueError on invalid JSON."""
    return convert(parse_json_text(raw))


def dump_graph(graph: CanonicalGraph) -> str:
    """Canonical JSON for graph (byte-stable, newline-terminated).

    Sorted keys, compact separators, UTF-8 text; list order is kept as extracted.
    """
    return json.dumps(
        graph.model_dump(mode="json"),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    ) + "\n"


def convert_file(
    input_path: Union[str, os.PathLike, Path],
    output_path: Union[str, os.PathLike, Path],
    overwrite: bool = False,
    graph_path: Optional[Union[str, os.PathLike, Path]] = None,
) -> ConversionResult:
    """
    Convert a JSON graph file into an SES file.

    Everything is computed before the first write, so a failure never
    leaves partial output behind.

    Args:
        input_path: UTF-8 JSON document
        output_path: SES destination; parent directories are created
        overwrite: accepted for CLI compatibility; an existing output file
            is always truncated whether or not this is set
        graph_path: optional destination for a canonical JSON dump of the graph

    Returns:
        ConversionResult

    Raises:
        FileNotFoundError: input does not exist
        ValueError: input is not valid UTF-8 JSON
        OSError: output cannot be written
    """
    input_path = _normalize_path(input_path)
    output_path = _normalize_path(output_path)

    root = load_json_tree(input_path)
    graph = extract_graph(root)
    scopes = build_scopes(graph)
    ses = render_scopes(scopes)
    graph_json = None
    if graph_path is not None:
        graph_path = _normalize_path(graph_path)
        graph_json = dump_graph(graph)

    # Every destination must be usable before the first write
    prepare_destination(output_path)
    if graph_path is not None:
        prepare_destination(graph_path)

    # TODO: honor overwrite=False by refusing to replace an existing file once
    # callers relying on unconditional overwrite have moved to --overwrite.
    write_text_file(output_path, ses)
    if graph_json is not None:
        write_text_file(graph_path, graph_json)

    return ConversionResult(
        output_path=str(output_path.resolve()),
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        scope_count=len(scopes),
        flow_count=sum(len(s.edges) for s in scopes),
        ses_sha256=hashlib.sha256(ses.encode("utf-8")).hexdigest(),
        graph_path=str(graph_path.resolve()) if graph_json is not None else None,
    )
