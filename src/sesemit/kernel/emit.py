"""Render a CanonicalGraph as SES text.

Rules:
- For each parent P that has direct children, one composition sentence
  enumerating those children.
- Each connection u -> v is emitted under the scope where u and v are
  siblings (same parent_id). Anything else is left out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .graph import CanonicalGraph, EdgeDef, NodeDef
from .tokens import join_with_and

ROOT_DISPLAY_NAME = "ROOT"
PERSPECTIVE_SUFFIX = "Sys"

COMPOSITION_TEMPLATE = "From the {perspective} perspective, {parent} is made of {parts}!\n\n"
FLOW_TEMPLATE = "From the {perspective} perspective, {src} sends outPort{k} to {dst} as inPort{k}!\n"


@dataclass(frozen=True)
class ScopedEdge:
    """A sibling edge with both endpoints resolved."""
    edge: EdgeDef
    src: NodeDef
    dst: NodeDef


@dataclass
class Scope:
    """Nodes sharing a parent_id (None = root) plus the edges among them."""
    parent_id: Optional[str]
    display_name: str
    children: List[NodeDef] = field(default_factory=list)
    edges: List[ScopedEdge] = field(default_factory=list)

    @property
    def perspective(self) -> str:
        return self.display_name + PERSPECTIVE_SUFFIX

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


def _display_name(parent_id: Optional[str], by_id: Dict[str, NodeDef]) -> str:
    if parent_id is None:
        return ROOT_DISPLAY_NAME
    parent = by_id.get(parent_id)
    return parent.name if parent is not None else parent_id


def build_scopes(graph: CanonicalGraph) -> List[Scope]:
    """Group nodes and sibling edges into scopes, in emission order.

    Children are sorted by name, edges by (source name, target name); both
    sorts are stable. The root scope comes first, the rest are ordered by the
    parent's name (raw parent id when the parent is unknown). Scopes with
    equal sort keys keep first-appearance order.
    """
    by_id = graph.node_index()

    scopes: Dict[Optional[str], Scope] = {}
    for node in graph.nodes:
        scope = scopes.get(node.parent_id)
        if scope is None:
            scope = Scope(parent_id=node.parent_id, display_name=_display_name(node.parent_id, by_id))
            scopes[node.parent_id] = scope
        scope.children.append(node)

    for edge in graph.edges:
        src = by_id.get(edge.from_id)
        dst = by_id.get(edge.to_id)
        if src is None or dst is None:
            continue
        if src.parent_id != dst.parent_id:
            continue
        # src.parent_id always has a scope: src itself lives in it
        scopes[src.parent_id].edges.append(ScopedEdge(edge=edge, src=src, dst=dst))

    for scope in scopes.values():
        scope.children.sort(key=lambda n: n.name)
        scope.edges.sort(key=lambda e: (e.src.name, e.dst.name))

    ordered = [s for s in scopes.values() if s.children]
    ordered.sort(key=lambda s: (not s.is_root, s.display_name))
    return ordered


def render_scopes(scopes: List[Scope]) -> str:
    """Render planned scopes. Flow counters are per scope and start at 1."""
    flow_counter: Dict[Optional[str], int] = {}
    parts: List[str] = []

    for scope in scopes:
        if not scope.children:
            continue
        parts.append(COMPOSITION_TEMPLATE.format(
            perspective=scope.perspective,
            parent=scope.display_name,
            parts=join_with_and([child.name for child in scope.children]),
        ))
        for scoped in scope.edges:
            k = flow_counter.get(scope.parent_id, 0) + 1
            flow_counter[scope.parent_id] = k
            parts.append(FLOW_TEMPLATE.format(
                perspective=scope.perspective,
                src=scoped.src.name,
                dst=scoped.dst.name,
                k=k,
            ))
        parts.append("\n")

    return "".join(parts)


def emit_ses(graph: CanonicalGraph) -> str:
    """Deterministic SES text for graph."""
    return render_scopes(build_scopes(graph))
