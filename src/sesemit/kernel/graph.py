"""Canonical graph models (schema-independent)."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class NodeDef(BaseModel):
    """A node after extraction. parent_id None means root-level."""
    id: str
    name: str  # sanitized token, never empty
    parent_id: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class EdgeDef(BaseModel):
    """A directed connection between two node ids (ids need not resolve)."""
    from_id: str
    to_id: str
    label: Optional[str] = None  # kept, not rendered

    model_config = ConfigDict(extra="forbid", frozen=True)


class CanonicalGraph(BaseModel):
    """Ordered nodes and edges produced once by extraction."""
    nodes: Tuple[NodeDef, ...] = Field(default_factory=tuple)
    edges: Tuple[EdgeDef, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def node_index(self) -> Dict[str, NodeDef]:
        """Map node id -> NodeDef. On duplicate ids the first occurrence wins."""
        by_id: Dict[str, NodeDef] = {}
        for node in self.nodes:
            by_id.setdefault(node.id, node)
        return by_id
