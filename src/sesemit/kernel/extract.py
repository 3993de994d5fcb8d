"""Heuristic extraction of a CanonicalGraph from an unknown JSON tree.

The input schema is not fixed. Each logical attribute has an ordered list of
candidate field names; the first candidate holding a scalar wins. Nothing in
here raises on a parsed tree: missing arrays become empty lists, missing
fields get defaults, unresolvable edges are dropped.
"""

from __future__ import annotations

import json
import uuid
from typing import Any, List, Optional, Sequence

from .graph import CanonicalGraph, EdgeDef, NodeDef
from .tokens import sanitize_ses_token, short_id

NODE_ARRAY_KEYS = ("nodes", "models", "elements")
EDGE_ARRAY_KEYS = ("edges", "links", "connections")

NODE_ID_KEYS = ("id", "_id", "uuid", "key", "identifier")
NODE_NAME_KEYS = ("name", "label", "title")
NODE_PARENT_KEYS = ("parentId", "parent", "containerId", "ownerId", "belongsTo")
# {"parent": {"id": "..."}}
NESTED_PARENT_KEY = "parent"
NESTED_PARENT_ID_KEYS = ("id", "_id", "uuid")

EDGE_FROM_KEYS = ("from", "source", "src", "fromId", "sourceId")
EDGE_TO_KEYS = ("to", "target", "dst", "toId", "targetId")
EDGE_LABEL_KEYS = ("label", "type", "kind", "name")
# {"source": {"id": "..."}, "target": {"id": "..."}}
NESTED_SOURCE_KEY = "source"
NESTED_TARGET_KEY = "target"
NESTED_ENDPOINT_ID_KEYS = ("id", "_id", "uuid", "key")


def first_array(root: Any, keys: Sequence[str]) -> Optional[List[Any]]:
    """Return the first list found under keys, else root if root is a list."""
    if isinstance(root, dict):
        for key in keys:
            value = root.get(key)
            if isinstance(value, list):
                return value
    if isinstance(root, list):
        return root
    return None


def _scalar_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return None


def first_scalar(record: Any, keys: Sequence[str]) -> Optional[str]:
    """Text of the first key holding a scalar (string/number/bool). null counts as absent."""
    if not isinstance(record, dict):
        return None
    for key in keys:
        text = _scalar_text(record.get(key))
        if text is not None:
            return text
    return None


def nested_scalar(record: Any, container_key: str, keys: Sequence[str]) -> Optional[str]:
    """first_scalar() applied to the object stored under container_key."""
    if not isinstance(record, dict):
        return None
    return first_scalar(record.get(container_key), keys)


def extract_node(record: Any) -> NodeDef:
    node_id = first_scalar(record, NODE_ID_KEYS)
    name = first_scalar(record, NODE_NAME_KEYS)
    parent_id = first_scalar(record, NODE_PARENT_KEYS)
    if parent_id is None:
        parent_id = nested_scalar(record, NESTED_PARENT_KEY, NESTED_PARENT_ID_KEYS)

    if node_id is None:
        node_id = str(uuid.uuid4())
    if name is None:
        name = "node_" + short_id(node_id)

    return NodeDef(id=node_id, name=sanitize_ses_token(name), parent_id=parent_id)


def extract_edge(record: Any) -> Optional[EdgeDef]:
    """EdgeDef for record, or None when an endpoint cannot be resolved."""
    from_id = first_scalar(record, EDGE_FROM_KEYS)
    to_id = first_scalar(record, EDGE_TO_KEYS)
    label = first_scalar(record, EDGE_LABEL_KEYS)

    if from_id is None:
        from_id = nested_scalar(record, NESTED_SOURCE_KEY, NESTED_ENDPOINT_ID_KEYS)
    if to_id is None:
        to_id = nested_scalar(record, NESTED_TARGET_KEY, NESTED_ENDPOINT_ID_KEYS)

    if from_id is None or to_id is None:
        return None
    return EdgeDef(from_id=from_id, to_id=to_id, label=label)


def extract_canonical_graph(root: Any) -> CanonicalGraph:
    """Build a CanonicalGraph from a parsed JSON value (object or array)."""
    nodes: List[NodeDef] = []
    edges: List[EdgeDef] = []

    for record in first_array(root, NODE_ARRAY_KEYS) or []:
        nodes.append(extract_node(record))

    for record in first_array(root, EDGE_ARRAY_KEYS) or []:
        edge = extract_edge(record)
        if edge is not None:
            edges.append(edge)

    return CanonicalGraph(nodes=nodes, edges=edges)
