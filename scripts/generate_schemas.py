"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from sesemit.kernel.graph import CanonicalGraph


def generate_schemas():
    """Generate JSON schema for the canonical graph dump (--graph-out)."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    graph_schema = CanonicalGraph.model_json_schema()
    graph_schema_path = schemas_dir / "canonical_graph.schema.json"
    with open(graph_schema_path, 'w', encoding='utf-8') as f:
        json.dump(graph_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {graph_schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
