"""Schema loading utility."""

import json
from functools import lru_cache
from pathlib import Path

SCHEMAS_DIR = Path(__file__).resolve().parent.parent / "schemas"


def load_schema(path: Path) -> dict:
    """Load a JSON Schema file and return as dict."""
    with open(path) as f:
        return json.load(f)


@lru_cache(maxsize=None)
def packaged_schema(name: str) -> dict:
    """Load one of the schemas shipped with the package, e.g. 'hands_request'."""
    return load_schema(SCHEMAS_DIR / f"{name}.json")
