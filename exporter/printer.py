"""
Rendering of export artifacts as YAML or JSON.
"""

import json
from typing import Any

import yaml

from .errors import UsageError

OUTPUT_FORMATS = ["json", "yaml"]

def render(obj: Any, output_format: str) -> str:
    """Render a model (or plain dict) in the given machine readable format."""
    data = obj.to_dict() if hasattr(obj, "to_dict") else obj

    if output_format == "json":
        return json.dumps(data, indent=2) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    raise UsageError(
        f'unable to match a printer suitable for the output format "{output_format}", '
        f'allowed formats are: {", ".join(OUTPUT_FORMATS)}'
    )
