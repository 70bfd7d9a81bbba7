# internal/reporter/render_yaml.py

from __future__ import annotations

import yaml

from internal.errors import SerializationError
from internal.models.schema import ComposeDocument


def render_document(doc: ComposeDocument) -> str:
    try:
        return yaml.safe_dump(
            doc.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"Error rendering compose YAML: {e}")


def parse_document(text: str) -> ComposeDocument:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Error parsing compose YAML: {e}")
    try:
        return ComposeDocument.from_dict(data)
    except ValueError as e:
        raise SerializationError(str(e))
