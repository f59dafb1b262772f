"""JSON form of a profile payload, meant for humans to read and edit.

Every field of a present message is written out, defaults included, so the
document shows everything that can be edited and re-encoding it is stable.
Field names are the schema's snake_case names; enums are written by name.
"""
from __future__ import annotations

import json
from typing import Any

from google.protobuf import json_format

from a7p_server.domain.errors import MalformedText, SchemaViolation
from a7p_server.infra.profile_schema import Payload


def to_tree(payload) -> dict[str, Any]:
    return json_format.MessageToDict(
        payload,
        always_print_fields_with_no_presence=True,
        preserving_proto_field_name=True,
    )


def to_text(payload) -> str:
    return json.dumps(to_tree(payload), ensure_ascii=False, indent=2)


def from_tree(tree: dict[str, Any]):
    payload = Payload()
    try:
        json_format.ParseDict(tree, payload, ignore_unknown_fields=False)
    except json_format.ParseError as e:
        raise SchemaViolation(str(e)) from e
    return payload


def from_text(text: str):
    try:
        tree = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedText(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedText("invalid JSON: nested too deeply") from e
    if not isinstance(tree, dict):
        raise MalformedText(f"expected a JSON object, got {type(tree).__name__}")
    return from_tree(tree)
