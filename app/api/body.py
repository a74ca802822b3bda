"""Read request bodies sent as JSON, urlencoded or multipart form data."""

import json
import re
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel

from app.core.errors import ValidationFailedError
from app.core.validation import validate_payload

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = frozenset({"multipart/form-data", "application/x-www-form-urlencoded"})

# "classrooms[0]" -> ("classrooms", "0"); "users[]" -> ("users", "")
_INDEXED_KEY = re.compile(r"^(?P<name>[^\[\]]+)\[(?P<index>\d*)\]$")


def fold_form_items(items: list[tuple[str, Any]]) -> dict[str, Any]:
    """
    Turn flat form fields into a dict.

    Indexed keys (name[0], name[1], name[]) and repeated keys become lists, in
    index order when indices are given.
    """
    scalars: dict[str, Any] = {}
    lists: dict[str, list[tuple[int, Any]]] = {}
    for position, (key, value) in enumerate(items):
        match = _INDEXED_KEY.match(key)
        if match:
            index = match.group("index")
            lists.setdefault(match.group("name"), []).append(
                (int(index) if index else position, value)
            )
        elif key in scalars:
            existing = scalars[key]
            scalars[key] = existing + [value] if isinstance(existing, list) else [existing, value]
        else:
            scalars[key] = value
    for name, indexed in lists.items():
        scalars[name] = [value for _, value in sorted(indexed, key=lambda pair: pair[0])]
    return scalars


async def read_body(request: Request) -> dict[str, Any]:
    """Return the request body as a dict; an empty or bodiless request yields {}."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return fold_form_items(list(form.multi_items()))
    raw = await request.body()
    if not raw.strip():
        return {}
    if content_type and content_type != "application/json":
        raise ValidationFailedError(
            "Content-Type must be application/json, multipart/form-data or application/x-www-form-urlencoded."
        )
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationFailedError(f"Invalid JSON: {e!s}") from e
    if not isinstance(data, dict):
        raise ValidationFailedError("Request body must be an object.")
    return data


def form_body(model: type[ModelT]) -> Callable[[Request], Coroutine[Any, Any, ModelT]]:
    """Build a dependency that reads the request body and validates it against model."""

    async def dependency(request: Request) -> ModelT:
        return validate_payload(model, await read_body(request))

    dependency.__name__ = f"{model.__name__}_body"
    return dependency


def _inline_refs(node: Any, defs: dict[str, Any]) -> Any:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            resolved = _inline_refs(defs[ref.removeprefix("#/$defs/")], defs)
            siblings = {key: value for key, value in node.items() if key != "$ref"}
            return {**resolved, **_inline_refs(siblings, defs)}
        return {key: _inline_refs(value, defs) for key, value in node.items()}
    if isinstance(node, list):
        return [_inline_refs(item, defs) for item in node]
    return node


def body_openapi(model: type[BaseModel]) -> dict[str, Any]:
    """
    OpenAPI requestBody for a route whose body is read by form_body(model).

    The body is parsed by hand, so FastAPI cannot infer it; the model's JSON
    schema (wire names, nested definitions inlined) is declared for every
    accepted content type.
    """
    schema = model.model_json_schema(by_alias=True)
    defs = schema.pop("$defs", {})
    schema = _inline_refs(schema, defs)
    content_types = ["application/json", *sorted(FORM_CONTENT_TYPES)]
    return {
        "requestBody": {
            "required": bool(schema.get("required")),
            "content": {content_type: {"schema": schema} for content_type in content_types},
        }
    }
