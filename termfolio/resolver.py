"""
Content resolver: base document + optional overlay → effective document.

The overlay is merged onto the base with these rules:
• a None / missing overlay value keeps the base value
• two lists merge by index (overlay[i] extends base[i]); extra overlay items
  are appended, extra base items kept
• two dicts merge key by key
• anything else: the overlay value wins

Neither input is touched; the result is a fresh structure.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass
from typing import Any, Dict, Mapping

SCHEMAS = ("flat", "resume")


class ConfigurationError(Exception):
    """Input documents are missing, unreadable or unusable."""


@dataclass(frozen=True)
class SourceDocument:
    schema: str
    data: Dict[str, Any]


@dataclass(frozen=True)
class EffectiveDocument:
    schema: str
    data: Dict[str, Any]


def deep_merge(base: Any, overlay: Any) -> Any:
    if overlay is None:
        return copy.deepcopy(base)
    if base is None:
        return copy.deepcopy(overlay)
    if not isinstance(base, Mapping) or not isinstance(overlay, Mapping):
        return copy.deepcopy(overlay)

    result = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in overlay.items():
        if value is None:
            continue
        current = base.get(key)
        if isinstance(value, list) and isinstance(current, list):
            result[key] = _merge_lists(current, value)
        elif isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _merge_lists(base: list, overlay: list) -> list:
    merged = []
    for i, item in enumerate(base):
        patch = overlay[i] if i < len(overlay) else None
        if patch is None:
            merged.append(copy.deepcopy(item))
        elif isinstance(item, Mapping) and isinstance(patch, Mapping):
            merged.append(deep_merge(item, patch))
        else:
            merged.append(copy.deepcopy(patch))
    merged.extend(copy.deepcopy(overlay[len(base):]))
    return merged


def resolve(base: SourceDocument | Mapping | None,
            overlay: SourceDocument | Mapping | None = None,
            schema: str | None = None) -> EffectiveDocument:
    """Merge ``overlay`` onto ``base`` and tag the result with its schema.

    Either argument may be a ``SourceDocument`` (which carries its own schema
    tag) or a plain mapping, in which case ``schema`` names the shape.
    """
    tags = {d.schema for d in (base, overlay) if isinstance(d, SourceDocument)}
    if schema:
        tags.add(schema)
    if len(tags) > 1:
        raise ConfigurationError(f"Base and overlay disagree on schema: {sorted(tags)}")
    tag = tags.pop() if tags else "resume"
    if tag not in SCHEMAS:
        raise ConfigurationError(f"Unsupported schema {tag!r}; expected one of {', '.join(SCHEMAS)}")

    base_data = base.data if isinstance(base, SourceDocument) else base
    overlay_data = overlay.data if isinstance(overlay, SourceDocument) else overlay
    if base_data is None and overlay_data is None:
        raise ConfigurationError("Neither a base nor an overlay document is available")
    for name, doc in (("base", base_data), ("overlay", overlay_data)):
        if doc is not None and not isinstance(doc, Mapping):
            raise ConfigurationError(f"The {name} document must be a JSON object, got {type(doc).__name__}")

    return EffectiveDocument(tag, deep_merge(base_data, overlay_data or {}))
