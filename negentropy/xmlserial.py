"""Reflection-driven XML serialization of dataclasses."""

from __future__ import annotations

import dataclasses
import re
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any

from .vectors import Vec2, Vec4

_VECTOR_TYPES = (Vec2, Vec4)
_VECTOR_COMPONENTS = "xyzw"

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def component_name(vector_type: type, index: int) -> str:
    """Attribute name used for component ``index`` of a vector type."""
    if vector_type in _VECTOR_TYPES and 0 <= index < len(_VECTOR_COMPONENTS):
        return _VECTOR_COMPONENTS[index]
    return f"c{index}"


def _format_number(value: float) -> str:
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def _as_double(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _as_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _as_bool(text: str) -> bool:
    return bool(text) and text[0] in "1tTyY"


def _enum_label(member: Enum) -> str:
    return member.value if isinstance(member.value, str) else member.name


def _enum_from_label(enum_type: type[Enum], text: str) -> Enum | None:
    for member in enum_type:
        if _enum_label(member) == text:
            return member
    return enum_type.__members__.get(text)


def _child(parent: ET.Element, name: str) -> ET.Element | None:
    return next((node for node in parent if node.tag == name), None)


def serialize_field(parent: ET.Element, name: str, value: Any) -> ET.Element:
    """Append a child element named ``name`` holding ``value``."""
    node = ET.SubElement(parent, name)
    if isinstance(value, Enum):
        node.text = _enum_label(value)
    elif isinstance(value, bool):
        node.text = "true" if value else "false"
    elif isinstance(value, (int, float)):
        node.text = _format_number(value)
    elif isinstance(value, str):
        node.text = value
    elif isinstance(value, _VECTOR_TYPES):
        for index, component in enumerate(value):
            node.set(component_name(type(value), index), _format_number(component))
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        auto_serialize(value, node)
    else:
        raise TypeError(f"cannot serialize field {name!r} of type {type(value).__name__}")
    return node


def deserialize_field(parent: ET.Element, name: str, value: Any) -> Any:
    """Read child ``name`` of ``parent``; return the new value, or ``value`` if absent."""
    node = _child(parent, name)
    if node is None:
        return value
    text = node.text or ""
    if isinstance(value, Enum):
        member = _enum_from_label(type(value), text)
        return value if member is None else member
    if isinstance(value, bool):
        return _as_bool(text)
    if isinstance(value, int):
        return _as_int(text)
    if isinstance(value, float):
        return _as_double(text)
    if isinstance(value, str):
        return text
    if isinstance(value, _VECTOR_TYPES):
        vector_type = type(value)
        components = list(value)
        for index in range(len(components)):
            attr = node.get(component_name(vector_type, index))
            if attr is not None:
                components[index] = _as_double(attr)
        return vector_type(*components)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        auto_deserialize(value, node)
        return value
    raise TypeError(f"cannot deserialize field {name!r} of type {type(value).__name__}")


def _require_dataclass(obj: Any) -> None:
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"{type(obj).__name__} is not a dataclass instance")


def auto_serialize(obj: Any, node: ET.Element) -> None:
    """Write every field of dataclass ``obj`` as a child of ``node``."""
    _require_dataclass(obj)
    for field in dataclasses.fields(obj):
        serialize_field(node, field.name, getattr(obj, field.name))


def auto_deserialize(obj: Any, node: ET.Element) -> None:
    """Update the fields of dataclass ``obj`` from the children of ``node``."""
    _require_dataclass(obj)
    for field in dataclasses.fields(obj):
        setattr(obj, field.name, deserialize_field(node, field.name, getattr(obj, field.name)))