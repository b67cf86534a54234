"""Reading and writing simple child elements of an XML element."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum


def _format(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.text
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def add_element(parent, key, value):
    """Append ``<key>value</key>`` to ``parent``; nothing when ``value`` is None."""
    if value is None:
        return None
    child = ET.SubElement(parent, key)
    child.text = _format(value)
    return child


def _target(parent, key):
    if parent is None:
        return None
    return parent if key is None else parent.find(key)


def read_text(parent, key):
    """Text of the first ``key`` child (or of ``parent`` when key is None); None if absent."""
    element = _target(parent, key)
    if element is None:
        return None
    return element.text or ""


def read_int(parent, key):
    text = read_text(parent, key)
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def read_float(parent, key):
    text = read_text(parent, key)
    if text is None:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def read_enum(parent, key, enum_type):
    """Parse a child as ``enum_type``; None when absent or unrecognised."""
    text = read_text(parent, key)
    if text is None:
        return None
    member = enum_type.from_text(text)
    if member == enum_type.invalid:
        return None
    return member


def read_all_texts(parent, key):
    """Texts of every ``key`` child, in document order."""
    if parent is None:
        return []
    return [element.text or "" for element in parent.findall(key)]