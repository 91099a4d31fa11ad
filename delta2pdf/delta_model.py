"""
Typed representation of a Quill Delta and the parser that builds it.

A delta looks like::

    {"ops": [
        {"insert": "Title"},
        {"insert": "\\n", "attributes": {"header": 1}},
        {"insert": {"image": "https://example.com/pic.png"}}
    ]}

Parsing validates the whole document up front, so the converter never sees a
partially valid delta.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union
from urllib.parse import urlsplit

from .exceptions import ParseError

logger = logging.getLogger('delta2pdf')


@dataclass(frozen=True, slots=True)
class TextContent:
    text: str


@dataclass(frozen=True, slots=True)
class ImageContent:
    """Embedded image referenced by an absolute URL."""

    url: str


Content = Union[TextContent, ImageContent]


class ChangeKind(Enum):
    INSERT = 'insert'
    DELETE = 'delete'
    RETAIN = 'retain'


@dataclass(frozen=True, slots=True)
class Change:
    kind: ChangeKind
    content: Content


class ListKind(Enum):
    BULLET = 'bullet'
    ORDERED = 'ordered'


@dataclass(frozen=True, slots=True)
class Bold:
    value: bool


@dataclass(frozen=True, slots=True)
class Italic:
    value: bool


@dataclass(frozen=True, slots=True)
class Header:
    level: int


@dataclass(frozen=True, slots=True)
class ListAttr:
    kind: ListKind


Attribute = Union[Bold, Italic, Header, ListAttr]


@dataclass(frozen=True, slots=True)
class Operation:
    """One entry of the change list: a change plus its attributes in source order."""

    change: Change
    attributes: Tuple[Attribute, ...] = ()

    @property
    def is_insert(self) -> bool:
        return self.change.kind is ChangeKind.INSERT


@dataclass(frozen=True, slots=True)
class Delta:
    ops: Tuple[Operation, ...]

    def inserts(self):
        """Yield only the operations that contribute output."""
        return (op for op in self.ops if op.is_insert)


def parse_delta(raw) -> Delta:
    """Parse a delta from JSON text or already-decoded data.

    Args:
        raw: JSON string/bytes, a mapping with an ``ops`` list, or a bare list
             of operations.

    Returns:
        Delta with every operation validated.

    Raises:
        ParseError: If the input is malformed or uses an unsupported shape.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Delta is not valid JSON: {e}") from e

    if isinstance(raw, dict):
        if 'ops' not in raw:
            raise ParseError("Delta object has no 'ops' field")
        raw_ops = raw['ops']
    else:
        raw_ops = raw

    if not isinstance(raw_ops, list):
        raise ParseError(f"Delta ops must be a list, got {type(raw_ops).__name__}")

    ops = tuple(_parse_operation(index, raw_op) for index, raw_op in enumerate(raw_ops))
    logger.debug("Parsed delta with %d operations", len(ops))
    return Delta(ops=ops)


def _parse_operation(index, raw_op):
    if not isinstance(raw_op, dict):
        raise ParseError(f"Operation {index} must be an object, got {type(raw_op).__name__}")

    kinds = [kind for kind in ChangeKind if kind.value in raw_op]
    if len(kinds) != 1:
        raise ParseError(
            f"Operation {index} must have exactly one of insert/delete/retain, "
            f"found {[kind.value for kind in kinds]}"
        )
    kind = kinds[0]

    content = _parse_content(index, raw_op[kind.value])
    attributes = _parse_attributes(index, raw_op.get('attributes'))
    return Operation(change=Change(kind=kind, content=content), attributes=attributes)


def _parse_content(index, value):
    # Plain text first, then the image object
    if isinstance(value, str):
        return TextContent(value)

    if isinstance(value, dict) and 'image' in value:
        url = value['image']
        if not isinstance(url, str):
            raise ParseError(f"Operation {index}: image url must be a string")
        if not urlsplit(url).scheme:
            raise ParseError(f"Operation {index}: image url is not absolute: {url!r}")
        return ImageContent(url)

    raise ParseError(f"Operation {index}: content is neither text nor an image: {value!r}")


def _parse_attributes(index, raw_attrs):
    if raw_attrs is None:
        return ()
    if not isinstance(raw_attrs, dict):
        raise ParseError(f"Operation {index}: attributes must be an object")

    attributes = []
    for key, value in raw_attrs.items():
        if key == 'bold':
            attributes.append(Bold(_expect_bool(index, key, value)))
        elif key == 'italic':
            attributes.append(Italic(_expect_bool(index, key, value)))
        elif key == 'header':
            # bool is an int subclass; header: true is not a level
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ParseError(f"Operation {index}: header level must be an integer 0-255, got {value!r}")
            attributes.append(Header(value))
        elif key == 'list':
            try:
                attributes.append(ListAttr(ListKind(value)))
            except ValueError:
                raise ParseError(f"Operation {index}: unsupported list type {value!r}") from None
        else:
            raise ParseError(f"Operation {index}: unsupported attribute {key!r}")
    return tuple(attributes)


def _expect_bool(index, key, value):
    if not isinstance(value, bool):
        raise ParseError(f"Operation {index}: {key} must be a boolean, got {value!r}")
    return value
