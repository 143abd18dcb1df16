"""Serialization of a Channel to an RSS 2.0 XML document."""

import logging
import re
import xml.etree.ElementTree as ET

from pydantic import BaseModel

from rsspod.config import get_settings
from rsspod.errors import SerializationError
from rsspod.models import Channel
from rsspod.schema import NAMESPACES, FieldKind, spec_for

logger = logging.getLogger(__name__)

XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8"?>'
RSS_OPEN = (
    "<rss "
    + " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items())
    + ' version="2.0">'
).encode()
RSS_CLOSE = b"</rss>"

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _check_text(value: object, path: str) -> str:
    if not isinstance(value, str):
        raise SerializationError(path, f"expected str, got {type(value).__name__}")
    if match := _INVALID_XML_CHARS.search(value):
        raise SerializationError(
            path, f"character {match.group()!r} cannot be represented in XML"
        )
    return value


def _build_element(model: BaseModel, path: str) -> ET.Element:
    """Build the element for a model by walking its mapping table.

    Args:
        model: Channel, Item or one of their value records
        path: Dotted location of the model, used in error messages

    Raises:
        SerializationError: If the model has no mapping or holds a value
            that cannot be written
    """
    spec = spec_for(type(model))
    if spec is None:
        raise SerializationError(path, f"no mapping for {type(model).__name__}")

    element = ET.Element(spec.tag)
    for field in spec.field_specs:
        value = getattr(model, field.attr)
        field_path = f"{path}.{field.attr}"

        if field.kind is FieldKind.CHILDREN:
            for index, child in enumerate(value):
                element.append(_build_element(child, f"{field_path}[{index}]"))
            continue

        # Unset and empty optional fields produce no markup at all
        if field.omit_empty and not value:
            continue

        text = _check_text(value, field_path)
        if field.kind is FieldKind.ATTRIBUTE:
            element.set(field.name, text)
        else:
            ET.SubElement(element, field.name).text = text

    return element


def _indent(element: ET.Element, prefix: str, space: str, level: int = 0) -> None:
    """Indent nested elements in place.

    Every line starts with prefix followed by one space string per level.
    Elements without children keep their text untouched.
    """
    if not len(element):
        return

    child_indent = "\n" + prefix + space * (level + 1)
    element.text = child_indent
    for child in element:
        _indent(child, prefix, space, level + 1)
        child.tail = child_indent
    child.tail = "\n" + prefix + space * level


def _render(channel: Channel, prefix: str | None, space: str | None) -> bytes:
    root = _build_element(channel, "channel")
    if prefix is not None and space is not None:
        _indent(root, prefix, space)

    try:
        body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    except (TypeError, ValueError) as e:
        raise SerializationError("channel", str(e)) from e

    if prefix:
        body = prefix + body
    return body.encode("utf-8")


def _serialize(channel: Channel, indented: bool) -> bytes:
    settings = get_settings()
    try:
        if indented:
            body = _render(channel, settings.indent_prefix, settings.indent)
        else:
            body = _render(channel, None, None)
    except SerializationError as e:
        logger.error(
            f"Failed to publish channel: {channel.title!r}",
            exc_info=True,
            extra={"channel": channel.title, "path": e.path},
        )
        raise

    separator = b"\n" if indented else b""
    output = separator.join([XML_DECLARATION, RSS_OPEN, body, RSS_CLOSE])
    logger.debug(
        f"Published channel {channel.title!r}: "
        f"{len(channel.items)} items, {len(output)} bytes",
        extra={"channel": channel.title, "items": len(channel.items), "bytes": len(output)},
    )
    return output


def publish(channel: Channel) -> bytes:
    """Serialize a channel to an RSS 2.0 document without indentation.

    Args:
        channel: The populated channel

    Returns:
        UTF-8 encoded XML document

    Raises:
        SerializationError: If the channel holds data XML cannot represent
    """
    return _serialize(channel, indented=False)


def publish_indented(channel: Channel) -> bytes:
    """Serialize a channel to an indented RSS 2.0 document.

    The declaration, rss start tag, channel and rss end tag are each put on
    their own line; the channel is indented with the configured prefix and
    indent strings.

    Raises:
        SerializationError: If the channel holds data XML cannot represent
    """
    return _serialize(channel, indented=True)
