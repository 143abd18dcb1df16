"""Field-to-markup mapping table.

Each model is described by an ElementSpec: the tag it is written as and an
ordered list of FieldSpecs. Field order in the table is element order in
the output.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from rsspod.models import AtomLink, Channel, Enclosure, Image, Item, Owner

ATOM_NS = "http://www.w3.org/2005/Atom"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
DC_NS = "http://purl.org/dc/elements/1.1/"
ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"

# Declared on the rss root whether or not any extension field is used
NAMESPACES = {
    "atom": ATOM_NS,
    "content": CONTENT_NS,
    "dc": DC_NS,
    "itunes": ITUNES_NS,
}


class FieldKind(str, Enum):
    """How a model field is written."""

    ELEMENT = "element"
    ATTRIBUTE = "attribute"
    CHILDREN = "children"


class FieldSpec(BaseModel):
    """Mapping of one model field to markup."""

    model_config = ConfigDict(frozen=True)

    attr: str
    # Unprefixed for core RSS, "prefix:local" for extension namespaces
    name: str = ""
    kind: FieldKind = FieldKind.ELEMENT
    omit_empty: bool = True


class ElementSpec(BaseModel):
    """Mapping of one model to an element."""

    model_config = ConfigDict(frozen=True)

    tag: str
    field_specs: tuple[FieldSpec, ...]


def _required(attr: str, name: str) -> FieldSpec:
    return FieldSpec(attr=attr, name=name, omit_empty=False)


def _optional(attr: str, name: str) -> FieldSpec:
    return FieldSpec(attr=attr, name=name)


def _attribute(attr: str, name: str) -> FieldSpec:
    return FieldSpec(attr=attr, name=name, kind=FieldKind.ATTRIBUTE, omit_empty=False)


def _children(attr: str) -> FieldSpec:
    return FieldSpec(attr=attr, kind=FieldKind.CHILDREN)


OWNER = ElementSpec(
    tag="itunes:owner",
    field_specs=(
        _optional("name", "itunes:name"),
        _optional("email", "itunes:email"),
    ),
)

IMAGE = ElementSpec(tag="itunes:image", field_specs=(_attribute("href", "href"),))

ATOM_LINK = ElementSpec(
    tag="atom:link",
    field_specs=(
        _attribute("href", "href"),
        _attribute("rel", "rel"),
        _attribute("type", "type"),
    ),
)

ENCLOSURE = ElementSpec(
    tag="enclosure",
    field_specs=(
        _attribute("url", "url"),
        _attribute("length", "length"),
        _attribute("type", "type"),
    ),
)

ITEM = ElementSpec(
    tag="item",
    field_specs=(
        _required("link", "link"),
        _required("description", "description"),
        _optional("title", "title"),
        _optional("pub_date", "pubDate"),
        _optional("author", "author"),
        _optional("guid", "guid"),
        _optional("comments", "comments"),
        _optional("creator", "dc:creator"),
        _optional("itunes_author", "itunes:author"),
        _optional("itunes_subtitle", "itunes:subtitle"),
        _optional("itunes_summary", "itunes:summary"),
        _optional("itunes_explicit", "itunes:explicit"),
        _optional("itunes_duration", "itunes:duration"),
        _children("enclosures"),
    ),
)

CHANNEL = ElementSpec(
    tag="channel",
    field_specs=(
        _required("title", "title"),
        _required("link", "link"),
        _required("description", "description"),
        _optional("language", "language"),
        _optional("copyright", "copyright"),
        _optional("managing_editor", "managingEditor"),
        _optional("web_master", "webMaster"),
        _optional("pub_date", "pubDate"),
        _optional("last_build_date", "lastBuildDate"),
        _optional("category", "category"),
        _optional("generator", "generator"),
        _optional("docs", "docs"),
        _optional("ttl", "ttl"),
        _optional("skip_hours", "skiphours"),
        _optional("skip_days", "skipdays"),
        _optional("itunes_author", "itunes:author"),
        _optional("itunes_subtitle", "itunes:subtitle"),
        _optional("itunes_summary", "itunes:summary"),
        _optional("itunes_explicit", "itunes:explicit"),
        _children("owners"),
        _children("images"),
        _children("atom_links"),
        _children("items"),
    ),
)

SCHEMAS: dict[type[BaseModel], ElementSpec] = {
    Channel: CHANNEL,
    Item: ITEM,
    Owner: OWNER,
    Image: IMAGE,
    AtomLink: ATOM_LINK,
    Enclosure: ENCLOSURE,
}


def spec_for(model_type: type) -> ElementSpec | None:
    """Find the mapping for a model class, falling back to its base classes.

    Subclasses of the feed models publish with their base class mapping;
    fields they add are not written.
    """
    for cls in model_type.__mro__:
        if cls in SCHEMAS:
            return SCHEMAS[cls]
    return None
