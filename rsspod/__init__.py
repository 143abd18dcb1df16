"""rsspod - build RSS 2.0 podcast feeds and publish them as XML."""

from .dates import format_date
from .errors import FeedError, InvalidDateError, SerializationError
from .models import (
    AtomLink,
    Channel,
    Enclosure,
    Image,
    Item,
    Owner,
    create_channel,
)
from .publisher import publish, publish_indented

__all__ = [
    "AtomLink",
    "Channel",
    "Enclosure",
    "FeedError",
    "Image",
    "InvalidDateError",
    "Item",
    "Owner",
    "SerializationError",
    "create_channel",
    "format_date",
    "publish",
    "publish_indented",
]
