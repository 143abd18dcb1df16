"""Pydantic models for an RSS 2.0 podcast channel and its items.

The models mirror the structure of the published document: a Channel owns
its owners, images, atom links and items, and each Item owns its
enclosures. Optional scalars default to None; None and "" are both left
out of the published XML.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rsspod.config import get_settings
from rsspod.dates import format_date

DateInput = datetime | int | str

RSS_MEDIA_TYPE = "application/rss+xml"


class Owner(BaseModel):
    """Podcast owner contact, published as itunes:owner."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""


class Image(BaseModel):
    """Podcast artwork reference, published as itunes:image."""

    model_config = ConfigDict(frozen=True)

    href: str


class AtomLink(BaseModel):
    """Atom link to the feed itself, published as atom:link."""

    model_config = ConfigDict(frozen=True)

    href: str
    rel: str = "self"
    type: str = RSS_MEDIA_TYPE


class Enclosure(BaseModel):
    """Media attachment of an item."""

    model_config = ConfigDict(frozen=True)

    url: str
    length: str
    type: str


class Item(BaseModel):
    """A single episode or post within a channel."""

    model_config = ConfigDict(validate_assignment=True)

    # The URL of the item
    link: str
    # The item synopsis
    description: str

    title: str | None = None
    pub_date: str | None = None
    # Email address of the author of the item
    author: str | None = None
    guid: str | None = None
    # URL of a page for comments relating to the item
    comments: str | None = None
    # Dublin Core creator
    creator: str | None = None
    itunes_author: str | None = None
    itunes_subtitle: str | None = None
    itunes_summary: str | None = None
    itunes_explicit: str | None = None
    itunes_duration: str | None = None

    enclosures: list[Enclosure] = Field(default_factory=list)

    def set_pub_date(self, value: DateInput) -> "Item":
        """Set when the item was published.

        Args:
            value: A datetime, Unix timestamp in seconds, or a preformatted
                string

        Raises:
            InvalidDateError: If value is of any other type
        """
        self.pub_date = format_date(value, "Item.set_pub_date")
        return self

    def set_title(self, title: str) -> "Item":
        self.title = title
        return self

    def set_author(self, author: str) -> "Item":
        self.author = author
        return self

    def set_guid(self, guid: str) -> "Item":
        self.guid = guid
        return self

    def set_comments(self, comments: str) -> "Item":
        self.comments = comments
        return self

    def set_creator(self, creator: str) -> "Item":
        self.creator = creator
        return self

    def set_itunes_author(self, author: str) -> "Item":
        self.itunes_author = author
        return self

    def set_itunes_subtitle(self, subtitle: str) -> "Item":
        self.itunes_subtitle = subtitle
        return self

    def set_itunes_summary(self, summary: str) -> "Item":
        self.itunes_summary = summary
        return self

    def set_itunes_explicit(self, explicit: str) -> "Item":
        self.itunes_explicit = explicit
        return self

    def set_itunes_duration(self, duration: str) -> "Item":
        self.itunes_duration = duration
        return self

    def add_enclosure(self, url: str, length: str, type: str) -> "Item":
        """Attach a media file. Repeated calls keep call order."""
        self.enclosures.append(Enclosure(url=url, length=length, type=type))
        return self


class Channel(BaseModel):
    """The root of a feed: channel metadata plus its ordered items."""

    model_config = ConfigDict(validate_assignment=True)

    # The name of the channel, usually the same as the website title
    title: str
    # The URL to the HTML website corresponding to the channel
    link: str
    # Phrase or sentence describing the channel
    description: str

    language: str | None = None
    copyright: str | None = None
    managing_editor: str | None = None
    web_master: str | None = None
    pub_date: str | None = None
    last_build_date: str | None = None
    category: str | None = None
    generator: str | None = None
    docs: str | None = None
    # Minutes the channel may be cached before refreshing
    ttl: str | None = None
    skip_hours: str | None = None
    skip_days: str | None = None
    itunes_author: str | None = None
    itunes_subtitle: str | None = None
    itunes_summary: str | None = None
    itunes_explicit: str | None = None

    owners: list[Owner] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    atom_links: list[AtomLink] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)

    @classmethod
    def create(
        cls, title: str, link: str, description: str, image_href: str
    ) -> "Channel":
        """Create a channel with its self link, image and default generator.

        Args:
            title: Name of the channel
            link: URL of the website the channel corresponds to
            description: Phrase or sentence describing the channel
            image_href: URL of the podcast artwork

        Returns:
            A new Channel with no items
        """
        channel = cls(
            title=title,
            link=link,
            description=description,
            generator=get_settings().generator,
        )
        channel.add_image(image_href)
        channel.add_atom_link(link)
        return channel

    # Scalar setters

    def set_language(self, language: str) -> "Channel":
        """Set the language the channel is written in, e.g. "en-us"."""
        self.language = language
        return self

    def set_copyright(self, copyright: str) -> "Channel":
        self.copyright = copyright
        return self

    def set_managing_editor(self, managing_editor: str) -> "Channel":
        """Set the email address of the person responsible for content."""
        self.managing_editor = managing_editor
        return self

    def set_web_master(self, web_master: str) -> "Channel":
        """Set the email address of the person responsible for technical issues."""
        self.web_master = web_master
        return self

    def set_category(self, category: str) -> "Channel":
        self.category = category
        return self

    def set_generator(self, generator: str) -> "Channel":
        self.generator = generator
        return self

    def set_docs(self, docs: str) -> "Channel":
        """Set the URL of the documentation for the RSS format."""
        self.docs = docs
        return self

    def set_ttl(self, ttl: str) -> "Channel":
        self.ttl = ttl
        return self

    def set_skip_hours(self, skip_hours: str) -> "Channel":
        self.skip_hours = skip_hours
        return self

    def set_skip_days(self, skip_days: str) -> "Channel":
        self.skip_days = skip_days
        return self

    def set_itunes_explicit(self, explicit: str) -> "Channel":
        self.itunes_explicit = explicit
        return self

    def set_itunes_author(self, author: str) -> "Channel":
        self.itunes_author = author
        return self

    def set_itunes_subtitle(self, subtitle: str) -> "Channel":
        self.itunes_subtitle = subtitle
        return self

    def set_itunes_summary(self, summary: str) -> "Channel":
        self.itunes_summary = summary
        return self

    # Dates

    def set_pub_date(self, value: DateInput) -> "Channel":
        """Set the publication date for the content in the channel.

        Args:
            value: A datetime, Unix timestamp in seconds, or a preformatted
                string

        Raises:
            InvalidDateError: If value is of any other type
        """
        self.pub_date = format_date(value, "Channel.set_pub_date")
        return self

    def set_last_build_date(self, value: DateInput) -> "Channel":
        """Set the last time the content of the channel changed.

        Accepts the same shapes as set_pub_date.
        """
        self.last_build_date = format_date(value, "Channel.set_last_build_date")
        return self

    # Collections

    def add_owner(self, name: str, email: str) -> "Channel":
        """Append an itunes:owner. More than one owner is allowed."""
        self.owners.append(Owner(name=name, email=email))
        return self

    def add_image(self, href: str) -> "Channel":
        self.images.append(Image(href=href))
        return self

    def add_atom_link(
        self, href: str, rel: str = "self", type: str = RSS_MEDIA_TYPE
    ) -> "Channel":
        self.atom_links.append(AtomLink(href=href, rel=rel, type=type))
        return self

    def add_item(self, item: Item) -> "Channel":
        """Append an item. Insertion order is publication order.

        Raises:
            TypeError: If item is not an Item
        """
        if not isinstance(item, Item):
            raise TypeError(f"expected Item, got {type(item).__name__}")
        self.items.append(item)
        return self

    # Output

    def publish(self) -> bytes:
        """Serialize the channel without indentation."""
        # Imported here: rsspod.publisher imports this module
        from rsspod.publisher import publish

        return publish(self)

    def publish_indented(self) -> bytes:
        """Serialize the channel with indentation."""
        # Imported here: rsspod.publisher imports this module
        from rsspod.publisher import publish_indented

        return publish_indented(self)


def create_channel(title: str, link: str, description: str, image_href: str) -> Channel:
    """Create the base channel of a feed. See Channel.create."""
    return Channel.create(title, link, description, image_href)
