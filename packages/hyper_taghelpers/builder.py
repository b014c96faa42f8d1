"""Tag builder for generating single HTML elements."""

from enum import Enum

from markupsafe import Markup

from hyper_taghelpers.content import HtmlContentBuilder
from hyper_taghelpers.errors import InvalidArgumentError
from hyper_taghelpers.html import render_attrs

__all__ = ["TagBuilder", "TagRenderMode"]


class TagRenderMode(Enum):
    """How a TagBuilder renders its element."""

    NORMAL = "normal"              # <tag ...>inner</tag>
    START_TAG = "start_tag"        # <tag ...>
    END_TAG = "end_tag"            # </tag>
    SELF_CLOSING = "self_closing"  # <tag ... />


class TagBuilder:
    """Describes one HTML element and renders it.

    Example:
        >>> option = TagBuilder("option", render_mode=TagRenderMode.SELF_CLOSING)
        >>> option.attributes["value"] = "red"
        >>> option.render()
        Markup('<option value="red" />')
    """

    def __init__(self, tag_name: str, *, render_mode: TagRenderMode = TagRenderMode.NORMAL):
        if not tag_name:
            raise InvalidArgumentError("tag_name", "Tag name must be a non-empty string")
        self.tag_name = tag_name
        self.attributes: dict[str, object] = {}
        self.inner_html = HtmlContentBuilder()
        self.render_mode = render_mode

    @property
    def has_inner_html(self) -> bool:
        return not self.inner_html.is_empty

    def render_start_tag(self) -> Markup:
        return Markup(f"<{self.tag_name}{render_attrs(self.attributes)}>")

    def render_end_tag(self) -> Markup:
        return Markup(f"</{self.tag_name}>")

    def render_self_closing_tag(self) -> Markup:
        return Markup(f"<{self.tag_name}{render_attrs(self.attributes)} />")

    def render(self) -> Markup:
        match self.render_mode:
            case TagRenderMode.START_TAG:
                return self.render_start_tag()
            case TagRenderMode.END_TAG:
                return self.render_end_tag()
            case TagRenderMode.SELF_CLOSING:
                return self.render_self_closing_tag()
            case _:
                return self.render_start_tag() + self.inner_html.render() + self.render_end_tag()

    def __html__(self):
        return self.render()

    def __str__(self):
        return str(self.render())

    def __repr__(self):
        return f"TagBuilder({self.tag_name!r}, render_mode={self.render_mode})"
