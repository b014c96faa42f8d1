"""Processing context and output accumulator handed to tag helpers."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from markupsafe import Markup

from hyper_taghelpers.content import HtmlContentBuilder
from hyper_taghelpers.html import render_attrs

__all__ = ["TagHelperContext", "TagHelperOutput", "TagMode"]


class TagMode(Enum):
    START_TAG_AND_END_TAG = "start_tag_and_end_tag"
    SELF_CLOSING = "self_closing"
    START_TAG_ONLY = "start_tag_only"


@dataclass(frozen=True)
class TagHelperContext:
    """Read-only information about the element being processed.

    ``items`` is the one mutable piece: helpers running on the same element
    use it to pass data to each other.
    """

    tag_name: str
    all_attributes: Mapping[str, Any] = field(default_factory=dict)
    items: dict = field(default_factory=dict)
    unique_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        object.__setattr__(self, "all_attributes", MappingProxyType(dict(self.all_attributes)))


class TagHelperOutput:
    """Mutable rendered output of one element.

    Rendering order:
        pre_element <tag attrs> pre_content content post_content </tag> post_element

    Setting ``tag_name`` to None drops the start and end tags but keeps
    every content slot.
    """

    def __init__(
        self,
        tag_name: str | None,
        attributes: Mapping[str, Any] | None = None,
        *,
        tag_mode: TagMode = TagMode.START_TAG_AND_END_TAG,
    ):
        self.tag_name = tag_name
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.tag_mode = tag_mode
        self.pre_element = HtmlContentBuilder()
        self.pre_content = HtmlContentBuilder()
        self.content = HtmlContentBuilder()
        self.post_content = HtmlContentBuilder()
        self.post_element = HtmlContentBuilder()

    @property
    def is_content_modified(self) -> bool:
        return self.content.is_modified

    def suppress_output(self):
        """Render nothing at all for this element."""
        self.tag_name = None
        self.pre_element.clear()
        self.pre_content.clear()
        self.content.clear()
        self.post_content.clear()
        self.post_element.clear()

    def render(self) -> Markup:
        parts = [self.pre_element.render()]

        if self.tag_name:
            attrs = render_attrs(self.attributes)
            if self.tag_mode is TagMode.SELF_CLOSING:
                parts.append(Markup(f"<{self.tag_name}{attrs} />"))
                parts.append(self.post_element.render())
                return Markup("").join(parts)
            parts.append(Markup(f"<{self.tag_name}{attrs}>"))

        parts.append(self.pre_content.render())
        parts.append(self.content.render())
        parts.append(self.post_content.render())

        if self.tag_name and self.tag_mode is TagMode.START_TAG_AND_END_TAG:
            parts.append(Markup(f"</{self.tag_name}>"))

        parts.append(self.post_element.render())
        return Markup("").join(parts)

    def __html__(self):
        return self.render()

    def __str__(self):
        return str(self.render())
