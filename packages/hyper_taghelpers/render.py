"""Run registered tag helpers over an element and render the result."""

import logging
from typing import Any, Mapping

from markupsafe import Markup

from hyper_taghelpers.context import TagHelperContext, TagHelperOutput
from hyper_taghelpers.errors import InvalidArgumentError
from hyper_taghelpers.registry import TagHelperRegistry, default_registry

__all__ = ["process_element", "render_element"]

logger = logging.getLogger(__name__)


def process_element(
    tag_name: str,
    attributes: Mapping[str, Any] | None = None,
    content="",
    *,
    registry: TagHelperRegistry = default_registry,
) -> TagHelperOutput:
    """Run every matching helper over one element.

    Attributes bound to a helper are consumed: they stay visible in
    ``context.all_attributes`` but are not rendered. ``content`` is the
    element's existing inner markup and is inserted unescaped.

    Args:
        tag_name: Element name, e.g. "datalist".
        attributes: Attributes as written on the element.
        content: Inner markup already produced for the element.
        registry: Registry to resolve helpers from.

    Returns:
        The TagHelperOutput after all helpers ran.
    """
    if not tag_name:
        raise InvalidArgumentError("tag_name", "Tag name must be a non-empty string")

    attributes = dict(attributes or {})
    helpers = registry.resolve(tag_name, attributes)
    bound = {name.lower() for h in helpers for name in type(h).bindings}

    context = TagHelperContext(tag_name, attributes)
    output = TagHelperOutput(
        tag_name,
        {name: value for name, value in attributes.items() if name.lower() not in bound},
    )
    if content:
        output.content.append_html(content)

    for helper in helpers:
        helper.init(context)
    for helper in helpers:
        logger.debug("Running %s on <%s>", type(helper).__qualname__, tag_name)
        helper.process(context, output)

    return output


def render_element(
    tag_name: str,
    attributes: Mapping[str, Any] | None = None,
    content="",
    *,
    registry: TagHelperRegistry = default_registry,
) -> Markup:
    """Process an element and render it to markup.

    Example:
        >>> render_element("datalist", {"id": "colors", "asp-list": ["red", "blue"]})
        Markup('<datalist id="colors"><option value="red" />\\n<option value="blue" /></datalist>')
    """
    return process_element(tag_name, attributes, content, registry=registry).render()
