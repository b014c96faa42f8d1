"""Populate <datalist> elements with <option> children.

    render_element("datalist", {"id": "colors", "asp-list": ["red", "green"]})
    # <datalist id="colors"><option value="red" />
    # <option value="green" /></datalist>
"""

import logging
from typing import Iterable

from markupsafe import Markup

from hyper_taghelpers.builder import TagBuilder, TagRenderMode
from hyper_taghelpers.content import NEWLINE
from hyper_taghelpers.errors import InvalidArgumentError
from hyper_taghelpers.registry import TagHelper, target

__all__ = ["DatalistTagHelper", "LIST_ATTRIBUTE_NAME", "build_datalist_options"]

logger = logging.getLogger(__name__)

LIST_ATTRIBUTE_NAME = "asp-list"


def build_datalist_options(values: Iterable[str] | None, *, separator: str = NEWLINE) -> Markup | None:
    """Build one self-closing <option> per value.

    Values keep their order; duplicates and empty strings are kept. Every
    value is converted to a plain string and escaped, so Markup values are
    escaped too. A value of None renders as an empty ``value`` attribute.

    Args:
        values: Option values, or None.
        separator: Markup placed between consecutive options.

    Returns:
        The options as markup, or None when ``values`` is None or empty.

    Example:
        >>> build_datalist_options(["red", "a&b"])
        Markup('<option value="red" />\\n<option value="a&amp;b" />')
        >>> build_datalist_options([]) is None
        True
    """
    if values is None:
        return None
    if isinstance(values, str):
        values = [values]

    options = []
    for value in values:
        option = TagBuilder("option", render_mode=TagRenderMode.SELF_CLOSING)
        option.attributes["value"] = "" if value is None else str(value)
        options.append(option.render())

    if not options:
        return None
    logger.debug("Built %d datalist option(s)", len(options))
    return Markup(separator).join(options)


@target("datalist", attributes=[LIST_ATTRIBUTE_NAME])
class DatalistTagHelper(TagHelper):
    """Appends <option> elements for the values bound from ``asp-list``.

    Runs before default-order helpers so they see the generated options.
    Does nothing when the list is None or empty.
    """

    order = -1000
    bindings = {LIST_ATTRIBUTE_NAME: "values"}

    def __init__(self, values: Iterable[str] | None = None):
        self.values = values

    def process(self, context, output):
        if context is None:
            raise InvalidArgumentError("context")
        if output is None:
            raise InvalidArgumentError("output")

        options = build_datalist_options(self.values)
        if options is None:
            return

        logger.debug("Appending options to <%s>", context.tag_name)
        output.post_content.append_html(options)
