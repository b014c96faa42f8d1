"""Ordered HTML content accumulation.

HtmlContentBuilder collects markup parts and renders them joined. Text
appended with append() is escaped; markup appended with append_html() is
kept as-is.
"""

from markupsafe import Markup

from hyper_taghelpers.html import escape_html

__all__ = ["HtmlContentBuilder", "NEWLINE"]

NEWLINE = "\n"


class HtmlContentBuilder:
    """Mutable, ordered buffer of HTML markup.

    Example:
        >>> builder = HtmlContentBuilder()
        >>> _ = builder.append("a < b").append_html("<br />")
        >>> str(builder)
        'a &lt; b<br />'
    """

    __slots__ = ("_parts", "_modified")

    def __init__(self, *items):
        self._parts: list[str] = [escape_html(item) for item in items]
        self._modified = False

    def append(self, text) -> "HtmlContentBuilder":
        """Append text, escaping it."""
        self._modified = True
        self._parts.append(escape_html(text))
        return self

    def append_html(self, markup) -> "HtmlContentBuilder":
        """Append markup without escaping. None appends nothing."""
        if markup is None:
            return self
        self._modified = True
        if hasattr(markup, "__html__"):
            markup = markup.__html__()
        self._parts.append(str(markup))
        return self

    def append_line(self, item=None) -> "HtmlContentBuilder":
        """Append an item followed by a newline.

        Items with an __html__ method are appended as markup, anything else
        is escaped.
        """
        if item is not None:
            self.append(item)
        return self.append_html(NEWLINE)

    def set_content(self, text) -> "HtmlContentBuilder":
        """Replace all content with escaped text."""
        self._parts.clear()
        return self.append(text)

    def set_html_content(self, markup) -> "HtmlContentBuilder":
        """Replace all content with raw markup."""
        self._parts.clear()
        return self.append_html(markup)

    def clear(self) -> "HtmlContentBuilder":
        self._modified = True
        self._parts.clear()
        return self

    @property
    def is_empty(self) -> bool:
        return not any(self._parts)

    @property
    def is_modified(self) -> bool:
        return self._modified

    def render(self) -> Markup:
        return Markup("".join(self._parts))

    def __html__(self):
        return self.render()

    def __str__(self):
        return str(self.render())

    def __len__(self):
        return len(self._parts)

    def __repr__(self):
        return f"HtmlContentBuilder({self.render()!r})"
