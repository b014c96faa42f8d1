"""HTML escaping and attribute rendering helpers.

These functions are used by tag builders and helpers to safely render HTML.
"""

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'escape_html',
    'render_attr',
    'render_attrs',
]


def escape_html(value) -> Markup:
    """Escape a value for safe HTML output.

    Replaces HTML special characters with their entity equivalents:
    - & → &amp;
    - < → &lt;
    - > → &gt;
    - " → &#34;
    - ' → &#39;

    If the value has an __html__ method (like Markup), returns that directly
    without escaping.

    Args:
        value: The value to escape. Can be any type.

    Returns:
        Escaped Markup string.

    Example:
        >>> escape_html("<script>alert('XSS')</script>")
        Markup('&lt;script&gt;alert(&#39;XSS&#39;)&lt;/script&gt;')
        >>> escape_html(Markup("<b>bold</b>"))
        Markup('<b>bold</b>')
        >>> escape_html(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    return escape(value)


def render_attr(name: str, value) -> str:
    """Render one attribute with a leading space.

    Booleans toggle a bare attribute, None drops it. Pass str(value) when a
    literal "True"/"False" is wanted.
    """
    match value:
        case None | False:
            return ''
        case True:
            return f' {name}'
        case _:
            return f' {name}="{escape_html(value)}"'


def render_attrs(attrs) -> str:
    """Render a mapping as HTML attributes, in insertion order.

    Example:
        >>> render_attrs({"class": "btn", "id": "submit", "disabled": True})
        ' class="btn" id="submit" disabled'
        >>> render_attrs({})
        ''
    """
    if not attrs:
        return ''
    return ''.join(render_attr(k, v) for k, v in attrs.items())
