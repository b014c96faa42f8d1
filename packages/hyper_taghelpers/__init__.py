"""Server-side tag helpers for Hyper.

Tag helpers are classes registered against an element name and the
attributes it carries. When the host renders a matching element, each helper
gets a chance to change its output.

Importing this package registers the built-in helpers (currently
DatalistTagHelper) in the default registry.
"""

# Escaping and building
from hyper_taghelpers.html import Markup, escape_html, render_attr, render_attrs
from hyper_taghelpers.content import HtmlContentBuilder
from hyper_taghelpers.builder import TagBuilder, TagRenderMode

# Host contract
from hyper_taghelpers.context import TagHelperContext, TagHelperOutput, TagMode
from hyper_taghelpers.registry import (
    ANY_ELEMENT,
    DEFAULT_ORDER,
    TagHelper,
    TagHelperRegistry,
    Target,
    default_registry,
    target,
)
from hyper_taghelpers.render import process_element, render_element
from hyper_taghelpers.errors import (
    InvalidArgumentError,
    RegistrationError,
    TagHelperError,
)

# Built-in helpers
from hyper_taghelpers.datalist import DatalistTagHelper, build_datalist_options

__all__ = [
    # Escaping
    'Markup',
    'escape_html',
    'render_attr',
    'render_attrs',
    # Building
    'HtmlContentBuilder',
    'TagBuilder',
    'TagRenderMode',
    # Host contract
    'TagHelperContext',
    'TagHelperOutput',
    'TagMode',
    'TagHelper',
    'TagHelperRegistry',
    'Target',
    'ANY_ELEMENT',
    'DEFAULT_ORDER',
    'default_registry',
    'target',
    'process_element',
    'render_element',
    # Errors
    'TagHelperError',
    'InvalidArgumentError',
    'RegistrationError',
    # Built-in helpers
    'DatalistTagHelper',
    'build_datalist_options',
]
