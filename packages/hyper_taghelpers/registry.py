"""Explicit registration of tag helpers.

A registry maps element names plus required attribute names to TagHelper
classes. The host resolves it at render time:

    registry = TagHelperRegistry()

    @registry.target("datalist", attributes=["asp-list"])
    class DatalistTagHelper(TagHelper):
        order = -1000
        bindings = {"asp-list": "values"}

        def process(self, context, output):
            ...

    helpers = registry.resolve("datalist", {"asp-list": ["a", "b"]})

Names are matched case-insensitively. The element "*" matches any element.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from hyper_taghelpers.errors import RegistrationError

__all__ = [
    "ANY_ELEMENT",
    "DEFAULT_ORDER",
    "TagHelper",
    "TagHelperRegistry",
    "Target",
    "default_registry",
    "target",
]

logger = logging.getLogger(__name__)

ANY_ELEMENT = "*"
DEFAULT_ORDER = 0


class TagHelper:
    """Base class for tag helpers.

    Subclasses override process() to change a TagHelperOutput. Helpers
    with a lower ``order`` run first. ``bindings`` maps HTML attribute names
    to instance attribute names; the registry copies matching attribute
    values onto each new instance before it runs.
    """

    order: int = DEFAULT_ORDER
    bindings: Mapping[str, str] = MappingProxyType({})

    def init(self, context):
        """Called on every helper of an element before any process() runs."""

    def process(self, context, output):
        """Update ``output`` for the element described by ``context``."""


@dataclass(frozen=True)
class Target:
    element: str
    attributes: tuple[str, ...] = ()

    def matches(self, tag_name: str, attribute_names) -> bool:
        if self.element != ANY_ELEMENT and self.element != tag_name:
            return False
        return all(name in attribute_names for name in self.attributes)


def _normalize(element: str, attributes: Iterable[str]) -> Target:
    if isinstance(attributes, str):
        attributes = (attributes,)
    return Target(element.strip().lower(), tuple(a.strip().lower() for a in attributes))


class TagHelperRegistry:
    """Mapping of targets (element + attributes) to helper classes."""

    def __init__(self):
        self._targets: list[tuple[Target, type[TagHelper]]] = []

    def register(self, helper_cls: type[TagHelper], element: str, attributes: Iterable[str] = ()):
        """Register ``helper_cls`` for ``element`` carrying all ``attributes``."""
        if not isinstance(helper_cls, type) or not issubclass(helper_cls, TagHelper):
            raise RegistrationError(
                "Only TagHelper subclasses can be registered",
                tag_name=element or None,
            )
        if not element or not element.strip():
            raise RegistrationError("Target element must be a non-empty string", helper=helper_cls)

        entry = (_normalize(element, attributes), helper_cls)
        if entry in self._targets:
            raise RegistrationError(
                "Target is already registered for this helper",
                helper=helper_cls,
                tag_name=entry[0].element,
                attributes=entry[0].attributes,
            )

        self._targets.append(entry)
        logger.debug(
            "Registered %s for <%s> %s",
            helper_cls.__qualname__, entry[0].element, list(entry[0].attributes),
        )
        return helper_cls

    def target(self, element: str, attributes: Iterable[str] = ()):
        """Decorator form of register()."""
        def decorator(helper_cls):
            return self.register(helper_cls, element, attributes)
        return decorator

    def helpers_for(self, tag_name: str, attributes: Mapping[str, Any] | None = None) -> list[type[TagHelper]]:
        """Helper classes matching an element, once each, in registration order."""
        tag_name = tag_name.lower()
        attribute_names = {name.lower() for name in (attributes or {})}

        matched = []
        for target_, helper_cls in self._targets:
            if helper_cls not in matched and target_.matches(tag_name, attribute_names):
                matched.append(helper_cls)
        return matched

    def resolve(self, tag_name: str, attributes: Mapping[str, Any] | None = None) -> list[TagHelper]:
        """Instantiate and bind the helpers for an element, sorted by order."""
        attributes = attributes or {}
        by_name = {name.lower(): value for name, value in attributes.items()}

        helpers = []
        for helper_cls in self.helpers_for(tag_name, attributes):
            helper = helper_cls()
            for html_name, attr_name in helper_cls.bindings.items():
                if html_name.lower() in by_name:
                    setattr(helper, attr_name, by_name[html_name.lower()])
            helpers.append(helper)

        helpers.sort(key=lambda h: h.order)
        logger.debug(
            "Resolved %d helper(s) for <%s>: %s",
            len(helpers), tag_name, [type(h).__qualname__ for h in helpers],
        )
        return helpers

    def __len__(self):
        return len(self._targets)

    def __iter__(self):
        return iter(self._targets)


default_registry = TagHelperRegistry()


def target(element: str, attributes: Iterable[str] = ()):
    """Register a helper class in the default registry."""
    return default_registry.target(element, attributes)
