"""Tag helper exceptions with contextual error messages."""


class TagHelperError(Exception):
    """Base exception for all tag helper errors."""

    def __init__(self, message: str, tag_name: str | None = None):
        self.tag_name = tag_name
        super().__init__(f"{message}\n\n  Element: <{tag_name}>" if tag_name else message)


class InvalidArgumentError(TagHelperError, ValueError):
    """A required argument was missing or unusable."""

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        tag_name: str | None = None,
    ):
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None", tag_name)


class RegistrationError(TagHelperError):
    """Error while registering a tag helper target."""

    def __init__(
        self,
        message: str,
        helper: type | None = None,
        tag_name: str | None = None,
        attributes: tuple[str, ...] = (),
    ):
        self.helper = helper
        self.attributes = attributes

        full_message = message
        if helper is not None:
            full_message += f"\n\n  Helper: {helper.__qualname__}"
        if tag_name:
            full_message += f"\n  Element: <{tag_name}>"
        if attributes:
            full_message += f"\n  Attributes: {', '.join(attributes)}"

        Exception.__init__(self, full_message)
        self.tag_name = tag_name
