"""Exception hierarchy for bmrot."""


class BmrotError(Exception):
    """Base exception for all bmrot errors."""

    pass


class ParseError(BmrotError):
    """Errors raised while parsing a font descriptor."""

    pass


class SourceUnavailableError(ParseError):
    """The descriptor source could not be opened, read or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read descriptor '{source}': {reason}")


class MalformedValueError(ParseError):
    """An attribute value could not be decoded."""

    def __init__(
        self,
        source: str,
        line_number: int,
        tag: str,
        key: str,
        value: str,
        reason: str,
    ) -> None:
        self.source = source
        self.line_number = line_number
        self.tag = tag
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"{source}:{line_number}: malformed value for '{tag} {key}' "
            f"({value!r}): {reason}"
        )


class DescriptorWriteError(BmrotError):
    """Error writing a rendered descriptor."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write descriptor '{path}': {reason}")
