class GenericSubprocessError(Exception):
    """GenericSubprocessError Exception."""


class ConfigValidationError(Exception):
    """ConfigValidationError Exception."""


class PushAbortedError(Exception):
    """PushAbortedError Exception."""


class RepositoryNotFoundForSourceError(Exception):
    """Raised when no configured repository prefixes the source image."""

    def __init__(self, source: str):
        super().__init__(f"Could not find repository matching {source} source image")
        self.source = source


class RepositoryNotFoundForDestinationError(Exception):
    """Raised when no configured repository is named by the destination
    selector."""

    def __init__(self, destination: str):
        super().__init__(
            f"Could not find repository matching {destination} destination"
        )
        self.destination = destination


class EmptyDestinationError(Exception):
    """Raised when a literal destination selector names no image."""

    def __init__(self, destination: str):
        super().__init__(
            f'Literal destination {destination} is empty, expected "!<image>"'
        )
        self.destination = destination


class MissingImageReferenceError(Exception):
    """MissingImageReferenceError Exception."""
