"""Exceptions raised by the estimation core and its configuration layer."""


class CocomoError(Exception):
    """Base class for configuration errors reported before estimation runs."""

    pass


class MalformedCoefficients(CocomoError, ValueError):
    """Custom coefficient text is not the expected count of real numbers."""

    def __init__(self, text: str, arity: int, reason: str = ""):
        self.text = text
        self.arity = arity
        message = f"Invalid custom project parameters: {text!r} (expected {arity} numbers)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownProjectType(CocomoError, ValueError):
    """A project type name has no catalog entry."""

    def __init__(self, name: str, choices: list[str]):
        self.name = name
        self.choices = choices
        super().__init__(
            f"Invalid project type: {name!r}. Available: {', '.join(choices)}"
        )


class ConfigError(CocomoError):
    """Config file could not be read or holds invalid settings."""

    pass
