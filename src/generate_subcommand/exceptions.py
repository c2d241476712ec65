"""Custom exception classes for generate-subcommand."""


class SubcommandGeneratorError(Exception):
    """Base exception for all generate-subcommand errors."""
    pass


class ConfigurationError(SubcommandGeneratorError):
    """Raised for invalid flag values or configuration files."""
    pass


class InputClosedError(SubcommandGeneratorError):
    """Raised when standard input ends before a required answer was given."""
    pass


class RenderError(SubcommandGeneratorError):
    """Raised when the subcommand template fails to render."""
    pass


class FileOperationError(SubcommandGeneratorError):
    """Raised for file reading or writing errors."""
    pass


class GenerationCancelled(Exception):
    """Raised when the user declines to overwrite an existing output file."""

    def __init__(self, path):
        super().__init__(f"Not overwriting {path}")
        self.path = path
