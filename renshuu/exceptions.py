"""Custom Exception Hierarchy

Exception hierarchy for renshuu, separating bad input, font problems and
rendering failures so callers can tell an unreadable file from a malformed font.
"""


class RenshuuError(Exception):
    """Base exception for all renshuu errors.

    Catching this exception will catch all custom exceptions from the package.
    """
    pass


# Validation Errors
class ValidationError(RenshuuError):
    """Raised when input validation fails."""
    pass


class InvalidFileError(ValidationError):
    """Raised when file validation fails (doesn't exist, wrong extension, etc.)."""
    pass


class FileSizeLimitExceededError(ValidationError):
    """Raised when a font file exceeds the size limit."""

    def __init__(self, file_size: float, max_size: float):
        self.file_size = file_size
        self.max_size = max_size
        super().__init__(
            f"File size {file_size:.1f} MB exceeds maximum allowed size {max_size:.1f} MB"
        )


class InvalidConfigurationError(ValidationError):
    """Raised when configuration parameters (e.g. a paper profile) are invalid."""
    pass


# Font Errors
class FontError(RenshuuError):
    """Base class for font loading and registration errors."""
    pass


class FontReadError(FontError):
    """Raised when the font file cannot be read."""

    def __init__(self, font_path: str, reason: str):
        self.font_path = font_path
        super().__init__(f"Failed to read font file '{font_path}': {reason}")


class FontParseError(FontError):
    """Raised when the font file is not a parseable font."""

    def __init__(self, source_name: str, reason: str):
        self.source_name = source_name
        super().__init__(f"Failed to parse font '{source_name}': {reason}")


class UnsupportedFontError(FontError):
    """Raised when the renderer cannot embed the font (e.g. CFF outlines)."""

    def __init__(self, source_name: str, reason: str):
        self.source_name = source_name
        super().__init__(f"Font '{source_name}' cannot be embedded: {reason}")


# Rendering Errors
class RenderingError(RenshuuError):
    """Raised when the document cannot be written."""
    pass


# Pipeline Errors
class PipelineError(RenshuuError):
    """Base class for pipeline orchestration errors."""
    pass


class PipelineStepError(PipelineError):
    """Raised when a specific pipeline step fails.

    This wraps the underlying exception while preserving the pipeline context.
    """

    def __init__(self, step_name: str, original_exception: Exception):
        self.step_name = step_name
        self.original_exception = original_exception
        super().__init__(
            f"Pipeline step '{step_name}' failed: {str(original_exception)}"
        )
