"""Exceptions raised while building the manifest."""


class ManifestError(Exception):
    """Raised when a manifest entry cannot be built."""

    def __init__(self, message: str = "Unable to build the manifest."):
        """Initialize the ManifestError with a custom message.

        Args:
            message: The error message to display.
        """
        super().__init__(message)
        self.message = message


class ModuleResolutionError(ManifestError):
    """Raised when no Go module encloses a directory."""


class ConfigError(Exception):
    """Raised when the post-processor configuration is malformed."""

    def __init__(self, message: str = "Invalid configuration."):
        """Initialize the ConfigError with a custom message.

        Args:
            message: The error message to display.
        """
        super().__init__(message)
        self.message = message
