"""Exceptions raised while preparing a JMeter run."""


class LauncherError(Exception):
    """Base class for launcher errors."""


class UsageError(LauncherError):
    """Malformed or missing command-line input."""


class UnknownTestTypeError(UsageError):
    """Test type name is not in the catalog."""

    def __init__(self, test_type: str) -> None:
        """Initialize with the unrecognized test type name."""
        super().__init__(f"Unknown test name: {test_type}")
        self.test_type = test_type


class MissingResourceError(LauncherError):
    """A required file or executable is absent."""


class ConfigurationError(LauncherError):
    """Run configuration is inconsistent or unreadable."""
