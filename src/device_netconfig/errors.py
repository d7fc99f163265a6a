"""Error kinds and error collection for device-netconfig.

The exception classes are the validation failures raised by the value types
(masks, subnets, addresses). They all derive from ``ValueError`` so pydantic
validators can raise them directly.

The collector lets a settings document be decoded section by section, keeping
valid sections even when others fail, and reporting every problem at the end.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class NetworkConfigError(ValueError):
    """Base class for all network configuration validation failures.

    Attributes:
        value: The rejected input
    """

    default_message = "Invalid network configuration"

    def __init__(self, value: object = None, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or self.default_message)


class InvalidFormatError(NetworkConfigError):
    """Mask text is not a well-formed unsigned integer."""

    default_message = "Invalid subnet mask"


class OutOfRangeError(NetworkConfigError):
    """Mask integer is outside [1, 32]."""

    default_message = "Mask should be a number between 1 and 32"


class InvalidAddressFormatError(NetworkConfigError):
    """Text is not a dotted-quad IPv4 address."""

    default_message = "Invalid ip address format, expected XXX.XXX.XXX.XXX"


class InvalidSubnetFormatError(NetworkConfigError):
    """Text does not have the ``<address>/<mask>`` shape."""

    default_message = "Expected <gateway-ip-address>/<mask>"


class NotAValidMaskError(NetworkConfigError):
    """Dotted-quad address is not a contiguous prefix mask."""

    default_message = "Not a valid mask"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    WARNING = "warning"  # Section kept, document still usable
    ERROR = "error"  # Section replaced by its default


@dataclass
class SectionError:
    """A problem with one section of a settings document.

    Attributes:
        section: Document section where the problem occurred (e.g., "router")
        message: Human-readable error message
        exception: The original exception that caused the error (if any)
        severity: Error severity level
    """

    section: str
    message: str
    exception: Exception | None = None
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __str__(self) -> str:
        """Format error for logging."""
        if self.exception:
            return f"[{self.section}] {self.message}: {self.exception}"
        return f"[{self.section}] {self.message}"


class ErrorCollector:
    """Collects decoding errors for batch reporting."""

    def __init__(self) -> None:
        self.errors: list[SectionError] = []

    def add_error(
        self,
        section: str,
        message: str,
        exception: Exception | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> None:
        """Add an error to the collection and log it.

        Args:
            section: Document section where the error occurred
            message: Human-readable error message
            exception: Original exception that caused the error
            severity: Error severity level
        """
        error = SectionError(
            section=section,
            message=message,
            exception=exception,
            severity=severity,
        )
        self.errors.append(error)

        if severity == ErrorSeverity.WARNING:
            logger.warning("%s", error)
        else:
            logger.error("%s", error)

    def has_errors(self) -> bool:
        """Return True if any section had to fall back to its default."""
        return self.count(ErrorSeverity.ERROR) > 0

    def count(self, severity: ErrorSeverity = ErrorSeverity.ERROR) -> int:
        """Return the number of collected entries with the given severity."""
        return sum(1 for e in self.errors if e.severity == severity)

    def sections(self, severity: ErrorSeverity | None = None) -> list[str]:
        """Return the sorted names of sections that reported a problem.

        Args:
            severity: Only include entries of this severity (default: all)
        """
        return sorted({e.section for e in self.errors if severity in (None, e.severity)})

    def summary(self) -> str:
        """Return a one-line description of what was collected."""
        if not self.errors:
            return "no problems"

        defaulted = self.sections(ErrorSeverity.ERROR)
        warned = self.sections(ErrorSeverity.WARNING)
        parts: list[str] = []
        if defaulted:
            parts.append(f"defaults used for {', '.join(defaulted)}")
        if warned:
            parts.append(f"warnings for {', '.join(warned)}")
        return "; ".join(parts)

    def log_summary(self) -> None:
        """Log the summary at the level of the worst collected entry."""
        if self.has_errors():
            logger.error("Network settings decoded: %s", self.summary())
        elif self.errors:
            logger.warning("Network settings decoded: %s", self.summary())
        else:
            logger.debug("Network settings decoded: %s", self.summary())
