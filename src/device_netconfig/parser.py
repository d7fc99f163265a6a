"""Structured decoding of device network settings.

This module turns a settings document (a mapping or JSON text) with
``client`` and ``router`` sections into validated Pydantic models, and dumps
them back to their JSON-compatible form.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from device_netconfig.errors import ErrorCollector, ErrorSeverity
from device_netconfig.models.client import ClientConfiguration
from device_netconfig.models.router import RouterConfiguration

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DOCUMENT_SECTION = "document"


class NetworkSettings(BaseModel):
    """Complete device network settings."""

    client: ClientConfiguration = Field(
        default_factory=ClientConfiguration.default, description="Client-side configuration"
    )
    router: RouterConfiguration = Field(
        default_factory=RouterConfiguration.default, description="Router-side configuration"
    )


class SettingsParser:
    """Parser for settings documents.

    Each section is validated on its own. With an error collector, a section
    that fails validation is reported and replaced by its default; without
    one, the first failure is raised.
    """

    sections: dict[str, type[BaseModel]] = {
        "client": ClientConfiguration,
        "router": RouterConfiguration,
    }

    def __init__(self, error_collector: ErrorCollector | None = None) -> None:
        """Initialize the parser.

        Args:
            error_collector: Optional error collector for graceful error handling
        """
        self.error_collector = error_collector

    def parse(self, document: Mapping[str, Any] | str | bytes) -> NetworkSettings:
        """Parse a settings document.

        Args:
            document: Mapping of sections, or the same as JSON text

        Returns:
            NetworkSettings: Validated settings

        Raises:
            ValueError: If the document or a section is invalid
                        (only when error_collector is None)
        """
        data = self._load_document(document)

        for key in sorted(set(data) - set(self.sections)):
            if self.error_collector:
                self.error_collector.add_error(
                    section=key,
                    message="Unknown section ignored",
                    severity=ErrorSeverity.WARNING,
                )
            else:
                logger.debug("Ignoring unknown section %s", key)

        client = self._parse_section(data, "client", ClientConfiguration)
        router = self._parse_section(data, "router", RouterConfiguration)

        if self.error_collector:
            self.error_collector.log_summary()

        return NetworkSettings(
            client=client if client is not None else ClientConfiguration.default(),
            router=router if router is not None else RouterConfiguration.default(),
        )

    def _load_document(self, document: Mapping[str, Any] | str | bytes) -> Mapping[str, Any]:
        """Decode JSON text if needed and check the document is a mapping.

        Returns:
            Mapping of section names to raw section data (empty on collected errors)
        """
        if isinstance(document, (str, bytes)):
            try:
                document = json.loads(document)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                return self._document_error("Invalid JSON", e)

        if not isinstance(document, Mapping):
            return self._document_error(
                "Settings document must be an object",
                TypeError(f"got {type(document).__name__}"),
            )

        return document

    def _document_error(self, message: str, exception: Exception) -> Mapping[str, Any]:
        if self.error_collector:
            self.error_collector.add_error(
                section=DOCUMENT_SECTION,
                message=message,
                exception=exception,
                severity=ErrorSeverity.ERROR,
            )
            return {}
        raise ValueError(f"{message}: {exception}") from exception

    def _parse_section(
        self, data: Mapping[str, Any], section: str, model_class: type[T]
    ) -> T | None:
        """Validate one section with its Pydantic model.

        Args:
            data: Decoded document
            section: Section name
            model_class: Pydantic model class to validate against

        Returns:
            Validated model instance, or None if absent or invalid

        Raises:
            ValueError: If validation fails (only when error_collector is None)
        """
        if section not in data or data[section] is None:
            logger.debug("Section %s not present, using default", section)
            return None

        try:
            return model_class.model_validate(data[section])
        except ValidationError as e:
            error_msg = f"Validation error in {section}"
            if self.error_collector:
                self.error_collector.add_error(
                    section=section,
                    message=error_msg,
                    exception=e,
                    severity=ErrorSeverity.ERROR,
                )
                logger.info("Section %s replaced by its default", section)
                return None
            raise ValueError(f"{error_msg}: {e}") from e


def parse_settings(
    document: Mapping[str, Any] | str | bytes,
    error_collector: ErrorCollector | None = None,
) -> NetworkSettings:
    """Parse a settings document and return validated NetworkSettings.

    This is a convenience function that creates a SettingsParser and calls parse().

    Raises:
        ValueError: If the document or a section is invalid
                    (only when error_collector is None)
    """
    parser = SettingsParser(error_collector=error_collector)
    return parser.parse(document)


def dump_settings(settings: NetworkSettings) -> dict[str, Any]:
    """Return the JSON-compatible structured form of the settings."""
    return settings.model_dump(mode="json")
