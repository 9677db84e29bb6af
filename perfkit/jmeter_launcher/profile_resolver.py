"""Select the properties file handed to the engine for a run."""

import logging
from pathlib import Path

from perfkit.jmeter_launcher.models.test_type import TestCategory, TestTypeDescriptor
from perfkit.jmeter_launcher.settings import LauncherSettings

logger = logging.getLogger(__name__)


def derive_properties_path(
    descriptor: TestTypeDescriptor, environment: str, settings: LauncherSettings
) -> Path:
    """Default properties path for a test type category and environment.

    UI test types read `ui-<environment>.properties`; everything else reads
    `<environment>.properties`. Basic test types prefer the credentials file
    when it is present.
    """
    if descriptor.category is TestCategory.UI:
        return settings.config_path / f"ui-{environment}.properties"

    env_file = settings.config_path / f"{environment}.properties"
    if descriptor.category is TestCategory.BASIC:
        if settings.credentials_file.is_file():
            return settings.credentials_file
        logger.warning(
            f"No credentials file found at {settings.credentials_file}"
        )
        logger.warning(
            "Copy from template: cp "
            f"{settings.credentials_file}.template {settings.credentials_file}"
        )
    return env_file


def resolve_properties(
    descriptor: TestTypeDescriptor,
    environment: str,
    explicit: Path | None,
    settings: LauncherSettings,
) -> Path | None:
    """Resolve the properties file for a run.

    Args:
        descriptor: Test type being run
        environment: Target environment name
        explicit: Path given with --props, if any
        settings: Launcher settings

    Returns:
        Properties file path, or None to run without one

    """
    if explicit is not None:
        if explicit.is_file():
            logger.info(f"Using properties file: {explicit}")
            return explicit
        logger.warning(
            f"Properties file not found: {explicit}, falling back to defaults"
        )

    derived = derive_properties_path(descriptor, environment, settings)
    if not derived.is_file():
        logger.warning(
            f"Properties file not found: {derived}, running without properties"
        )
        return None

    logger.info(f"Using properties file: {derived}")
    return derived
