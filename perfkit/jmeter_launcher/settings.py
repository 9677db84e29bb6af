"""Launcher settings loaded from jmeter-launcher.yaml and the environment."""

import os
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from perfkit.jmeter_launcher.errors import ConfigurationError

SETTINGS_FILE_NAME = "jmeter-launcher.yaml"
ROOT_ENV_VAR = "JMETER_LAUNCHER_ROOT"
BIN_ENV_VAR = "JMETER_BIN"


class LauncherSettings(BaseModel):
    """Directory layout and engine location for a load-test project."""

    project_root: Path = Field(..., description="Project root directory")
    jmeter_bin: str = Field(default="jmeter", description="JMeter executable")
    test_plans_dir: str = Field(default="test-plans", description="Test plans")
    config_dir: str = Field(default="config", description="Properties files")
    results_dir: str = Field(default="results", description="Sample results")
    logs_dir: str = Field(default="logs", description="Engine logs")
    reports_dir: str = Field(default="reports", description="HTML dashboards")
    timestamp_format: str = Field(
        default="%Y%m%d-%H%M%S", description="strftime format for run timestamps"
    )

    @property
    def test_plans_path(self) -> Path:
        return self.project_root / self.test_plans_dir

    @property
    def config_path(self) -> Path:
        return self.project_root / self.config_dir

    @property
    def results_path(self) -> Path:
        return self.project_root / self.results_dir

    @property
    def logs_path(self) -> Path:
        return self.project_root / self.logs_dir

    @property
    def reports_path(self) -> Path:
        return self.project_root / self.reports_dir

    @property
    def credentials_file(self) -> Path:
        """Dedicated credentials file preferred by basic test types."""
        return self.config_path / "credentials" / "credentials.properties"


def load_settings(project_root: Path | None = None) -> LauncherSettings:
    """Load launcher settings for a project.

    Args:
        project_root: Project root; defaults to $JMETER_LAUNCHER_ROOT or cwd

    Returns:
        Validated settings, with $JMETER_BIN applied last

    Raises:
        ConfigurationError: If the settings file is invalid YAML or schema

    """
    if project_root is None:
        project_root = Path(os.environ.get(ROOT_ENV_VAR) or Path.cwd())

    data: dict[str, object] = {}
    settings_file = project_root / SETTINGS_FILE_NAME
    if settings_file.exists():
        try:
            with settings_file.open() as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {settings_file}: {e}") from e
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise ConfigurationError(
                    f"Expected a mapping in {settings_file}, "
                    f"got {type(loaded).__name__}"
                )
            data.update(loaded)

    data["project_root"] = project_root
    if BIN_ENV_VAR in os.environ:
        data["jmeter_bin"] = os.environ[BIN_ENV_VAR]

    try:
        return LauncherSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {settings_file}: {e}") from e


def capture_timestamp(fmt: str, now: datetime | None = None) -> str:
    """Format the run timestamp shared by every test in one invocation."""
    return (now or datetime.now()).strftime(fmt)
