"""Resolved inputs for a single launcher invocation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENVIRONMENT = "production"


class RunConfiguration(BaseModel):
    """Configuration built once from the command line, read-only afterwards."""

    model_config = ConfigDict(frozen=True)

    test_type: str = Field(..., description="Test type name as given by the user")
    environment: str = Field(
        default=DEFAULT_ENVIRONMENT, description="Target environment name"
    )
    generate_report: bool = Field(
        default=False, description="Generate the HTML dashboard after the run"
    )
    distributed: bool = Field(default=False, description="Run on remote hosts")
    hosts: tuple[str, ...] = Field(
        default=(), description="Remote hosts used in distributed mode"
    )
    users: int | None = Field(default=None, gt=0, description="User count override")
    duration: int | None = Field(
        default=None, gt=0, description="Duration override in seconds"
    )
    props_file: Path | None = Field(
        default=None, description="Explicit properties file path"
    )
