"""Models for per-run output paths and outcomes."""

from pathlib import Path

from pydantic import BaseModel, Field


class ResolvedPaths(BaseModel):
    """File system targets for one test run."""

    test_plan: Path = Field(..., description="Test plan file")
    properties_file: Path | None = Field(
        default=None, description="Properties file passed to the engine"
    )
    results_file: Path = Field(..., description="Sample results output (.jtl)")
    log_file: Path = Field(..., description="Engine log output")
    report_dir: Path | None = Field(
        default=None, description="HTML dashboard output directory"
    )

    @property
    def report_index(self) -> Path | None:
        """Entry page of the generated dashboard, if reporting."""
        if self.report_dir is None:
            return None
        return self.report_dir / "index.html"


class RunOutcome(BaseModel):
    """Result of a single engine execution."""

    test_type: str = Field(..., description="Canonical test type name")
    test_name: str = Field(..., description="Name used to stamp output files")
    exit_code: int = Field(..., description="Engine process exit code")
    results_file: Path = Field(..., description="Sample results output")
    log_file: Path = Field(..., description="Engine log output")
    report_dir: Path | None = Field(
        default=None, description="HTML dashboard output directory"
    )

    @property
    def succeeded(self) -> bool:
        """Whether the engine exited cleanly."""
        return self.exit_code == 0
