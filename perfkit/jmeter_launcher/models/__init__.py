"""Data models for test types, run configuration, commands and outcomes."""

from perfkit.jmeter_launcher.models.command_line import CommandLine
from perfkit.jmeter_launcher.models.run_configuration import (
    DEFAULT_ENVIRONMENT,
    RunConfiguration,
)
from perfkit.jmeter_launcher.models.run_outcome import ResolvedPaths, RunOutcome
from perfkit.jmeter_launcher.models.test_type import (
    HeapProfile,
    TestCategory,
    TestTypeDescriptor,
)

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "CommandLine",
    "HeapProfile",
    "ResolvedPaths",
    "RunConfiguration",
    "RunOutcome",
    "TestCategory",
    "TestTypeDescriptor",
]
