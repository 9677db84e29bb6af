"""Assemble the JMeter command line for a single run."""

import logging
from pathlib import Path

from perfkit.jmeter_launcher.errors import ConfigurationError
from perfkit.jmeter_launcher.models.command_line import CommandLine
from perfkit.jmeter_launcher.models.run_configuration import RunConfiguration
from perfkit.jmeter_launcher.models.run_outcome import ResolvedPaths
from perfkit.jmeter_launcher.models.test_type import TestCategory, TestTypeDescriptor
from perfkit.jmeter_launcher.settings import LauncherSettings

logger = logging.getLogger(__name__)

HEAP_ENV_VAR = "HEAP"
DURATION_PROPERTY = "duration"

# Percent of the --users override given to each phase. None means the
# category has no per-phase split and the override is ignored.
USER_SPLIT_POLICY: dict[TestCategory, tuple[tuple[str, int], ...] | None] = {
    TestCategory.ENTERPRISE_BACKEND: (
        ("browse", 40),
        ("shopping", 40),
        ("checkout", 20),
    ),
    TestCategory.UI: (
        ("homepage", 33),
        ("shopping", 50),
        ("checkout", 17),
    ),
    TestCategory.BASIC: None,
}


def split_users(category: TestCategory, users: int) -> dict[str, int] | None:
    """Split a user count across the phases of a category.

    Parts are truncated and not re-normalized, so they may sum to less
    than `users`.
    """
    policy = USER_SPLIT_POLICY[category]
    if policy is None:
        return None
    return {phase: users * percent // 100 for phase, percent in policy}


def resolve_paths(
    descriptor: TestTypeDescriptor,
    properties_file: Path | None,
    config: RunConfiguration,
    settings: LauncherSettings,
    timestamp: str,
) -> ResolvedPaths:
    """Derive the timestamped output paths for one run."""
    stem = f"{descriptor.test_name}-{timestamp}"
    return ResolvedPaths(
        test_plan=settings.test_plans_path / descriptor.plan_file,
        properties_file=properties_file,
        results_file=settings.results_path / f"{stem}.jtl",
        log_file=settings.logs_path / f"jmeter-{stem}.log",
        report_dir=settings.reports_path / stem if config.generate_report else None,
    )


def build_command(
    descriptor: TestTypeDescriptor,
    paths: ResolvedPaths,
    config: RunConfiguration,
    settings: LauncherSettings,
) -> CommandLine:
    """Build the engine invocation for a run.

    Raises:
        ConfigurationError: If distributed mode is requested without hosts

    """
    if config.distributed and not config.hosts:
        raise ConfigurationError(
            "Distributed mode requires at least one host (use --hosts)"
        )

    command = CommandLine(
        executable=settings.jmeter_bin,
        environment={HEAP_ENV_VAR: descriptor.heap_profile.jvm_options},
    )
    command.add("-n")
    command.add("-t", str(paths.test_plan))
    if paths.properties_file is not None:
        command.add("-q", str(paths.properties_file))
    command.add("-l", str(paths.results_file))
    command.add("-j", str(paths.log_file))

    if config.users is not None:
        phases = split_users(descriptor.category, config.users)
        if phases is None:
            logger.warning(
                f"--users is not supported for {descriptor.name} tests, "
                "using the test plan defaults"
            )
        else:
            for phase, users in phases.items():
                command.add_property(f"{phase}_users", users)
            logger.info(
                "User distribution: "
                + ", ".join(f"{phase}={users}" for phase, users in phases.items())
            )

    if config.duration is not None:
        command.add_property(DURATION_PROPERTY, config.duration)

    if paths.report_dir is not None:
        command.add("-e")
        command.add("-o", str(paths.report_dir))

    if config.distributed:
        command.add("-R", ",".join(config.hosts))

    return command
