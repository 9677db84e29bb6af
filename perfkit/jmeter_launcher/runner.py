"""Run JMeter test plans one at a time and collect their outcomes."""

import logging
import os
import shutil
import subprocess
from pathlib import Path

import typer

from perfkit.jmeter_launcher.catalog import batch_descriptors
from perfkit.jmeter_launcher.command_builder import build_command, resolve_paths
from perfkit.jmeter_launcher.console import SUCCESS
from perfkit.jmeter_launcher.errors import MissingResourceError
from perfkit.jmeter_launcher.models.command_line import CommandLine
from perfkit.jmeter_launcher.models.run_configuration import RunConfiguration
from perfkit.jmeter_launcher.models.run_outcome import RunOutcome
from perfkit.jmeter_launcher.models.test_type import TestTypeDescriptor
from perfkit.jmeter_launcher.profile_resolver import resolve_properties
from perfkit.jmeter_launcher.settings import LauncherSettings

logger = logging.getLogger(__name__)


def find_engine(jmeter_bin: str) -> str:
    """Locate the JMeter executable.

    Args:
        jmeter_bin: Executable name or path

    Returns:
        Absolute path of the executable

    Raises:
        MissingResourceError: If JMeter is not installed or not in PATH

    """
    found = shutil.which(jmeter_bin)
    if found is None:
        raise MissingResourceError("JMeter is not installed or not in PATH")
    return found


class LoadTestRunner:
    """Runs test plans sequentially for one launcher invocation."""

    def __init__(
        self, settings: LauncherSettings, config: RunConfiguration, timestamp: str
    ) -> None:
        """Initialize with settings, configuration and the shared run timestamp."""
        self.settings = settings
        self.config = config
        self.timestamp = timestamp

    def plan_path(self, descriptor: TestTypeDescriptor) -> Path:
        return self.settings.test_plans_path / descriptor.plan_file

    def run(self, descriptor: TestTypeDescriptor) -> RunOutcome:
        """Run a single test type and wait for the engine to exit.

        Raises:
            MissingResourceError: If the test plan file does not exist
            ConfigurationError: If the command cannot be built

        """
        test_plan = self.plan_path(descriptor)
        if not test_plan.is_file():
            raise MissingResourceError(f"Test plan not found: {test_plan}")

        properties_file = resolve_properties(
            descriptor, self.config.environment, self.config.props_file, self.settings
        )
        paths = resolve_paths(
            descriptor, properties_file, self.config, self.settings, self.timestamp
        )
        command = build_command(descriptor, paths, self.config, self.settings)

        logger.info(f"Starting test: {descriptor.test_name}")
        logger.info(f"Test plan: {paths.test_plan}")
        logger.info(f"Environment: {self.config.environment}")
        logger.info(f"Results: {paths.results_file}")
        logger.info(f"Log file: {paths.log_file}")

        paths.results_file.parent.mkdir(parents=True, exist_ok=True)
        paths.log_file.parent.mkdir(parents=True, exist_ok=True)
        if paths.report_dir is not None:
            paths.report_dir.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Report will be generated at: {paths.report_dir}")
        if self.config.distributed:
            logger.info(f"Remote hosts: {', '.join(self.config.hosts)}")

        exit_code = self._execute(command)
        outcome = RunOutcome(
            test_type=descriptor.name,
            test_name=descriptor.test_name,
            exit_code=exit_code,
            results_file=paths.results_file,
            log_file=paths.log_file,
            report_dir=paths.report_dir,
        )

        if outcome.succeeded:
            logger.log(SUCCESS, f"Test completed: {descriptor.test_name}")
            logger.info(f"Results saved to: {paths.results_file}")
            if paths.report_index is not None:
                logger.log(SUCCESS, f"Report generated: {paths.report_index}")
                self._open_report(paths.report_index)
            logger.info(f"Log file saved to: {paths.log_file}")
        else:
            logger.error(
                f"Test failed: {descriptor.test_name} (exit code {exit_code})"
            )
            logger.info(f"Check log file for details: {paths.log_file}")

        return outcome

    def run_all(self) -> list[RunOutcome]:
        """Run every batch test type in order, skipping missing test plans.

        A failed run does not stop the batch.
        """
        logger.info("Running all test plans...")
        outcomes: list[RunOutcome] = []
        for descriptor in batch_descriptors():
            if not self.plan_path(descriptor).is_file():
                logger.warning(
                    f"Skipping {descriptor.name}: test plan not found at "
                    f"{self.plan_path(descriptor)}"
                )
                continue
            outcomes.append(self.run(descriptor))
        return outcomes

    def _execute(self, command: CommandLine) -> int:
        """Launch the engine and block until it exits."""
        argv = command.to_argv()
        logger.debug(f"Executing: {' '.join(argv)}")
        env = {**os.environ, **command.environment}
        completed = subprocess.run(argv, env=env, check=False)  # noqa: S603
        return completed.returncode

    def _open_report(self, report_index: Path) -> None:
        """Open the dashboard in the platform viewer, best effort."""
        if not report_index.is_file():
            logger.info(f"Report index not found, open it manually: {report_index}")
            return
        try:
            status = typer.launch(str(report_index))
        except OSError as e:
            logger.info(
                f"Could not open report ({e}), open it manually: {report_index}"
            )
            return
        if status != 0:
            logger.info(f"Could not open report, open it manually: {report_index}")
