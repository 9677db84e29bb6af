"""CLI entry point for the JMeter launcher."""

import logging
from pathlib import Path

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand

from perfkit.jmeter_launcher import catalog
from perfkit.jmeter_launcher.console import SUCCESS, configure_logging
from perfkit.jmeter_launcher.errors import (
    ConfigurationError,
    MissingResourceError,
    UnknownTestTypeError,
    UsageError,
)
from perfkit.jmeter_launcher.models.run_configuration import (
    DEFAULT_ENVIRONMENT,
    RunConfiguration,
)
from perfkit.jmeter_launcher.models.run_outcome import RunOutcome
from perfkit.jmeter_launcher.runner import LoadTestRunner, find_engine
from perfkit.jmeter_launcher.settings import capture_timestamp, load_settings

logger = logging.getLogger(__name__)

HELP_TOKEN = "help"

EPILOG = """\
Test types: load, stress, spike, soak, stability, enterprise
(enterprise-backend), ui (enterprise-ui), all.

Examples:
  jmeter-launcher load                      # load test against production
  jmeter-launcher spike dev --report        # spike test on dev with report
  jmeter-launcher enterprise staging --users 500 --duration 900
  jmeter-launcher ui --distributed --hosts 10.0.0.5,10.0.0.6
  jmeter-launcher all --report              # every basic test, in order

Credentials for basic tests are read from
config/credentials/credentials.properties when present.
"""

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)


def parse_hosts(hosts: str | None) -> tuple[str, ...]:
    """Split a comma-separated host list, dropping empty entries."""
    if not hosts:
        return ()
    return tuple(host.strip() for host in hosts.split(",") if host.strip())


def build_configuration(
    test_type: str,
    environment: str | None,
    env: str | None,
    report: bool,
    distributed: bool,
    hosts: str | None,
    users: int | None,
    duration: int | None,
    props: Path | None,
) -> RunConfiguration:
    """Build the run configuration from parsed command-line values.

    Raises:
        UsageError: If an override is not a positive integer, or distributed
            mode has no hosts

    """
    host_list = parse_hosts(hosts)
    if distributed and not host_list:
        raise UsageError(
            "Distributed mode requires at least one host (use --hosts)"
        )

    if env is None:
        env = environment or DEFAULT_ENVIRONMENT

    try:
        return RunConfiguration(
            test_type=test_type,
            environment=env,
            generate_report=report,
            distributed=distributed,
            hosts=host_list,
            users=users,
            duration=duration,
            props_file=props,
        )
    except ValidationError as e:
        fields = ", ".join(
            "--" + str(error["loc"][0]) for error in e.errors() if error["loc"]
        )
        raise UsageError(
            f"Invalid value for {fields}: must be a positive integer"
        ) from e


def _usage_error(ctx: click.Context, message: str) -> typer.Exit:
    logger.error(message)
    typer.echo(ctx.get_help())
    return typer.Exit(code=1)


def _log_summary(outcomes: list[RunOutcome]) -> None:
    logger.info("=" * 60)
    logger.info("Test Results Summary:")
    logger.info("=" * 60)
    for outcome in outcomes:
        if outcome.succeeded:
            logger.info(f"✓ {outcome.test_name}: success")
        else:
            logger.error(
                f"✗ {outcome.test_name}: failed (exit code {outcome.exit_code})"
            )


class LauncherCommand(TyperCommand):
    """Command that reports every usage error with the help text and status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        configure_logging()
        # `help` as the test type wins over whatever follows it
        if args and args[0] == HELP_TOKEN:
            typer.echo(ctx.get_help())
            raise typer.Exit()
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            raise _usage_error(ctx, e.format_message()) from e


@app.command(
    cls=LauncherCommand, epilog=EPILOG, context_settings=CONTEXT_SETTINGS
)
def main(  # noqa: C901
    ctx: typer.Context,
    test_type: str = typer.Argument(..., help="Test type to run, or 'all'"),
    environment: str | None = typer.Argument(
        None, help="Target environment (dev, staging, production)"
    ),
    report: bool = typer.Option(
        False, "--report", "-r", help="Generate HTML dashboard report"
    ),
    distributed: bool = typer.Option(
        False, "--distributed", "-d", help="Run on remote JMeter servers"
    ),
    hosts: str | None = typer.Option(
        None, "--hosts", help="Comma-separated remote hosts for --distributed"
    ),
    users: int | None = typer.Option(
        None, "--users", help="Total user count, split across test phases"
    ),
    duration: int | None = typer.Option(
        None, "--duration", help="Test duration in seconds"
    ),
    props: Path | None = typer.Option(  # noqa: B008
        None, "--props", help="Properties file overriding the environment default"
    ),
    env: str | None = typer.Option(
        None, "--env", help="Target environment (overrides the positional one)"
    ),
) -> None:
    """Run JMeter test plans in non-GUI mode."""
    try:
        config = build_configuration(
            test_type,
            environment,
            env,
            report,
            distributed,
            hosts,
            users,
            duration,
            props,
        )
        descriptor = (
            None if test_type == catalog.ALL_TESTS else catalog.resolve(test_type)
        )
    except UnknownTestTypeError as e:
        logger.info(f"Valid test types: {', '.join(catalog.known_names())}")
        raise _usage_error(ctx, str(e))
    except UsageError as e:
        raise _usage_error(ctx, str(e))

    try:
        settings = load_settings()
        engine = find_engine(settings.jmeter_bin)
    except (ConfigurationError, MissingResourceError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    logger.log(SUCCESS, f"JMeter found: {engine}")

    timestamp = capture_timestamp(settings.timestamp_format)
    runner = LoadTestRunner(settings, config, timestamp)

    if descriptor is not None:
        try:
            outcome = runner.run(descriptor)
        except (ConfigurationError, MissingResourceError) as e:
            logger.error(str(e))
            raise typer.Exit(code=1)
        if not outcome.succeeded:
            raise typer.Exit(code=outcome.exit_code)
        return

    try:
        outcomes = runner.run_all()
    except ConfigurationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    if not outcomes:
        logger.warning("No test plans were found, nothing was run")
        return

    _log_summary(outcomes)
    failed = [outcome for outcome in outcomes if not outcome.succeeded]
    if failed:
        logger.error(f"Tests failed: {len(failed)}/{len(outcomes)}")
        raise typer.Exit(code=1)
    logger.log(SUCCESS, "All tests completed!")


if __name__ == "__main__":  # pragma: no cover
    app()
