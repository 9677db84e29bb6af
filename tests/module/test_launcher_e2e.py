"""End-to-end tests running the CLI against a fake JMeter executable."""

import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from perfkit.jmeter_launcher.cli import app

pytestmark = pytest.mark.skipif(
    sys.platform == "win32", reason="fake engine is a POSIX shell script"
)

FAKE_JMETER = """#!/bin/sh
echo "HEAP=$HEAP $*" >> "$FAKE_JMETER_CALLS"
plan=""
while [ $# -gt 0 ]; do
  case "$1" in
    -t) plan="$2"; shift 2 ;;
    -l) echo "timeStamp,elapsed,label,success" > "$2"; shift 2 ;;
    -j) echo "fake jmeter log" > "$2"; shift 2 ;;
    -o) mkdir -p "$2"; echo "<html></html>" > "$2/index.html"; shift 2 ;;
    *) shift ;;
  esac
done
case "$plan" in
  *"$FAKE_JMETER_FAIL_PLAN"*) exit 3 ;;
esac
exit 0
"""

runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a project with all test plans and a fake engine on disk."""
    root = tmp_path / "project"
    plans = root / "test-plans"
    plans.mkdir(parents=True)
    for plan in (
        "LoadTest.jmx",
        "StressTest.jmx",
        "SpikeTest.jmx",
        "SoakTest.jmx",
        "StabilityTest.jmx",
        "EnterpriseBackendTest.jmx",
        "EnterpriseUITest.jmx",
    ):
        (plans / plan).write_text("<jmeterTestPlan/>")

    config = root / "config"
    (config / "credentials").mkdir(parents=True)
    (config / "credentials" / "credentials.properties").write_text("user=test\n")
    (config / "dev.properties").write_text("host=dev.example.com\n")
    (config / "ui-dev.properties").write_text("host=ui.dev.example.com\n")

    engine = tmp_path / "bin" / "jmeter"
    engine.parent.mkdir()
    engine.write_text(FAKE_JMETER)
    engine.chmod(engine.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    monkeypatch.setenv("JMETER_LAUNCHER_ROOT", str(root))
    monkeypatch.setenv("JMETER_BIN", str(engine))
    monkeypatch.setenv("FAKE_JMETER_CALLS", str(tmp_path / "calls.log"))
    monkeypatch.setenv("FAKE_JMETER_FAIL_PLAN", "__never__")
    return root


def _calls(project: Path) -> list[str]:
    return (project.parent / "calls.log").read_text().splitlines()


def test_single_run_writes_outputs(project: Path) -> None:
    """A single run produces timestamped results and log files."""
    result = runner.invoke(app, ["stress", "dev"])

    assert result.exit_code == 0, result.output
    results = list((project / "results").glob("stresstest-*.jtl"))
    logs = list((project / "logs").glob("jmeter-stresstest-*.log"))
    assert len(results) == 1
    assert len(logs) == 1
    calls = _calls(project)
    assert len(calls) == 1
    assert calls[0].startswith("HEAP=-Xms1g -Xmx2g -n -t ")
    assert "credentials.properties" in calls[0]


def test_report_run_creates_dashboard(project: Path) -> None:
    """--report produces a dashboard directory and tries to open it."""
    with patch("perfkit.jmeter_launcher.runner.typer.launch", return_value=0) as launch:
        result = runner.invoke(app, ["ui", "dev", "--report", "--users", "300"])

    assert result.exit_code == 0, result.output
    indexes = list((project / "reports").glob("enterpriseuitest-*/index.html"))
    assert len(indexes) == 1
    launch.assert_called_once_with(str(indexes[0]))
    call = _calls(project)[0]
    assert "ui-dev.properties" in call
    assert "-Jhomepage_users=99 -Jshopping_users=150 -Jcheckout_users=51" in call


def test_single_run_failure_exit_code(
    project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The engine's exit code becomes the launcher's exit code."""
    monkeypatch.setenv("FAKE_JMETER_FAIL_PLAN", "SoakTest.jmx")

    result = runner.invoke(app, ["soak"])

    assert result.exit_code == 3


def test_run_all_with_missing_plan_and_failure(
    project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The batch skips missing plans, runs the rest, and fails on a failed run."""
    (project / "test-plans" / "SpikeTest.jmx").unlink()
    monkeypatch.setenv("FAKE_JMETER_FAIL_PLAN", "StressTest.jmx")

    result = runner.invoke(app, ["all"])

    assert result.exit_code == 1
    calls = _calls(project)
    assert len(calls) == 4
    results = sorted(p.name for p in (project / "results").glob("*.jtl"))
    assert [name.split("-")[0] for name in results] == [
        "loadtest",
        "soaktest",
        "stabilitytest",
        "stresstest",
    ]
    timestamps = {name.split("-", 1)[1] for name in results}
    assert len(timestamps) == 1
