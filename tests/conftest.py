"""Shared fixtures for launcher tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from perfkit.jmeter_launcher.catalog import resolve
from perfkit.jmeter_launcher.settings import LauncherSettings


@pytest.fixture
def settings(tmp_path: Path) -> LauncherSettings:
    """Settings rooted in an empty temporary project."""
    return LauncherSettings(project_root=tmp_path)


@pytest.fixture
def make_plans(settings: LauncherSettings) -> Callable[..., list[Path]]:
    """Create test plan files for the given test types."""

    def _make(*test_types: str) -> list[Path]:
        settings.test_plans_path.mkdir(parents=True, exist_ok=True)
        created = []
        for test_type in test_types:
            plan = settings.test_plans_path / resolve(test_type).plan_file
            plan.write_text("<jmeterTestPlan/>")
            created.append(plan)
        return created

    return _make


@pytest.fixture
def make_config_file(settings: LauncherSettings) -> Callable[[str], Path]:
    """Create a file under the config directory."""

    def _make(relative: str) -> Path:
        path = settings.config_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("key=value\n")
        return path

    return _make
