"""Models describing the test types known to the launcher."""

from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field


class TestCategory(str, Enum):
    """Category of a test type, driving properties and user-split policy."""

    __test__ = False

    BASIC = "basic"
    ENTERPRISE_BACKEND = "enterprise-backend"
    UI = "ui"


class HeapProfile(str, Enum):
    """JVM heap sizing applied to the engine process."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def jvm_options(self) -> str:
        """Heap options passed to JMeter through the HEAP variable."""
        return _HEAP_OPTIONS[self]


_HEAP_OPTIONS = {
    HeapProfile.SMALL: "-Xms512m -Xmx1g",
    HeapProfile.MEDIUM: "-Xms1g -Xmx2g",
    HeapProfile.LARGE: "-Xms2g -Xmx4g",
}


class TestTypeDescriptor(BaseModel):
    """Static description of one test type."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Canonical test type name")
    plan_file: str = Field(..., description="Test plan file name (e.g. LoadTest.jmx)")
    category: TestCategory = Field(..., description="Test type category")
    default_users: int = Field(..., gt=0, description="Default concurrent users")
    default_loops: int | None = Field(
        default=None, gt=0, description="Default loop count per user"
    )
    default_duration: int | None = Field(
        default=None, gt=0, description="Default duration in seconds"
    )
    heap_profile: HeapProfile = Field(
        default=HeapProfile.SMALL, description="JVM heap profile"
    )
    aliases: tuple[str, ...] = Field(
        default=(), description="Alternative names accepted on the command line"
    )

    @property
    def test_name(self) -> str:
        """Lower-cased plan base name used to stamp output files."""
        return PurePath(self.plan_file).stem.lower()
