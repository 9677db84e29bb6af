"""Static catalog of test types and the batch sequence run by `all`."""

from perfkit.jmeter_launcher.errors import UnknownTestTypeError
from perfkit.jmeter_launcher.models.test_type import (
    HeapProfile,
    TestCategory,
    TestTypeDescriptor,
)

ALL_TESTS = "all"

TEST_TYPES: tuple[TestTypeDescriptor, ...] = (
    TestTypeDescriptor(
        name="load",
        plan_file="LoadTest.jmx",
        category=TestCategory.BASIC,
        default_users=10,
        default_loops=5,
        heap_profile=HeapProfile.SMALL,
    ),
    TestTypeDescriptor(
        name="stress",
        plan_file="StressTest.jmx",
        category=TestCategory.BASIC,
        default_users=100,
        default_loops=10,
        heap_profile=HeapProfile.MEDIUM,
    ),
    TestTypeDescriptor(
        name="spike",
        plan_file="SpikeTest.jmx",
        category=TestCategory.BASIC,
        default_users=200,
        default_loops=1,
        heap_profile=HeapProfile.MEDIUM,
    ),
    TestTypeDescriptor(
        name="soak",
        plan_file="SoakTest.jmx",
        category=TestCategory.BASIC,
        default_users=50,
        default_loops=200,
        heap_profile=HeapProfile.MEDIUM,
    ),
    TestTypeDescriptor(
        name="stability",
        plan_file="StabilityTest.jmx",
        category=TestCategory.BASIC,
        default_users=25,
        default_loops=100,
        heap_profile=HeapProfile.SMALL,
    ),
    TestTypeDescriptor(
        name="enterprise-backend",
        plan_file="EnterpriseBackendTest.jmx",
        category=TestCategory.ENTERPRISE_BACKEND,
        default_users=100,
        default_duration=600,
        heap_profile=HeapProfile.MEDIUM,
        aliases=("enterprise",),
    ),
    TestTypeDescriptor(
        name="enterprise-ui",
        plan_file="EnterpriseUITest.jmx",
        category=TestCategory.UI,
        default_users=60,
        default_duration=600,
        heap_profile=HeapProfile.LARGE,
        aliases=("ui",),
    ),
)

# Order matters: `all` runs these one after another.
BATCH_SEQUENCE: tuple[str, ...] = ("load", "stress", "spike", "soak", "stability")

_BY_NAME: dict[str, TestTypeDescriptor] = {}
for _descriptor in TEST_TYPES:
    for _name in (_descriptor.name, *_descriptor.aliases):
        if _name in _BY_NAME:
            raise RuntimeError(f"Duplicate test type name in catalog: {_name}")
        _BY_NAME[_name] = _descriptor


def resolve(test_type: str) -> TestTypeDescriptor:
    """Look up a test type by canonical name or alias.

    Raises:
        UnknownTestTypeError: If the name is not in the catalog

    """
    try:
        return _BY_NAME[test_type]
    except KeyError:
        raise UnknownTestTypeError(test_type) from None


def known_names() -> list[str]:
    """All accepted test type tokens, including `all`."""
    return [*_BY_NAME, ALL_TESTS]


def batch_descriptors() -> list[TestTypeDescriptor]:
    """Descriptors run by `all`, in execution order."""
    return [resolve(name) for name in BATCH_SEQUENCE]
