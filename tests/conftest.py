"""
Doctor Test Configuration and Fixtures

Shared build target reports for explanation tests.
"""

import pytest

from doctor.targets import TargetStatusReport


@pytest.fixture
def all_correct_reports():
    """Two Scala targets with every capability working."""
    return [
        TargetStatusReport.from_flags("core", target_type="Scala 2.13.12"),
        TargetStatusReport.from_flags("core-test", target_type="Scala 2.13.12"),
    ]


@pytest.fixture
def interactive_broken_reports():
    """A single Java target: interactive features unsupported."""
    return [
        TargetStatusReport.from_flags("legacy-java", interactive=False, target_type="Java"),
    ]


@pytest.fixture
def mixed_reports():
    """One healthy target and one missing semanticdb plus debugging."""
    return [
        TargetStatusReport.from_flags("app", target_type="Scala 3.3.1"),
        TargetStatusReport.from_flags(
            "old-module",
            indexes=False,
            debugging=False,
            target_type="Scala 2.11.12",
        ),
    ]
