"""
tests/unit/test_targets.py - Tests for target status records and icons
"""

import dataclasses

import pytest

from doctor.icons import IconStyle, Icons, get_icons
from doctor.targets import Dimension, DoctorStatus, TargetStatusReport


class TestIcons:
    """Test glyph sets."""

    def test_unicode_set(self):
        assert Icons.UNICODE.check == "✅"
        assert Icons.UNICODE.alert == "⚠️"
        assert Icons.UNICODE.error == "❌"

    def test_none_set_is_empty(self):
        assert Icons.NONE.check == ""
        assert Icons.NONE.glyph("error") == ""

    def test_get_icons_by_name(self):
        assert get_icons("unicode") is Icons.UNICODE
        assert get_icons(" NONE ") is Icons.NONE
        assert get_icons(IconStyle.NONE) is Icons.NONE

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown icon style"):
            get_icons("emoji")

    def test_unknown_glyph(self):
        with pytest.raises(ValueError):
            Icons.UNICODE.glyph("sparkles")

    def test_only_status_glyphs(self):
        assert [f.name for f in dataclasses.fields(Icons)] == ["check", "alert", "error"]
        with pytest.raises(ValueError):
            Icons.UNICODE.glyph("info")


class TestDoctorStatus:
    """Test DoctorStatus constructors."""

    def test_correct(self):
        status = DoctorStatus.correct()
        assert status.is_correct
        assert status.icon == Icons.UNICODE.check

    def test_alert_and_error_are_not_correct(self):
        assert not DoctorStatus.alert("only syntax").is_correct
        assert not DoctorStatus.error().is_correct
        assert DoctorStatus.alert().icon == Icons.UNICODE.alert

    def test_to_dict(self):
        status = DoctorStatus.error("no semanticdb")
        assert status.to_dict() == {
            "icon": "❌",
            "isCorrect": False,
            "explanation": "no semanticdb",
        }


class TestTargetStatusReport:
    """Test TargetStatusReport."""

    def test_defaults_are_correct(self):
        report = TargetStatusReport(name="core")
        assert report.diagnostics_correct
        assert report.interactive_correct
        assert report.indexes_correct
        assert report.debugging_correct
        assert report.java_correct

    def test_from_flags(self):
        report = TargetStatusReport.from_flags("legacy", interactive=False, java=False)
        assert report.diagnostics_correct
        assert not report.interactive_correct
        assert not report.java_correct
        assert report.interactive_status.icon == Icons.UNICODE.error

    def test_immutable(self):
        report = TargetStatusReport.from_flags("core")
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.name = "other"

    def test_to_dict(self):
        report = TargetStatusReport.from_flags("core", debugging=False, target_type="Scala 3.3.1")
        data = report.to_dict()
        assert data["buildTarget"] == "core"
        assert data["targetType"] == "Scala 3.3.1"
        assert data["debuggingStatus"]["isCorrect"] is False
        assert data["diagnosticsStatus"]["isCorrect"] is True


class TestDimension:
    """Test Dimension accessors."""

    def test_status_of(self):
        report = TargetStatusReport.from_flags("core", indexes=False)
        assert Dimension.INDEXES.status_of(report) is report.indexes_status
        assert Dimension.INDEXES.is_correct(report) is False
        assert Dimension.JAVA.is_correct(report) is True
