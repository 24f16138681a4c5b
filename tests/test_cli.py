"""
Tests for the command-line entry point.
"""

import logging
from pathlib import Path

import pytest
import yaml

from fretboard_courses.cli import main


class TestList:
    """Tests for the list command."""

    def test_lists_builtin_courses(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["list"]) == 0
        assert capsys.readouterr().out.split() == ["major_scale", "minor_scale"]


class TestGenerate:
    """Tests for the generate command."""

    def test_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Summary shows id, lesson keys and exercise count."""
        assert main(["generate", "major_scale"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("trane::guitar::fretboard_exploration::major_scale\n")
        assert "lessons: 12 (C, G, D, A, E, B, F♯, C♯, G♯, D♯, A♯, F)" in out
        assert "exercises: 60" in out

    def test_yaml(self, capsys: pytest.CaptureFixture[str]) -> None:
        """YAML output is the course tree."""
        assert main(["generate", "minor_scale", "--format", "yaml"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["schema"] == "course/v1"
        assert data["lessons"][0]["id"] == "trane::guitar::fretboard_exploration::minor_scale::A"
        assert data["lessons"][1]["dependencies"] == [
            "trane::guitar::fretboard_exploration::minor_scale::A"
        ]
        assert data["lessons"][0]["metadata"] == {"key": ["A"]}

    def test_tuning_override(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--tuning replaces the configured tuning."""
        assert main(["generate", "major_scale", "--tuning", "D A D G B E", "--format", "yaml"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        strings = [exercise["string"] for exercise in data["lessons"][0]["exercises"]]
        assert strings == ["D", "A", "G", "B", "E"]

    def test_bad_tuning(self) -> None:
        """An invalid tuning is a configuration failure."""
        assert main(["generate", "major_scale", "--tuning", "E X"]) == 1

    def test_unknown_course(self) -> None:
        """Unknown course names fail."""
        assert main(["generate", "missing"]) == 1


class TestBuild:
    """Tests for the build command."""

    def test_builds_all(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["build"]) == 0
        out = capsys.readouterr().out
        assert "major_scale" in out
        assert "minor_scale" in out

    def test_logs_each_course(self, caplog: pytest.LogCaptureFixture) -> None:
        """Every built course is logged by name."""
        with caplog.at_level(logging.INFO, logger="fretboard_courses.cli"):
            assert main(["build"]) == 0
        assert "Built Explore the Major Scale in the fretboard course" in caplog.messages
        assert "Built Explore the Minor Scale in the fretboard course" in caplog.messages

    def test_project_dir(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Project configs are built too."""
        (temp_dir / "blues.yaml").write_text(
            "course_id: p::pentatonic\ndirectory_name: pentatonic\nscale: minor pentatonic\n"
        )
        assert main(["--project-dir", str(temp_dir), "build"]) == 0
        assert "p::pentatonic" in capsys.readouterr().out

    def test_invalid_project_config(self, temp_dir: Path) -> None:
        """An invalid config aborts the build."""
        (temp_dir / "broken.yaml").write_text("course_id: p::x\nscale: major\n")
        assert main(["--project-dir", str(temp_dir), "build"]) == 1
