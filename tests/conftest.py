"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from fretboard_courses.core import ScaleType
from fretboard_courses.generator import generate_course
from fretboard_courses.models import CourseSpec, NoteAlias

MAJOR_COURSE_ID = "trane::guitar::fretboard_exploration::major_scale"
MINOR_COURSE_ID = "trane::guitar::fretboard_exploration::minor_scale"


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project configs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def major_course() -> CourseSpec:
    """Major scale course with default tuning and no alias."""
    return generate_course(MAJOR_COURSE_ID, ScaleType.MAJOR)


@pytest.fixture
def minor_course() -> CourseSpec:
    """Minor scale course following the relative minors of the circle of fifths."""
    return generate_course(MINOR_COURSE_ID, ScaleType.MINOR, note_alias=NoteAlias.RELATIVE_MINOR)
