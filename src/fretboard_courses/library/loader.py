"""
Course library loader - discovers and loads course configs.

Configs are YAML files named after the course (major_scale.yaml).
Project configs override library configs with the same name.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from fretboard_courses.constants import ErrorMessages
from fretboard_courses.errors import ConfigurationError
from fretboard_courses.generator.course import generate_course_from_config
from fretboard_courses.models.config import CourseConfig
from fretboard_courses.models.course import CourseSpec

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "courses"


class CourseLibrary:
    """
    Discovers and loads course configs.

    Configs are loaded from YAML files in the library and project directories.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the library.

        Args:
            library_path: Path to built-in course configs
            project_path: Path to project course configs
        """
        self.library_path = library_path or LIBRARY_PATH
        self.project_path = project_path
        self._cache: dict[str, CourseConfig] = {}

    def list_courses(self) -> list[str]:
        """
        List all available course names, sorted.

        Returns names from both library and project.
        """
        names: set[str] = set()
        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                names.update(path.stem for path in directory.glob("*.yaml"))
        return sorted(names)

    def get_config(self, name: str) -> CourseConfig:
        """
        Get a course config by name.

        Project configs take precedence over library configs.

        Args:
            name: Course name

        Returns:
            The parsed CourseConfig

        Raises:
            ConfigurationError: If the config is missing or invalid
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                config = self._load_config_file(path)
                self._cache[name] = config
                return config

        raise ConfigurationError(ErrorMessages.COURSE_NOT_FOUND.format(name=name))

    def build(self, name: str) -> CourseSpec:
        """Generate the course for a config name."""
        config = self.get_config(name)
        logger.debug("Generating course %s from config '%s'", config.course_id, name)
        return generate_course_from_config(config)

    def build_all(self) -> list[CourseSpec]:
        """Generate every configured course, in name order."""
        return [self.build(name) for name in self.list_courses()]

    def _load_config_file(self, path: Path) -> CourseConfig:
        """Load a course config from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                ErrorMessages.INVALID_COURSE_CONFIG.format(name=path.stem, reason=e)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                ErrorMessages.INVALID_COURSE_CONFIG.format(
                    name=path.stem, reason="expected a mapping"
                )
            )

        try:
            return CourseConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(
                ErrorMessages.INVALID_COURSE_CONFIG.format(name=path.stem, reason=e)
            ) from e

    def clear_cache(self) -> None:
        """Clear the config cache."""
        self._cache.clear()
