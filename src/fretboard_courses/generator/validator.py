"""
Course Validator - checks a generated course before it is handed on.

Validates:
- One lesson per key, twelve in total
- Lesson and exercise ids are unique and derived from the course id
- Lesson dependencies form a single linear chain
- Every exercise answer lists the notes of the lesson's scale
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fretboard_courses.constants import LESSONS_PER_COURSE, MetadataKey
from fretboard_courses.core.scale import ScaleType
from fretboard_courses.errors import ConfigurationError
from fretboard_courses.generator.exercises import exercise_id_for, lesson_id_for
from fretboard_courses.models.course import CourseSpec


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Course must not be stored
    WARNING = "warning"  # Usable but suspicious


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating a course."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def codes(self) -> set[str]:
        """Get the codes of all issues."""
        return {i.code for i in self.issues}

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class CourseValidator:
    """Validates course structure and content."""

    def __init__(self, scale: ScaleType | None = None) -> None:
        """
        Args:
            scale: Scale the course should teach. When omitted, it is looked
                up from the course's scale_type metadata.
        """
        self.scale = scale

    def validate(self, course: CourseSpec) -> ValidationResult:
        """
        Validate a course.

        Args:
            course: The course to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_lessons(course, result)
        self._validate_ids(course, result)
        self._validate_dependency_chain(course, result)
        self._validate_answers(course, result)

        return result

    def _validate_lessons(self, course: CourseSpec, result: ValidationResult) -> None:
        """Validate lesson count and keys."""
        if len(course.lessons) != LESSONS_PER_COURSE:
            result.add_error(
                "LESSON_COUNT",
                f"Course has {len(course.lessons)} lessons, expected {LESSONS_PER_COURSE}",
                "lessons",
            )

        keys = course.lesson_keys()
        if len(set(keys)) != len(keys):
            result.add_error("DUPLICATE_KEY", "Two lessons share the same key", "lessons")

        for lesson in course.lessons:
            if not lesson.exercises:
                result.add_warning(
                    "NO_EXERCISES", f"Lesson '{lesson.id}' has no exercises", lesson.id
                )

    def _validate_ids(self, course: CourseSpec, result: ValidationResult) -> None:
        """Validate that ids are unique and derived from the course id."""
        lesson_ids = course.lesson_ids()
        if len(set(lesson_ids)) != len(lesson_ids):
            result.add_error("DUPLICATE_LESSON_ID", "Lesson ids are not unique", "lessons")

        exercise_ids: set[str] = set()
        for lesson in course.lessons:
            if lesson.id != lesson_id_for(course.id, lesson.key):
                result.add_error(
                    "LESSON_ID_FORMAT",
                    f"Lesson id '{lesson.id}' does not match its key {lesson.key}",
                    lesson.id,
                )

            for exercise in lesson.exercises:
                if exercise.id in exercise_ids:
                    result.add_error(
                        "DUPLICATE_EXERCISE_ID",
                        f"Exercise id '{exercise.id}' is used more than once",
                        lesson.id,
                    )
                exercise_ids.add(exercise.id)

                if exercise.id != exercise_id_for(course.id, lesson.key, exercise.string):
                    result.add_error(
                        "EXERCISE_ID_FORMAT",
                        f"Exercise id '{exercise.id}' does not match its key and string",
                        lesson.id,
                    )

    def _validate_dependency_chain(self, course: CourseSpec, result: ValidationResult) -> None:
        """Validate that lesson dependencies form one linear chain."""
        if not course.lessons:
            return

        lesson_ids = set(course.lesson_ids())
        roots = [lesson for lesson in course.lessons if not lesson.dependencies]
        if len(roots) != 1:
            result.add_error(
                "CHAIN_ROOTS",
                f"Expected exactly one lesson without dependencies, found {len(roots)}",
                "lessons",
            )

        dependents: dict[str, int] = {}
        for lesson in course.lessons:
            if len(lesson.dependencies) > 1:
                result.add_error(
                    "CHAIN_BRANCH",
                    f"Lesson depends on {len(lesson.dependencies)} lessons",
                    lesson.id,
                )
            for dependency in lesson.dependencies:
                if dependency not in lesson_ids:
                    result.add_error(
                        "UNKNOWN_DEPENDENCY",
                        f"Dependency '{dependency}' is not a lesson of this course",
                        lesson.id,
                    )
                dependents[dependency] = dependents.get(dependency, 0) + 1

        for lesson_id, count in dependents.items():
            if count > 1:
                result.add_error(
                    "CHAIN_BRANCH", f"{count} lessons depend on the same lesson", lesson_id
                )

        # Follow dependencies back from the last lesson
        visited: set[str] = set()
        current = course.lessons[-1]
        while True:
            if current.id in visited:
                result.add_error("CHAIN_CYCLE", "Lesson dependencies form a cycle", current.id)
                return
            visited.add(current.id)
            if not current.dependencies:
                break
            previous = course.get_lesson(current.dependencies[0])
            if previous is None:
                break
            current = previous

        if visited != lesson_ids:
            result.add_error(
                "CHAIN_INCOMPLETE",
                f"Dependency chain from the last lesson reaches {len(visited)} "
                f"of {len(lesson_ids)} lessons",
                "lessons",
            )

    def _validate_answers(self, course: CourseSpec, result: ValidationResult) -> None:
        """Validate that every answer lists the notes of the lesson's scale."""
        scale = self.scale
        if scale is None:
            scale_names = course.metadata.get(MetadataKey.SCALE_TYPE.value, ())
            if not scale_names:
                result.add_warning(
                    "UNKNOWN_SCALE", "Course has no scale_type metadata", "metadata"
                )
                return
            try:
                scale = ScaleType.parse(scale_names[0])
            except ConfigurationError:
                result.add_warning(
                    "UNKNOWN_SCALE", f"Unknown scale type '{scale_names[0]}'", "metadata"
                )
                return

        for lesson in course.lessons:
            answer = str(scale.notes(lesson.key))
            for exercise in lesson.exercises:
                if f": {answer}." not in exercise.back.contents:
                    result.add_error(
                        "WRONG_ANSWER",
                        f"Exercise answer does not list the notes {answer}",
                        exercise.id,
                    )


def validate_course(course: CourseSpec, scale: ScaleType | None = None) -> ValidationResult:
    """
    Validate a course.

    Convenience function that creates a validator and runs validation.

    Args:
        course: The course to validate
        scale: Scale the course should teach (default: from metadata)

    Returns:
        ValidationResult with any issues found
    """
    return CourseValidator(scale).validate(course)
