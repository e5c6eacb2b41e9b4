"""The search state behind one opened students file."""

from __future__ import annotations

import os
from collections.abc import Iterable

from subjectfinder.logger import Logger
from subjectfinder.students_data import StudentsFileError, find_students, load_students

NO_RESULTS = "Нет подходящих студентов."


def describe_selection(required: Iterable[str], excluded: Iterable[str]) -> str:
    """Describe a search request the way it is written to the log."""
    return (
        f"Обязательные: {', '.join(sorted(set(required)))}; "
        f"Исключаемые: {', '.join(sorted(set(excluded)))}"
    )


def format_results(found: Iterable[str]) -> str:
    """Text shown for a list of found surnames."""
    found = list(found)
    return "\n".join(found) if found else NO_RESULTS


class SearchSession:
    """Loads a students file and runs subject searches over it."""

    def __init__(self, filename: str | os.PathLike[str], logger: Logger | None = None) -> None:
        self.filename = os.fspath(filename)
        self.logger = Logger.instance() if logger is None else logger
        self.student_subjects: dict[str, set[str]] = {}
        self.subjects: list[str] = []
        self.error: str | None = None
        self.results: list[str] = []
        self.can_clear = False

        self.logger.info(f"Открытие файла: {self.filename}")
        try:
            data = load_students(self.filename)
        except StudentsFileError as exc:
            self.error = str(exc)
            self.logger.error(f"Ошибка загрузки файла: {exc}")
        else:
            self.student_subjects = data.student_subjects
            self.subjects = sorted(data.subject_students)

    def search(self, required: Iterable[str], excluded: Iterable[str]) -> list[str]:
        """Find matching students, log the request and the count, keep the result."""
        required_set, excluded_set = set(required), set(excluded)
        self.logger.info(describe_selection(required_set, excluded_set))
        self.results = find_students(self.student_subjects, required_set, excluded_set)
        self.logger.info(f"Найдено студентов: {len(self.results)}")
        self.can_clear = True
        return self.results

    def clear(self) -> None:
        self.results = []
        self.can_clear = False