"""Reading student/subject pairs from a text file and searching them."""

from __future__ import annotations

import os
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import NamedTuple


class StudentsFileError(Exception):
    """Raised when a students file cannot be opened or has a malformed line."""


class StudentsData(NamedTuple):
    """Both directions of the student/subject relation."""

    student_subjects: dict[str, set[str]]
    subject_students: dict[str, set[str]]


def load_students(path: str | os.PathLike[str]) -> StudentsData:
    """Read lines of ``surname subject`` pairs from *path*.

    Empty lines are skipped and words after the second are ignored.
    Raises StudentsFileError if the file cannot be opened or a line
    holds fewer than two words.
    """
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise StudentsFileError(f"Не удалось открыть файл: {os.fspath(path)}") from exc

    student_subjects: defaultdict[str, set[str]] = defaultdict(set)
    subject_students: defaultdict[str, set[str]] = defaultdict(set)
    with handle:
        for number, line in enumerate(handle, start=1):
            line = line.rstrip("\n")
            if not line:
                continue
            fields = line.split()
            if len(fields) < 2:
                raise StudentsFileError(f"Некорректный формат в строке {number}")
            surname, subject = fields[:2]
            student_subjects[surname].add(subject)
            subject_students[subject].add(surname)
    return StudentsData(dict(student_subjects), dict(subject_students))


def find_students(
    student_subjects: Mapping[str, Iterable[str]],
    required: Iterable[str],
    excluded: Iterable[str],
) -> list[str]:
    """Return, in sorted order, the students taking every required subject
    and none of the excluded ones."""
    required_set = set(required)
    excluded_set = set(excluded)
    found = []
    for surname, subjects in sorted(student_subjects.items()):
        taken = set(subjects)
        if required_set <= taken and excluded_set.isdisjoint(taken):
            found.append(surname)
    return found