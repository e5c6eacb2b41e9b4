import pytest

from subjectfinder.session import SearchSession, describe_selection, format_results


class _RecordingLogger:
    def __init__(self):
        self.records = []

    def info(self, message):
        self.records.append(("info", message))

    def error(self, message):
        self.records.append(("error", message))


@pytest.fixture
def students_file(tmp_path):
    path = tmp_path / "students.txt"
    path.write_text(
        "Ivanov math\nIvanov physics\nPetrov math\nPetrov art\nSidorov art\n",
        encoding="utf-8",
    )
    return path


def test_describe_selection():
    assert describe_selection({"physics", "math"}, {"art"}) == (
        "Обязательные: math, physics; Исключаемые: art"
    )
    assert describe_selection([], []) == "Обязательные: ; Исключаемые: "


def test_format_results():
    assert format_results([]) == "Нет подходящих студентов."
    assert format_results(["Ivanov", "Petrov"]) == "Ivanov\nPetrov"


def test_session_loads_subjects(students_file):
    logger = _RecordingLogger()
    session = SearchSession(students_file, logger)
    assert session.subjects == ["art", "math", "physics"]
    assert session.error is None
    assert logger.records == [("info", f"Открытие файла: {students_file}")]


def test_search_logs_and_stores_results(students_file):
    logger = _RecordingLogger()
    session = SearchSession(students_file, logger)
    found = session.search(["math"], ["art"])
    assert found == ["Ivanov"]
    assert session.results == found
    assert session.can_clear
    assert logger.records[-2:] == [
        ("info", "Обязательные: math; Исключаемые: art"),
        ("info", "Найдено студентов: 1"),
    ]


def test_clear_resets_results(students_file):
    session = SearchSession(students_file, _RecordingLogger())
    session.search([], [])
    assert session.results == ["Ivanov", "Petrov", "Sidorov"]
    session.clear()
    assert session.results == []
    assert not session.can_clear


def test_missing_file_is_reported(tmp_path):
    logger = _RecordingLogger()
    missing = tmp_path / "absent.txt"
    session = SearchSession(missing, logger)
    assert session.error == f"Не удалось открыть файл: {missing}"
    assert session.subjects == []
    assert logger.records[-1] == ("error", f"Ошибка загрузки файла: {session.error}")
    assert session.search([], []) == []