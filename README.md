# subjectfinder

A small desktop tool that finds the students who take a given set of subjects
and do not take another set. The interface is built with Tkinter, which comes
with Python (on some Linux systems it is packaged separately, e.g. `python3-tk`).
Its labels and messages are in Russian.

## Input file

Plain text, UTF-8, one enrolment per line: a surname and a subject, separated
by whitespace. Blank lines are skipped. Anything after the second word is
ignored.

```
Ivanov Math
Ivanov Physics
Petrov Math
Sidorova Chemistry
```

A non-blank line with fewer than two words is an error that names the line
number; a file that cannot be opened is an error too.

## Running

```
pip install .
subjectfinder
```

A welcome dialog asks for a roster file; closing it without choosing a file
ends the program. Each opened file gets its own tab, titled with the part of
the path after the last `/`. The tab lists every subject twice, in
alphabetical order: once for the subjects a student must take, once for the
subjects a student must not take. Pick any number in each list and press the
search button ("Поиск"); matching surnames are shown in alphabetical order, or
a "no matching students" message if there are none. The clear button
("Очистить") resets both selections and the results; it is enabled only after
a search.

More files can be opened in new tabs from the "Файл" menu or from the button
in each tab. A tab is closed from the same menu ("Закрыть вкладку") or with a
middle click on it. Closing the last tab closes the window and returns to the
welcome dialog.

If a file cannot be loaded, an error box shows the reason and the tab opens
with empty subject lists.

## Log

Each session writes a log to `log/app_YYYYmmdd_HHMMSS.log` relative to the
working directory, with the files opened, load errors, the searches made and
how many students each one found. The `log` directory is not created: if it
does not exist, nothing is logged.

## Library use

```python
from subjectfinder.students_data import load_students, find_students

student_subjects, subject_students = load_students("roster.txt")
find_students(student_subjects, required={"Math"}, excluded={"Physics"})
# ['Petrov']
```

`load_students` raises `subjectfinder.students_data.StudentsFileError` for an
unreadable file or a malformed line.

`subjectfinder.session.SearchSession` loads a file and runs searches over it
without the interface, logging through a `subjectfinder.logger.Logger`
(`Logger.instance()` by default). A load error is kept in its `error`
attribute instead of being raised. `Logger` can be given its own directory and
used as a context manager, which writes the end-of-session line on exit.

## Tests

```
pip install .[test]
pytest
```