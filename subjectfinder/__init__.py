"""Search a student roster by required and excluded subjects, with a Tkinter interface."""

__version__ = "1.0.0"
__all__ = ["students_data", "logger", "session", "app"]