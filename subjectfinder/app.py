"""Desktop interface: a welcome dialog and a tabbed window of searches."""

from __future__ import annotations

import argparse
import tkinter as tk
from collections.abc import Callable
from tkinter import filedialog, messagebox, ttk

from subjectfinder.logger import Logger
from subjectfinder.session import SearchSession, format_results

_CHOOSE_TITLE = "Выберите файл со студентами"
_OPEN_ANOTHER = "Открыть ещё одно окно"


def tab_title(filename: str) -> str:
    """The part of *filename* after its last slash."""
    return filename.rsplit("/", 1)[-1]


class WelcomeDialog:
    """Asks for the first students file; closing it without a choice cancels."""

    def __init__(self, root: tk.Misc) -> None:
        self.selected_file = ""
        self.window = tk.Toplevel(root)
        self.window.title("Добро пожаловать")
        ttk.Label(
            self.window,
            text="Для начала работы выберите файл со списком студентов и предметов.",
        ).pack(padx=12, pady=(12, 6))
        ttk.Button(self.window, text="Выбрать файл", command=self.choose_file).pack(pady=(0, 12))

    def choose_file(self) -> None:
        filename = filedialog.askopenfilename(parent=self.window, title=_CHOOSE_TITLE)
        if filename:
            self.selected_file = filename
            self.window.destroy()


class StudentTab(ttk.Frame):
    """Subject selection lists, search controls and the result text for one file."""

    def __init__(self, master: tk.Misc, filename: str, on_open_another: Callable[[], None]) -> None:
        super().__init__(master)
        self.session = SearchSession(filename, Logger.instance())
        if self.session.error:
            messagebox.showerror("Ошибка", self.session.error, parent=master)

        lists = ttk.Frame(self)
        lists.pack(fill=tk.BOTH, expand=True)
        ttk.Label(lists, text="Обязательные предметы:").pack(side=tk.LEFT, anchor=tk.N)
        self.required_list = tk.Listbox(lists, selectmode=tk.MULTIPLE, exportselection=False)
        self.required_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        ttk.Label(lists, text="Исключаемые предметы:").pack(side=tk.LEFT, anchor=tk.N)
        self.excluded_list = tk.Listbox(lists, selectmode=tk.MULTIPLE, exportselection=False)
        self.excluded_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        for subject in self.session.subjects:
            self.required_list.insert(tk.END, subject)
            self.excluded_list.insert(tk.END, subject)

        ttk.Button(self, text="Поиск", command=self.search).pack(fill=tk.X)
        self.clear_button = ttk.Button(self, text="Очистить", command=self.clear)
        self.clear_button.state(["disabled"])
        self.clear_button.pack(fill=tk.X)
        ttk.Button(self, text=_OPEN_ANOTHER, command=on_open_another).pack(fill=tk.X)

        self.result_text = tk.Text(self, height=10, state=tk.DISABLED)
        self.result_text.pack(fill=tk.BOTH, expand=True)

    @staticmethod
    def _selected(listbox: tk.Listbox) -> set[str]:
        return {listbox.get(index) for index in listbox.curselection()}

    def _show(self, text: str) -> None:
        self.result_text.configure(state=tk.NORMAL)
        self.result_text.delete("1.0", tk.END)
        self.result_text.insert("1.0", text)
        self.result_text.configure(state=tk.DISABLED)

    def search(self) -> None:
        found = self.session.search(
            self._selected(self.required_list), self._selected(self.excluded_list)
        )
        self._show(format_results(found))
        self.clear_button.state(["!disabled"])

    def clear(self) -> None:
        self.required_list.selection_clear(0, tk.END)
        self.excluded_list.selection_clear(0, tk.END)
        self.session.clear()
        self._show("")
        self.clear_button.state(["disabled"])


class MainWindow:
    """Holds one tab per opened file; closing the last tab closes the window."""

    def __init__(self, root: tk.Tk, first_file: str) -> None:
        self.root = root
        self.notebook = ttk.Notebook(root)
        self.notebook.pack(fill=tk.BOTH, expand=True)
        self.notebook.bind("<Button-2>", self._on_middle_click)

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label=_OPEN_ANOTHER, command=self.open_file)
        file_menu.add_command(label="Закрыть вкладку", command=self._close_current_tab)
        menubar.add_cascade(label="Файл", menu=file_menu)
        root.config(menu=menubar)

        self.open_tab(first_file)

    def open_file(self) -> None:
        filename = filedialog.askopenfilename(parent=self.root, title=_CHOOSE_TITLE)
        if filename:
            self.open_tab(filename)

    def open_tab(self, filename: str) -> None:
        tab = StudentTab(self.notebook, filename, self.open_file)
        self.notebook.add(tab, text=tab_title(filename))
        self.notebook.select(tab)

    def close_tab(self, index: int) -> None:
        widget = self.notebook.nametowidget(self.notebook.tabs()[index])
        self.notebook.forget(index)
        widget.destroy()
        if not self.notebook.tabs():
            self.root.destroy()

    def _close_current_tab(self) -> None:
        if self.notebook.tabs():
            self.close_tab(self.notebook.index("current"))

    def _on_middle_click(self, event: tk.Event) -> None:
        try:
            index = self.notebook.index(f"@{event.x},{event.y}")
        except tk.TclError:
            return
        self.close_tab(index)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="subjectfinder",
        description="Find students by the subjects they take.",
    )
    parser.parse_args(argv)
    Logger.instance()
    while True:
        root = tk.Tk()
        root.withdraw()
        welcome = WelcomeDialog(root)
        root.wait_window(welcome.window)
        if not welcome.selected_file:
            root.destroy()
            break
        root.deiconify()
        MainWindow(root, welcome.selected_file)
        root.mainloop()
    return 0