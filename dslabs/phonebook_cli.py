"""Interactive menu for loading, editing, sorting and searching a phone book."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from pathlib import Path
from typing import Callable, TextIO, TypeVar

from dslabs.phonebook import (
    ADDRESS_LEN,
    JOB_LEN,
    LASTNAME_LEN,
    MAX_DAY,
    MAX_MONTH,
    MAX_TABLE_LEN,
    MAX_YEAR,
    NAME_LEN,
    NUMBER_LEN,
    ORGANISATION_LEN,
    Date,
    EmptyTableError,
    Info,
    Position,
    Status,
    Subscriber,
    TableFormatError,
    TableTooLongError,
    find_by_lastname,
    friends_with_near_birthday,
    make_key_table,
    parse_number,
    parse_text,
    read_table,
    sort_keys,
    sort_subscribers,
    write_table,
)
from dslabs.phonebook_analysis import SIZES, format_report, measure
from dslabs.phonebook_format import (
    format_by_keys,
    format_header,
    format_key_table,
    format_subscriber,
    format_table,
)

FILENAME_LEN = 30

_FLUSH_MESSAGE = "Ошибка ввода! (Если вы не видите сообщение о причине ошибке, нажмите Enter)"
_EOF_MESSAGE = "Вы нажали ctrl+d или передали на ввод некорректный файл, не надо так!"
_DIGITS = frozenset("0123456789")

_T = TypeVar("_T")


class MenuItem(IntEnum):
    EXIT = 1
    READ_TABLE = 2
    SAVE_TABLE = 3
    PRINT_TABLE = 4
    PRINT_KEY_TABLE = 5
    SORT_TABLE = 6
    SORT_KEY_TABLE = 7
    SORT_TABLE_WITH_KEY_TABLE = 8
    ADD_RECORD = 9
    DELETE_RECORD = 10
    PRINT_FRIENDS_WITH_NEAR_BDAY = 11
    RUN_ANALYSIS = 12


_MENU_TITLES = {
    MenuItem.EXIT: "Выйти из программы",
    MenuItem.READ_TABLE: "Считать таблицу из файла",
    MenuItem.SAVE_TABLE: "Сохранить таблицу в файл",
    MenuItem.PRINT_TABLE: "Вывести исходную таблицу",
    MenuItem.PRINT_KEY_TABLE: "Вывести исходную таблицу ключей",
    MenuItem.SORT_TABLE: "Вывести отсортированную таблицу",
    MenuItem.SORT_KEY_TABLE: "Вывести отсортированную таблицу ключей",
    MenuItem.SORT_TABLE_WITH_KEY_TABLE: (
        "Вывести исходную таблицу в отсортированном виде, используя отсортированную таблицу ключей"
    ),
    MenuItem.ADD_RECORD: "Добавить запись в конец таблицы",
    MenuItem.DELETE_RECORD: "Удалить запись из таблицы",
    MenuItem.PRINT_FRIENDS_WITH_NEAR_BDAY: (
        "Вывести список всех друзей, которых необходимо поздравить с днем рождения в ближайшую неделю"
    ),
    MenuItem.RUN_ANALYSIS: "Провести сравнение различных способов и алгоритмов сортировок",
}

_ALLOWED_ON_EMPTY = frozenset(
    {MenuItem.EXIT, MenuItem.READ_TABLE, MenuItem.ADD_RECORD, MenuItem.RUN_ANALYSIS}
)


class _InputClosed(Exception):
    """The input stream ended while a value was expected."""


def _parse_phone(line: str) -> str:
    try:
        number = parse_text(line, NUMBER_LEN)
    except ValueError:
        raise ValueError(f"Введите номер не длиннее {NUMBER_LEN} символов!") from None
    if number[0] not in _DIGITS and number[0] != "+":
        raise ValueError("Номер может начинаться только с цифры или плюса!")
    if not set(number[1:]) <= _DIGITS:
        raise ValueError("Номер может содержать только цифры!")
    return number


def _parse_status(line: str) -> Status:
    try:
        text = parse_text(line, 1)
    except ValueError:
        raise ValueError("Введите только одну цифру!") from None
    if text not in {str(status.value) for status in Status}:
        raise ValueError(f"Введите только {Status.FRIEND.value} или {Status.COLLEAGUE.value}!")
    return Status(int(text))


class PhonebookShell:
    """Menu-driven session over one phone book table."""

    analysis_file = Path("big_table.txt")

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.table: list[Subscriber] = []

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _InputClosed
        return line

    def _ask(self, parse: Callable[[str], _T], message: str | None = None) -> _T:
        while True:
            line = self._readline()
            try:
                return parse(line)
            except ValueError as error:
                self._say(_FLUSH_MESSAGE, message if message is not None else str(error))

    def _ask_text(self, max_len: int, message: str) -> str:
        return self._ask(lambda line: parse_text(line, max_len), message)

    def _ask_number(self, max_value: int, message: str) -> int:
        return self._ask(lambda line: parse_number(line, max_value), message)

    def _ask_date(self, year_prompt: str, month_prompt: str, day_prompt: str) -> Date:
        self._say(year_prompt)
        year = self._ask_number(MAX_YEAR, f"Введите год от 1 до {MAX_YEAR}!")
        self._say(month_prompt)
        month = self._ask_number(MAX_MONTH, f"Введите месяц от 1 до {MAX_MONTH}!")
        self._say(day_prompt)
        day = self._ask_number(MAX_DAY, f"Введите день от 1 до {MAX_DAY}!")
        return Date(day, month, year)

    def _open_file(self, mode: str) -> TextIO:
        while True:
            line = self._readline()
            if not line.endswith("\n") or len(line.encode("utf-8")) > FILENAME_LEN:
                self._say(_FLUSH_MESSAGE, f"Введите имя файла не длиннее {FILENAME_LEN} символов!")
                continue
            try:
                return open(line[:-1], mode, encoding="utf-8")
            except OSError:
                self._say("Введите корректное имя файла!")

    def _load_table(self, stream: TextIO) -> list[Subscriber] | None:
        try:
            return read_table(stream)
        except TableTooLongError:
            self._say("Слишком длинный файл!")
        except TableFormatError:
            self._say("Некорректная структура файла!")
        except EmptyTableError:
            self._say("Пустой файл!")
        return None

    def menu_text(self) -> str:
        """Return the numbered list of menu items."""
        return "\n".join(f"{item.value}: {_MENU_TITLES[item]}" for item in MenuItem)

    def _read_table(self) -> None:
        self._say("Введите имя файла с таблицей:")
        with self._open_file("r") as stream:
            subscribers = self._load_table(stream)
        self.table = subscribers or []
        if subscribers:
            self._say("Таблица успешно считана")

    def _save_table(self) -> None:
        self._say("Введите имя файла, в который будет сохранена таблица:")
        with self._open_file("w") as stream:
            write_table(self.table, stream)
        self._say("Таблица успешно записана в файл")

    def _print_table(self) -> None:
        self._say(format_table(self.table))

    def _print_key_table(self) -> None:
        self._say(format_key_table(make_key_table(self.table)))

    def _sort_table(self) -> None:
        self.table = sort_subscribers(self.table)
        self._say(format_table(self.table))

    def _sort_key_table(self) -> None:
        self._say(format_key_table(sort_keys(make_key_table(self.table))))

    def _sort_with_key_table(self) -> None:
        keys = sort_keys(make_key_table(self.table))
        self._say(format_by_keys(self.table, keys))

    def _read_subscriber(self) -> Subscriber:
        self._say("Введите строку - фамилию:")
        lastname = self._ask_text(LASTNAME_LEN, f"Введите фамилию не длиннее {LASTNAME_LEN} символов!")
        self._say("Введите строку - имя:")
        name = self._ask_text(NAME_LEN, f"Введите имя не длиннее {NAME_LEN} символов!")
        self._say("Введите строку - номер в формате [+][0-9]*:")
        number = self._ask(_parse_phone)
        self._say("Введите строку - адрес:")
        address = self._ask_text(ADDRESS_LEN, f"Введите адрес не длиннее {ADDRESS_LEN} символов!")
        self._say(
            f"Введите число - статус абонента({Status.FRIEND.value} - друзья, "
            f"{Status.COLLEAGUE.value} - коллеги):"
        )
        status = self._ask(_parse_status)

        info: Info
        if status is Status.FRIEND:
            info = self._ask_date(
                "Введите число - год рождения:",
                "Введите число - месяц рождения:",
                "Введите число - день рождения:",
            )
        else:
            self._say("Введите строку - должность:")
            job = self._ask_text(JOB_LEN, f"Введите должность длиной до до {JOB_LEN}!")
            self._say("Введите строку - организацию:")
            organisation = self._ask_text(
                ORGANISATION_LEN, f"Введите организацию длиной до до {ORGANISATION_LEN}!"
            )
            info = Position(job, organisation)
        return Subscriber(lastname, name, number, address, info)

    def _add_record(self) -> None:
        if len(self.table) >= MAX_TABLE_LEN:
            self._say("Таблица уже максимального размера!")
            return
        self.table.append(self._read_subscriber())
        self._say("Абонент успешно добавлен в конец таблицы")

    def _delete_record(self) -> None:
        self._say("Введите строку - фамилию абонента, которого вы хотите удалить:")
        lastname = self._ask_text(LASTNAME_LEN, f"Введите фамилию не длиннее {LASTNAME_LEN} символов!")
        index = find_by_lastname(self.table, lastname)
        if index is None:
            self._say("Абонент с введенной фамилией не найден")
            return
        del self.table[index]
        self._say(f"Удален абонент с (бывшим) ID {index}")

    def _print_friends(self) -> None:
        today = self._ask_date(
            "Введите число - текущий год:",
            "Введите число - текущий месяц:",
            "Введите число - текущий день:",
        )
        found = friends_with_near_birthday(self.table, today)
        if not found:
            self._say("Ни одного друга не надо поздравлять!")
            return
        self._say(format_header())
        self._say(*(format_subscriber(subscriber, index) for index, subscriber in found))

    def _run_analysis(self) -> None:
        try:
            stream = open(self.analysis_file, encoding="utf-8")
        except OSError:
            self._say("Нет необходимого файла с таблицей")
            return
        with stream:
            subscribers = self._load_table(stream)
        if subscribers is None:
            return
        if len(subscribers) < max(SIZES):
            self._say("Слишком маленькая таблица в файле для заданных тестируемых размеров!")
            return
        self._say(format_report(measure(subscribers)))

    def handle(self, item: int) -> bool:
        """Carry out one menu item; return True when the session should end."""
        try:
            item = MenuItem(item)
        except ValueError:
            self._say("Неизвестный пункт меню!!?!")
            return True

        if not self.table and item not in _ALLOWED_ON_EMPTY:
            self._say(
                "Нельзя производить данное действие над пустой таблицей!",
                "Прочтите таблицу из файла или добавьте записи вручную!",
            )
            return False
        if item is MenuItem.EXIT:
            return True

        actions = {
            MenuItem.READ_TABLE: self._read_table,
            MenuItem.SAVE_TABLE: self._save_table,
            MenuItem.PRINT_TABLE: self._print_table,
            MenuItem.PRINT_KEY_TABLE: self._print_key_table,
            MenuItem.SORT_TABLE: self._sort_table,
            MenuItem.SORT_KEY_TABLE: self._sort_key_table,
            MenuItem.SORT_TABLE_WITH_KEY_TABLE: self._sort_with_key_table,
            MenuItem.ADD_RECORD: self._add_record,
            MenuItem.DELETE_RECORD: self._delete_record,
            MenuItem.PRINT_FRIENDS_WITH_NEAR_BDAY: self._print_friends,
            MenuItem.RUN_ANALYSIS: self._run_analysis,
        }
        actions[item]()
        return False

    def _ask_menu(self) -> MenuItem:
        last = max(MenuItem)
        while True:
            self._say(f"Для выбора пункта меню введите целое число от {MenuItem.EXIT.value} до {last.value}")
            line = self._readline()
            try:
                return MenuItem(parse_number(line, last.value))
            except ValueError:
                continue

    def run(self) -> int:
        """Run the menu loop until exit; return the exit status."""
        self._say(
            "Программа для работы с таблицей",
            "Для дальнейшей работы загрузите таблицу из файла с помощью меню",
        )
        try:
            while True:
                self._say(self.menu_text())
                if self.handle(self._ask_menu()):
                    return 0
        except _InputClosed:
            self._say(_EOF_MESSAGE)
            return 1


def main(argv: list[str] | None = None) -> int:
    """Start the interactive phone book session on stdin and stdout."""
    parser = argparse.ArgumentParser(description="Work with a phone book table.")
    parser.parse_args(argv)
    return PhonebookShell(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())