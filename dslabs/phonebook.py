"""Phone book of friends and colleagues: records, file format, sorting and search.

A table file holds records one after another, one field per line:
last name, first name, phone number, address, status (``0`` for a friend,
``1`` for a colleague), then either the birthday as day, month and year on
three lines or the job and the organisation on two lines.  Every line ends
with a newline.  Text limits are counted in bytes of UTF-8.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import IntEnum
from operator import attrgetter
from typing import Callable, Iterable, TextIO, TypeVar, Union

MAX_TABLE_LEN = 1000

LASTNAME_LEN = 20
NAME_LEN = 20
NUMBER_LEN = 11
ADDRESS_LEN = 25
JOB_LEN = 25
ORGANISATION_LEN = 25

MAX_DAY = 31
MAX_MONTH = 12
MAX_YEAR = 10000

# Numbers are read through a six-byte buffer that must also hold the newline.
_MAX_NUMBER_DIGITS = 4
_DIGITS = frozenset("0123456789")
_DAYS_PER_400_YEARS = 146097

_T = TypeVar("_T")


class TableFormatError(ValueError):
    """The table file does not follow the record layout."""


class EmptyTableError(ValueError):
    """The table file holds no records."""


class TableTooLongError(ValueError):
    """The table file holds more records than a table can keep."""


class Status(IntEnum):
    FRIEND = 0
    COLLEAGUE = 1


@dataclass(frozen=True)
class Date:
    day: int
    month: int
    year: int


@dataclass(frozen=True)
class Position:
    job: str
    organisation: str


Info = Union[Date, Position]


@dataclass
class Subscriber:
    """One record: a friend carries a birthday, a colleague a position."""

    lastname: str
    name: str
    number: str
    address: str
    info: Info

    @property
    def status(self) -> Status:
        return Status.FRIEND if isinstance(self.info, Date) else Status.COLLEAGUE


@dataclass(frozen=True)
class KeyEntry:
    """A sort key: the last name and the record's index in the table."""

    value: str
    index: int


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def parse_number(line: str, max_value: int) -> int:
    """Parse a positive number of at most four digits not above ``max_value``."""
    text = _strip_newline(line)
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"not a positive number: {text!r}")
    if len(text) > _MAX_NUMBER_DIGITS:
        raise ValueError(f"number is too long: {text!r}")
    value = int(text)
    if not 0 < value <= max_value:
        raise ValueError(f"number must be from 1 to {max_value}")
    return value


def parse_text(line: str, max_len: int) -> str:
    """Return a non-empty line of at most ``max_len`` bytes without its newline."""
    text = _strip_newline(line)
    if not text:
        raise ValueError("empty line")
    if len(text.encode("utf-8")) > max_len:
        raise ValueError(f"line is longer than {max_len} bytes")
    return text


def validate_phone(number: str) -> str:
    """Check that a number is a digit or ``+`` followed by digits; return it."""
    if not number or (number[0] not in _DIGITS and number[0] != "+"):
        raise ValueError("a phone number starts with a digit or '+'")
    if not set(number[1:]) <= _DIGITS:
        raise ValueError("a phone number holds only digits")
    return number


def _next_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line.endswith("\n"):
        raise TableFormatError("unexpected end of file")
    return line


def _text_field(stream: TextIO, max_len: int) -> str:
    line = _next_line(stream)
    try:
        return parse_text(line, max_len)
    except ValueError as error:
        raise TableFormatError(str(error)) from error


def _number_field(stream: TextIO, max_value: int) -> int:
    line = _next_line(stream)
    try:
        return parse_number(line, max_value)
    except ValueError as error:
        raise TableFormatError(str(error)) from error


def _read_subscriber(stream: TextIO) -> Subscriber | None:
    first = stream.readline()
    if not first:
        return None
    if not first.endswith("\n"):
        raise TableFormatError("unexpected end of file")
    try:
        lastname = parse_text(first, LASTNAME_LEN)
    except ValueError as error:
        raise TableFormatError(str(error)) from error

    name = _text_field(stream, NAME_LEN)
    number = _text_field(stream, NUMBER_LEN)
    try:
        validate_phone(number)
    except ValueError as error:
        raise TableFormatError(str(error)) from error
    address = _text_field(stream, ADDRESS_LEN)

    status = _text_field(stream, 1)
    info: Info
    if status == str(Status.FRIEND.value):
        day = _number_field(stream, MAX_DAY)
        month = _number_field(stream, MAX_MONTH)
        year = _number_field(stream, MAX_YEAR)
        info = Date(day, month, year)
    elif status == str(Status.COLLEAGUE.value):
        job = _text_field(stream, JOB_LEN)
        organisation = _text_field(stream, ORGANISATION_LEN)
        info = Position(job, organisation)
    else:
        raise TableFormatError(f"unknown status {status!r}")
    return Subscriber(lastname, name, number, address, info)


def read_table(stream: TextIO) -> list[Subscriber]:
    """Read every record of a table file.

    Raises TableFormatError, TableTooLongError or EmptyTableError.
    """
    subscribers: list[Subscriber] = []
    while (subscriber := _read_subscriber(stream)) is not None:
        if len(subscribers) == MAX_TABLE_LEN:
            raise TableTooLongError(f"more than {MAX_TABLE_LEN} records")
        subscribers.append(subscriber)
    if not subscribers:
        raise EmptyTableError("the table is empty")
    return subscribers


def write_table(subscribers: Iterable[Subscriber], stream: TextIO) -> None:
    """Write records in the table file layout."""
    for subscriber in subscribers:
        fields: list[object] = [
            subscriber.lastname,
            subscriber.name,
            subscriber.number,
            subscriber.address,
            subscriber.status.value,
        ]
        info = subscriber.info
        if isinstance(info, Date):
            fields += [info.day, info.month, info.year]
        else:
            fields += [info.job, info.organisation]
        stream.write("".join(f"{field}\n" for field in fields))


def make_key_table(subscribers: Iterable[Subscriber]) -> list[KeyEntry]:
    """Build the table of last names with their record indices."""
    return [KeyEntry(subscriber.lastname, index) for index, subscriber in enumerate(subscribers)]


def _bubble_sort(items: Iterable[_T], key: Callable[[_T], str]) -> list[_T]:
    result = list(items)
    for done in range(len(result) - 1):
        for j in range(len(result) - 1 - done):
            if key(result[j]) > key(result[j + 1]):
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def sort_subscribers(subscribers: Iterable[Subscriber]) -> list[Subscriber]:
    """Return the records ordered by last name."""
    return sorted(subscribers, key=attrgetter("lastname"))


def bubble_sort_subscribers(subscribers: Iterable[Subscriber]) -> list[Subscriber]:
    """Return the records ordered by last name, using bubble sort."""
    return _bubble_sort(subscribers, attrgetter("lastname"))


def sort_keys(keys: Iterable[KeyEntry]) -> list[KeyEntry]:
    """Return the key entries ordered by last name."""
    return sorted(keys, key=attrgetter("value"))


def bubble_sort_keys(keys: Iterable[KeyEntry]) -> list[KeyEntry]:
    """Return the key entries ordered by last name, using bubble sort."""
    return _bubble_sort(keys, attrgetter("value"))


def find_by_lastname(subscribers: Iterable[Subscriber], lastname: str) -> int | None:
    """Return the index of the first record with this last name, or None."""
    for index, subscriber in enumerate(subscribers):
        if subscriber.lastname == lastname:
            return index
    return None


def next_birthday(today: Date, birthday: Date) -> Date:
    """Return the first birthday falling on or after ``today``."""
    year = today.year
    if (birthday.month, birthday.day) < (today.month, today.day):
        year += 1
    return Date(birthday.day, birthday.month, year)


def _day_number(date: Date) -> int:
    # Out-of-range days and months roll over into the following ones.
    year = date.year + (date.month - 1) // 12
    month = (date.month - 1) % 12 + 1
    shift = 0
    while year > datetime.MAXYEAR:
        year -= 400
        shift += _DAYS_PER_400_YEARS
    while year < datetime.MINYEAR:
        year += 400
        shift -= _DAYS_PER_400_YEARS
    return datetime.date(year, month, 1).toordinal() + date.day - 1 + shift


def days_between(start: Date, end: Date) -> int:
    """Return the number of days from ``start`` to ``end``."""
    return _day_number(end) - _day_number(start)


def friends_with_near_birthday(
    subscribers: Iterable[Subscriber], today: Date
) -> list[tuple[int, Subscriber]]:
    """Return the friends whose next birthday is at most a week away, with indices."""
    found = []
    for index, subscriber in enumerate(subscribers):
        if isinstance(subscriber.info, Date):
            upcoming = next_birthday(today, subscriber.info)
            if days_between(today, upcoming) <= 7:
                found.append((index, subscriber))
    return found