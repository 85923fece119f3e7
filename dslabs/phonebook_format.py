"""Text layout of phone book tables for the terminal."""

from __future__ import annotations

from typing import Iterable, Sequence

from dslabs.phonebook import (
    ADDRESS_LEN,
    JOB_LEN,
    LASTNAME_LEN,
    NAME_LEN,
    NUMBER_LEN,
    ORGANISATION_LEN,
    Date,
    KeyEntry,
    Subscriber,
)

STATUS_LEN = 7
_SEP = " | "


def format_subscriber(subscriber: Subscriber, index: int) -> str:
    """Return one table row for a record."""
    head = _SEP.join(
        [
            f"{index:3d}",
            f"{subscriber.lastname:>{LASTNAME_LEN}}",
            f"{subscriber.name:>{NAME_LEN}}",
            f"{subscriber.number:>{NUMBER_LEN}}",
            f"{subscriber.address:>{ADDRESS_LEN}}",
        ]
    )
    info = subscriber.info
    if isinstance(info, Date):
        tail = _SEP.join(
            [
                f"{'Друг':>{STATUS_LEN}}",
                f"{info.day:>{JOB_LEN - 3}d}.{info.month:02d}",
                f"{info.year:>{ORGANISATION_LEN}d}",
            ]
        )
    else:
        tail = _SEP.join(
            [
                f"{'Коллега':>{STATUS_LEN}}",
                f"{info.job:>{JOB_LEN}}",
                f"{info.organisation:>{ORGANISATION_LEN}}",
            ]
        )
    return head + _SEP + tail


def format_header() -> str:
    """Return the column titles of the table."""
    return _SEP.join(
        [
            f"{'ID':>3}",
            f"{'Фамилия':>{LASTNAME_LEN}}",
            f"{'Имя':>{NAME_LEN}}",
            f"{'Номер':>{NUMBER_LEN}}",
            f"{'Адрес':>{ADDRESS_LEN}}",
            f"{'Статус':>{STATUS_LEN}}",
            f"{'Дата рождения/Должность':>{JOB_LEN}}",
            f"{'Год рождения/Организация':>{ORGANISATION_LEN}}",
        ]
    )


def format_table(subscribers: Iterable[Subscriber]) -> str:
    """Return the header followed by every record with its index."""
    rows = [format_header()]
    rows += [format_subscriber(subscriber, index) for index, subscriber in enumerate(subscribers)]
    return "\n".join(rows)


def format_key_table(keys: Iterable[KeyEntry]) -> str:
    """Return the key table: last names and their record indices."""
    rows = [f"{'Фамилия':>{LASTNAME_LEN}}{_SEP}Индекс в исходной матрице"]
    rows += [f"{key.value:>{LASTNAME_LEN}}{_SEP}{key.index}" for key in keys]
    return "\n".join(rows)


def format_by_keys(subscribers: Sequence[Subscriber], keys: Iterable[KeyEntry]) -> str:
    """Return the records in key order, each with its original index."""
    return "\n".join(format_subscriber(subscribers[key.index], key.index) for key in keys)