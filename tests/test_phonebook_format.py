from dslabs.phonebook import Date, Position, Subscriber, make_key_table, sort_keys
from dslabs.phonebook_format import (
    format_by_keys,
    format_header,
    format_key_table,
    format_subscriber,
    format_table,
)


def _friend(lastname, day=5, month=3, year=1990):
    return Subscriber(lastname, "Ivan", "+7900", "Main st 1", Date(day, month, year))


def _colleague(lastname):
    return Subscriber(lastname, "Anna", "12345", "Second st 2", Position("engineer", "Acme"))


def _fields(line):
    return [field.strip() for field in line.split(" | ")]


def test_header_titles():
    assert _fields(format_header()) == [
        "ID",
        "Фамилия",
        "Имя",
        "Номер",
        "Адрес",
        "Статус",
        "Дата рождения/Должность",
        "Год рождения/Организация",
    ]


def test_rows_align_with_header():
    width = len(format_header())
    assert len(format_subscriber(_friend("Petrov"), 0)) == width
    assert len(format_subscriber(_colleague("Иванов"), 12)) == width


def test_columns_align_with_header():
    header_widths = [len(part) for part in format_header().split(" | ")]
    for row in (format_subscriber(_friend("Petrov"), 3), format_subscriber(_colleague("Sidorov"), 4)):
        assert [len(part) for part in row.split(" | ")] == header_widths


def test_friend_row():
    assert _fields(format_subscriber(_friend("Petrov", 5, 3, 1990), 0)) == [
        "0",
        "Petrov",
        "Ivan",
        "+7900",
        "Main st 1",
        "Друг",
        "5.03",
        "1990",
    ]


def test_colleague_row():
    assert _fields(format_subscriber(_colleague("Sidorov"), 7)) == [
        "7",
        "Sidorov",
        "Anna",
        "12345",
        "Second st 2",
        "Коллега",
        "engineer",
        "Acme",
    ]


def test_format_table():
    table = [_friend("Petrov"), _colleague("Sidorov")]
    lines = format_table(table).split("\n")
    assert lines[0] == format_header()
    assert lines[1:] == [format_subscriber(table[0], 0), format_subscriber(table[1], 1)]


def test_format_key_table():
    keys = make_key_table([_friend("Petrov"), _colleague("Abel")])
    lines = format_key_table(keys).split("\n")
    assert _fields(lines[0]) == ["Фамилия", "Индекс в исходной матрице"]
    assert [_fields(line) for line in lines[1:]] == [["Petrov", "0"], ["Abel", "1"]]


def test_format_by_keys_orders_rows():
    table = [_friend("Petrov"), _colleague("Abel"), _friend("Mills")]
    keys = sort_keys(make_key_table(table))
    lines = format_by_keys(table, keys).split("\n")
    assert len(lines) == len(table)
    assert [_fields(line)[1] for line in lines] == ["Abel", "Mills", "Petrov"]
    assert [_fields(line)[0] for line in lines] == ["1", "2", "0"]