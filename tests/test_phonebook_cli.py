import io
import sys

from dslabs.phonebook import (
    Date,
    Position,
    Subscriber,
    make_key_table,
    read_table,
    sort_keys,
    write_table,
)
from dslabs.phonebook_cli import MenuItem, PhonebookShell, main
from dslabs.phonebook_format import format_key_table, format_subscriber


def make_shell(text="", table=None):
    shell = PhonebookShell(io.StringIO(text), io.StringIO())
    if table is not None:
        shell.table = list(table)
    return shell


def sample_table():
    return [
        Subscriber("Smith", "John", "123", "Main st", Date(3, 1, 1990)),
        Subscriber("Adams", "Anna", "+456", "Oak st", Position("engineer", "Acme")),
        Subscriber("Brown", "Bob", "789", "Elm st", Date(20, 6, 1985)),
    ]


def test_menu_text_lists_all_items():
    lines = make_shell().menu_text().split("\n")
    assert len(lines) == len(MenuItem)
    assert lines[0] == "1: Выйти из программы"
    assert lines[-1].startswith("12: ")


def test_exit_item_ends_session():
    assert make_shell().handle(MenuItem.EXIT) is True


def test_unknown_item():
    shell = make_shell()
    assert shell.handle(99) is True
    assert "Неизвестный пункт меню!!?!" in shell.stdout.getvalue()


def test_empty_table_refuses_print():
    shell = make_shell()
    assert shell.handle(MenuItem.PRINT_TABLE) is False
    assert "Нельзя производить данное действие над пустой таблицей!" in shell.stdout.getvalue()


def test_add_friend():
    shell = make_shell("Иванов\nИван\n+7123\nул. Мира\n0\n1990\n3\n15\n")
    assert shell.handle(MenuItem.ADD_RECORD) is False
    assert shell.table == [Subscriber("Иванов", "Иван", "+7123", "ул. Мира", Date(15, 3, 1990))]
    assert "Абонент успешно добавлен в конец таблицы" in shell.stdout.getvalue()


def test_add_colleague_with_retries():
    shell = make_shell("Petrov\nPetr\nabc\n+71a\n+7123\nRoad\n5\n1\nengineer\nAcme\n")
    shell.handle(MenuItem.ADD_RECORD)
    assert shell.table == [Subscriber("Petrov", "Petr", "+7123", "Road", Position("engineer", "Acme"))]
    output = shell.stdout.getvalue()
    assert "Номер может начинаться только с цифры или плюса!" in output
    assert "Номер может содержать только цифры!" in output
    assert "Введите только 0 или 1!" in output


def test_delete_existing():
    shell = make_shell("Adams\n", sample_table())
    shell.handle(MenuItem.DELETE_RECORD)
    assert [s.lastname for s in shell.table] == ["Smith", "Brown"]
    assert "Удален абонент с (бывшим) ID 1" in shell.stdout.getvalue()


def test_delete_missing():
    shell = make_shell("Nobody\n", sample_table())
    shell.handle(MenuItem.DELETE_RECORD)
    assert shell.table == sample_table()
    assert "Абонент с введенной фамилией не найден" in shell.stdout.getvalue()


def test_sort_table_reorders_in_place():
    shell = make_shell(table=sample_table())
    shell.handle(MenuItem.SORT_TABLE)
    names = [s.lastname for s in shell.table]
    assert names == sorted(names)


def test_sort_key_table_output():
    table = sample_table()
    shell = make_shell(table=table)
    shell.handle(MenuItem.SORT_KEY_TABLE)
    assert format_key_table(sort_keys(make_key_table(table))) in shell.stdout.getvalue()
    assert shell.table == table


def test_near_birthdays():
    table = sample_table()
    shell = make_shell("2024\n1\n1\n", table)
    shell.handle(MenuItem.PRINT_FRIENDS_WITH_NEAR_BDAY)
    output = shell.stdout.getvalue()
    assert format_subscriber(table[0], 0) in output
    assert format_subscriber(table[2], 2) not in output


def test_no_near_birthdays():
    shell = make_shell("2024\n3\n1\n", sample_table())
    shell.handle(MenuItem.PRINT_FRIENDS_WITH_NEAR_BDAY)
    assert "Ни одного друга не надо поздравлять!" in shell.stdout.getvalue()


def test_save_then_read(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell = make_shell("book.txt\n", sample_table())
    shell.handle(MenuItem.SAVE_TABLE)
    with open(tmp_path / "book.txt", encoding="utf-8") as stream:
        assert read_table(stream) == sample_table()

    reader = make_shell("missing.txt\nbook.txt\n")
    reader.handle(MenuItem.READ_TABLE)
    assert reader.table == sample_table()
    output = reader.stdout.getvalue()
    assert "Введите корректное имя файла!" in output
    assert "Таблица успешно считана" in output


def test_read_bad_file_clears_table(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.txt").write_text("x\n", encoding="utf-8")
    shell = make_shell("bad.txt\n", sample_table())
    shell.handle(MenuItem.READ_TABLE)
    assert shell.table == []
    assert "Некорректная структура файла!" in shell.stdout.getvalue()


def test_analysis_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell = make_shell()
    assert shell.handle(MenuItem.RUN_ANALYSIS) is False
    assert "Нет необходимого файла с таблицей" in shell.stdout.getvalue()


def test_analysis_small_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with open(tmp_path / "big_table.txt", "w", encoding="utf-8") as stream:
        write_table(sample_table(), stream)
    shell = make_shell()
    shell.handle(MenuItem.RUN_ANALYSIS)
    assert "Слишком маленькая таблица в файле для заданных тестируемых размеров!" in shell.stdout.getvalue()


def test_run_exit():
    shell = make_shell("1\n")
    assert shell.run() == 0
    assert "Программа для работы с таблицей" in shell.stdout.getvalue()


def test_run_retries_menu_number():
    shell = make_shell("0\n13\nabc\n1\n")
    assert shell.run() == 0
    assert shell.stdout.getvalue().count("Для выбора пункта меню введите целое число от 1 до 12") == 4


def test_run_end_of_input():
    shell = make_shell("")
    assert shell.run() == 1
    assert "Вы нажали ctrl+d" in shell.stdout.getvalue()


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))
    assert main([]) == 0
    assert "1: Выйти из программы" in capsys.readouterr().out