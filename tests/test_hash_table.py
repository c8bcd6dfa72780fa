import io

import pytest

from estruturas.hash_table import HashTable, main
from estruturas.student import Student


def _table(size, max_items, *students):
    table = HashTable(size, max_items)
    for ra, name in students:
        table.insert(Student(ra, name))
    return table


@pytest.mark.parametrize(
    "students, query, expected",
    [
        (((7, "Ana"),), 7, Student(7, "Ana")),
        ((), 4, None),
        (((4, "Bia"),), 14, None),
        (((3, "Ana"), (13, "Bia")), 3, None),
        (((3, "Ana"), (13, "Bia")), 13, Student(13, "Bia")),
    ],
)
def test_search(students, query, expected):
    assert _table(10, 5, *students).search(query) == expected


def test_insert_counts_every_call_even_on_collision():
    assert len(_table(10, 5, (3, "Ana"), (13, "Bia"))) == 2


@pytest.mark.parametrize("removed, remaining", [(3, 0), (2, 1)])
def test_remove(removed, remaining):
    table = _table(10, 5, (3 if remaining == 0 else 1, "Ana"))
    table.remove(removed)
    assert table.search(removed) is None
    assert len(table) == remaining


def test_is_full_at_max_items():
    table = _table(10, 2, (1, "Ana"))
    assert table.is_full() is False
    table.insert(Student(2, "Bia"))
    assert table.is_full() is True


def test_load_factor():
    assert HashTable(10, 5).load_factor() == pytest.approx(0.5)


@pytest.mark.parametrize(
    "table, expected",
    [
        (_table(10, 5, (3, "Ana"), (15, "Bia")), "Tabela hash:\n3 : 3 Ana\n5 : 15 Bia\n"),
        (_table(4, 2), "Tabela hash:\n"),
    ],
)
def test_render(table, expected):
    assert table.render() == expected


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        HashTable(0, 1)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10 5\n1 7 Ana\n3 7\n4\n3 8\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    for expected in (
        "O fator de carga é: 0.5\n",
        "Aluno encontrado!\nRa: 7\nNome: Ana\n",
        "7 : 7 Ana\n",
        "Aluno nao encontrado!",
    ):
        assert expected in out