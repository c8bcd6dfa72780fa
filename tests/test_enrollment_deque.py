import io

import pytest

from estruturas.enrollment_deque import EnrollmentDeque, main, run
from estruturas.enrollment_list import Date, Enrollment
from estruturas.errors import EmptyError


def make(number, name="Ana", grade=7.5):
    return Enrollment(number, name, Date(1, 2, 2000), grade)


def numbers(collection):
    return [item.number for item in collection]


def test_first_insert_goes_in_regardless_of_key():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "missing")
    assert numbers(deque) == ["A"]


def test_missing_key_inserts_at_front():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.insert_after(make("B"), "x")
    assert numbers(deque) == ["B", "A"]


def test_insert_after_middle_key():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.insert_after(make("B"), "A")
    deque.insert_after(make("C"), "A")
    assert numbers(deque) == ["A", "C", "B"]


def test_insert_after_last_key_appends():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.insert_after(make("B"), "A")
    deque.insert_after(make("C"), "B")
    assert numbers(deque) == ["A", "B", "C"]


def test_reversed_walks_from_last():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.insert_after(make("B"), "A")
    deque.insert_after(make("C"), "B")
    assert numbers(reversed(deque)) == list(reversed(numbers(deque)))


def test_remove_on_empty_raises():
    with pytest.raises(EmptyError):
        EnrollmentDeque().remove("A")


def test_remove_drops_every_match():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.insert_after(make("B"), "A")
    deque.insert_after(make("A", "Bia"), "B")
    assert deque.remove("A") == 2
    assert numbers(deque) == ["B"]


def test_remove_only_element_empties():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.remove("A")
    assert len(deque) == 0
    assert list(reversed(deque)) == []


def test_clear_returns_count():
    deque = EnrollmentDeque()
    deque.insert_after(make("A"), "x")
    deque.insert_after(make("B"), "A")
    assert deque.clear() == 2
    assert len(deque) == 0


def test_run_lists_and_exits():
    record = make("A", "Ana", 7.5)
    out = run(["1", "x", "A", "Ana", "1/2/2000", "7.5", "3", "0"])
    assert out == record.format() + "\n" + "*\n"


def test_run_pinned_line():
    out = run(["1", "x", "A", "Ana", "1/2/2000", "7.5", "3"])
    assert out == "A, Ana, 1/2/2000, 7.50\n"


def test_run_reverse_listing():
    first = make("A", "Ana", 5.0)
    second = make("B", "Bia", 6.0)
    out = run(["1", "x", "A", "Ana", "1/2/2000", "5", "1", "A", "B", "Bia", "1/2/2000", "6", "4"])
    assert out == second.format() + "\n" + first.format() + "\n"


def test_run_empty_messages():
    assert run(["3", "4", "2", "A", "0"]) == "Lista Vazia!\n" * 3 + "\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 x A Ana 1/2/2000 7.5\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "*\n"