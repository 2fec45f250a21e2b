import pytest

from chaintable import table as table_module
from chaintable.debug import chain_lengths, check_table, dump_table
from chaintable.table import Entry, HashTable


class Twin:
    def __init__(self, name: str) -> None:
        self.name = name

    def __hash__(self) -> int:
        return 1

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Twin) and other.name == self.name


def test_dump_table(capsys):
    t = HashTable()
    t.put(None, "n")
    t.put(3, "a")
    t.put(19, "b")

    dump_table(t, "t")
    out = capsys.readouterr().out
    assert out == (
        "== t ==\n"
        "capacity 16, size 3\n"
        "0000 None='n'\n"
        "0003 19='b' -> 3='a'\n"
    )


def test_chain_lengths():
    t = HashTable()
    assert chain_lengths(t) == [0] * 16
    t.put(3, "a")
    t.put(19, "b")
    t.put(4, "c")
    lengths = chain_lengths(t)
    assert lengths[3] == 2
    assert lengths[4] == 1
    assert sum(lengths) == 3


def test_check_table_size():
    t = HashTable()
    t.put("a", 1)
    t.count = 5
    with pytest.raises(Exception, match="size does not match"):
        check_table(t)


def test_check_table_wrong_bucket():
    t = HashTable()
    t.buckets[5] = Entry(3, "x", None)
    t.count = 1
    with pytest.raises(Exception, match="wrong bucket"):
        check_table(t)


def test_check_table_duplicate():
    t = HashTable()
    t.put(Twin("a"), 1)
    t.buckets[1] = Entry(Twin("a"), 2, t.buckets[1])
    t.count += 1
    with pytest.raises(Exception, match="duplicate key"):
        check_table(t)


def test_check_table_capacity():
    t = HashTable()
    t.buckets = [None] * 24
    with pytest.raises(Exception, match="power of two"):
        check_table(t)


def test_trace_resize(capsys, monkeypatch):
    monkeypatch.setattr(table_module, "_debug_trace_resize", False)
    t = HashTable()
    table_module.set_debug_trace_resize(True)
    for i in range(13):
        t.put(i, i)
    table_module.set_debug_trace_resize(False)
    for i in range(13, 30):
        t.put(i, i)

    assert t.capacity() == 64
    assert capsys.readouterr().err == "resize 16 -> 32 (12 entries)\n"
