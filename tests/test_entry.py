from chaintable.entry import Entry


def test_entry():
    e = Entry("a", 1)

    assert e.key == "a"
    assert e.value == 1
    assert str(e) == "a=1"

    # should return the old value
    assert e.set_value(2) == 1
    assert e.value == 2

    key, value = e
    assert (key, value) == ("a", 2)


def test_entry_equality():
    assert Entry("a", 1) == Entry("a", 1)
    assert Entry("a", 1) != Entry("a", 2)
    assert Entry("a", 1) != Entry("b", 1)
    assert Entry(None, None) == Entry(None, None)
    assert Entry("a", None) != Entry("a", 0)
    assert Entry(None, 1) != Entry(0, 1)

    # only entries compare equal to entries
    assert Entry("a", 1) != ("a", 1)


def test_entry_hash():
    assert hash(Entry(5, 3)) == 5 ^ 3
    assert hash(Entry(None, 7)) == 7
    assert hash(Entry(7, None)) == 7
    assert hash(Entry(None, None)) == 0
    assert hash(Entry("k", "v")) == hash("k") ^ hash("v")

    # equal entries from different places hash the same
    assert len({Entry("a", 1), Entry("a", 1), Entry("b", 1)}) == 2


def test_entry_hash_code_minus_one():
    e = Entry(1, -2)

    # should keep the plain xor even where hash() cannot return -1
    assert e.hash_code() == 1 ^ -2 == -1
    assert hash(e) == -2
