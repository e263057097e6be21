from drills.cells import Cell, MyBox


def test_cell_get_returns_initial_value():
    assert Cell(42).get() == 42


def test_cell_set_replaces_value():
    cell = Cell(42)
    cell.set(43)
    assert cell.get() == 43


def test_cell_shared_reference_sees_update():
    cell = Cell("a")
    alias = cell
    alias.set("b")
    assert cell.get() == "b"


def test_mybox_equals_wrapped_value():
    assert MyBox(10) == 10
    assert 10 == MyBox(10)


def test_mybox_equals_other_box():
    assert MyBox(5) == MyBox(5)
    assert not MyBox(5) == MyBox(6)


def test_mybox_str_is_value_str():
    assert str(MyBox(10)) == "10"
    assert str(MyBox("text")) == "text"


def test_mybox_hash_matches_value():
    assert hash(MyBox(10)) == hash(10)
    assert len({MyBox(3), MyBox(3)}) == 1


def test_mybox_exposes_value():
    assert MyBox([1, 2]).val == [1, 2]