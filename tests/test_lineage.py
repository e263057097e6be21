import pytest

from drills.lineage import (
    GrandParentError,
    GrandParentNotFound,
    LogError,
    Node,
    ParentNotFound,
    grand_parent,
    log_grand_parent,
)


def _chain():
    root = Node("root")
    middle = Node("middle", root)
    leaf = Node("leaf", middle)
    return root, middle, leaf


def test_grand_parent_found():
    root, _middle, leaf = _chain()
    assert grand_parent(leaf) is root


def test_missing_parent():
    with pytest.raises(ParentNotFound):
        grand_parent(Node("alone"))


def test_missing_grand_parent():
    _root, middle, _leaf = _chain()
    with pytest.raises(GrandParentNotFound):
        grand_parent(middle)


def test_errors_share_base_class():
    with pytest.raises(GrandParentError):
        grand_parent(Node("alone"))


def test_error_messages():
    assert str(ParentNotFound()) == "ParentNotFound"
    assert str(GrandParentNotFound()) == "GrandParentNotFound"


def test_log_writes_repr_of_grand_parent(tmp_path):
    root, _middle, leaf = _chain()
    target = tmp_path / "info.txt"
    log_grand_parent(leaf, target)
    assert target.read_text() == repr(root)


def test_log_wraps_lookup_error(tmp_path):
    target = tmp_path / "info.txt"
    with pytest.raises(LogError) as info:
        log_grand_parent(Node("alone"), target)
    assert isinstance(info.value.error, ParentNotFound)
    assert str(info.value).startswith("grandparent error")
    assert not target.exists()


def test_log_wraps_os_error(tmp_path):
    _root, _middle, leaf = _chain()
    target = tmp_path / "missing-dir" / "info.txt"
    with pytest.raises(LogError) as info:
        log_grand_parent(leaf, target)
    assert isinstance(info.value.error, OSError)
    assert str(info.value) == str(info.value.error)