import pytest

from listkit.arraylist import ArrayList


@pytest.fixture
def walkthrough_list():
    items = ArrayList(2)
    for value in (10, 20, 30, 40):
        items.append(value)
    items.insert(0, 5)
    items.insert(3, 25)
    return items


def test_new_list_is_empty_with_requested_capacity():
    items = ArrayList(2)
    assert len(items) == 0
    assert items.capacity == 2


@pytest.mark.parametrize("bad", [0, -3])
def test_non_positive_capacity_defaults_to_four(bad):
    assert ArrayList(bad).capacity == 4


def test_append_within_capacity():
    items = ArrayList(2)
    items.append(10)
    items.append(20)
    assert list(items) == [10, 20]
    assert items.capacity == 2


def test_append_beyond_capacity_doubles():
    items = ArrayList(2)
    for value in (10, 20, 30):
        items.append(value)
    assert items.capacity == 4
    items.append(40)
    assert items.capacity == 4


def test_insert_walkthrough(walkthrough_list):
    assert list(walkthrough_list) == [5, 10, 20, 25, 30, 40]
    assert walkthrough_list.capacity == 8


def test_index_of(walkthrough_list):
    assert walkthrough_list.index_of(30) == 4
    assert walkthrough_list.index_of(5) == 0
    assert walkthrough_list.index_of(25) == 3
    assert walkthrough_list.index_of(99) == -1


def test_delete_and_remove_last(walkthrough_list):
    assert walkthrough_list.delete_at(3) == 25
    assert list(walkthrough_list) == [5, 10, 20, 30, 40]
    assert walkthrough_list.remove_last() == 40
    assert list(walkthrough_list) == [5, 10, 20, 30]


def test_clear_keeps_capacity_and_allows_reuse(walkthrough_list):
    walkthrough_list.clear()
    assert len(walkthrough_list) == 0
    assert walkthrough_list.capacity == 8
    walkthrough_list.append(100)
    assert list(walkthrough_list) == [100]
    assert walkthrough_list.capacity == 8


def test_remove_last_empty_raises():
    with pytest.raises(IndexError):
        ArrayList().remove_last()


@pytest.mark.parametrize("index", [-1, 3])
def test_insert_out_of_bounds(index):
    items = ArrayList()
    items.append(1)
    items.append(2)
    with pytest.raises(IndexError):
        items.insert(index, 9)
    assert list(items) == [1, 2]


def test_insert_at_end_is_allowed():
    items = ArrayList()
    items.append(1)
    items.insert(1, 2)
    assert list(items) == [1, 2]


@pytest.mark.parametrize("index", [-1, 2])
def test_delete_at_out_of_bounds(index):
    items = ArrayList()
    items.append(1)
    items.append(2)
    with pytest.raises(IndexError):
        items.delete_at(index)


def test_capacity_shrinks_when_sparse():
    items = ArrayList(2)
    for value in range(20):
        items.append(value)
    peak = items.capacity
    while len(items) > 1:
        items.remove_last()
        assert items.capacity >= len(items)
    assert items.capacity < peak
    assert items.capacity >= 4


def test_capacity_never_below_size():
    items = ArrayList(1)
    for value in range(50):
        items.insert(0, value)
        assert items.capacity >= len(items)
    assert list(items) == list(range(49, -1, -1))


def test_getitem(walkthrough_list):
    assert walkthrough_list[0] == 5
    assert walkthrough_list[-1] == 40


def test_str_format():
    items = ArrayList(2)
    items.append(10)
    items.append(20)
    assert str(items) == "ArrayList (size: 2, capacity: 2): [10, 20]"
    assert str(ArrayList(2)) == "ArrayList (size: 0, capacity: 2): []"