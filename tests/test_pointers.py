from rustlings.lessons.pointers import (
    Cons,
    Cow,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert non_empty == Cons(5, None)
    assert list(non_empty) == [5]


def test_reference_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow.borrowed(data))
    assert result.owned
    assert list(result.data) == [1, 0, 1]
    assert data == [-1, 0, 1]


def test_reference_no_mutation():
    data = (0, 1, 2)
    result = abs_all(Cow.borrowed(data))
    assert not result.owned
    assert result.data is data


def test_owned_no_mutation():
    result = abs_all(Cow.owning([0, 1, 2]))
    assert result.owned
    assert list(result.data) == [0, 1, 2]


def test_owned_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow.owning(data))
    assert result.owned
    assert result.data is data
    assert data == [1, 0, 1]