from mfutils.streams import from_collection


def is_even(value):
    return value % 2 == 0


def is_non_zero(value):
    return value != 0


def invert(value):
    return 1.0 / value


def test_stream_full():
    values = [2, 22, 7, 987, -2, 0]

    stream_a = from_collection(values)
    assert len(stream_a.to_list()) == 6

    stream_b = stream_a.filter(is_even)
    b_list = stream_b.to_list()
    for expected in (2, 22, -2, 0):
        assert expected in b_list
    assert len(b_list) == 4

    stream_c = stream_b.filter(is_non_zero)
    c_list = stream_c.to_list()
    for expected in (2, 22, -2):
        assert expected in c_list
    assert len(c_list) == 3

    stream_d = stream_c.map(invert)
    assert len(stream_d.to_list()) == 3


def test_order_is_kept():
    stream = from_collection([5, 1, 4, 2]).map(lambda x: x * 10)
    assert stream.to_list() == [50, 10, 40, 20]


def test_len_of_collection_and_derived_streams():
    values = [1, 2, 3, 4, 5]
    stream = from_collection(values)
    assert len(stream) == 5
    assert len(stream.filter(lambda x: x > 2)) == 3


def test_stream_sees_later_changes_to_collection():
    values = [1, 2]
    stream = from_collection(values).map(lambda x: x + 1)
    values.append(3)
    assert stream.to_list() == [2, 3, 4]
    assert len(from_collection(values)) == 3


def test_for_each_visits_every_element():
    seen = []
    from_collection(["a", "b", "c"]).filter(lambda s: s != "b").for_each(seen.append)
    assert seen == ["a", "c"]


def test_stream_can_be_traversed_twice():
    stream = from_collection(range(4)).filter(is_even)
    assert list(stream) == [0, 2]
    assert list(stream) == [0, 2]


def test_empty_collection():
    stream = from_collection([])
    assert stream.to_list() == []
    assert len(stream.map(invert)) == 0