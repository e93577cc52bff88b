from sequtils.functional.mutation import for_each, insert, move, swap, tail


def test_tail():
    values = [1, 2, 3]
    assert tail(values) == 3
    assert tail(values, 2) == 1


def test_tail_out_of_range():
    assert tail([1, 2, 3], 3) is None
    assert tail([]) is None
    assert tail([1, 2, 3], -1) is None


def test_swap():
    values = ["a", "b", "c"]
    swap(values, 0, 2)
    assert values == ["c", "b", "a"]


def test_swap_same_position():
    values = [1, 2]
    swap(values, 1, 1)
    assert values == [1, 2]


def test_swap_out_of_range_pads_with_none():
    values = [1, 2]
    swap(values, 0, 3)
    assert values == [None, 2, None, 1]


def test_swap_negative_position_is_absent():
    values = [1, 2]
    swap(values, -1, 0)
    assert values == [None, 2]


def test_move_forward():
    values = [1, 2, 3, 4]
    move(values, 0, 2)
    assert values == [2, 3, 1, 4]


def test_move_backward():
    values = [1, 2, 3, 4]
    move(values, 3, 0)
    assert values == [4, 1, 2, 3]


def test_move_past_end_appends():
    values = [1, 2, 3]
    move(values, 0, 10)
    assert values == [2, 3, 1]


def test_move_absent_source():
    values = [1, 2]
    move(values, 5, 0)
    assert values == [None, 1, 2]


def test_insert_round_trip():
    values = [1, 2]
    item = object()
    remove = insert(values, item)
    assert values[-1] is item

    remove()
    assert item not in values
    assert values == [1, 2]


def test_insert_remove_is_idempotent():
    values = ["x"]
    remove = insert(values, "x")
    remove()
    remove()
    assert values == ["x"]


def test_insert_removes_exact_instance():
    a, b = [1], [1]
    values = [a]
    remove = insert(values, b)
    remove()
    assert len(values) == 1
    assert values[0] is a


def test_insert_remove_after_external_removal():
    item = object()
    values = []
    remove = insert(values, item)
    values.clear()
    values.append(1)
    remove()
    assert values == [1]


def test_for_each_visits_all():
    seen = []
    for_each([1, 2, 3], lambda element, remove: seen.append(element))
    assert seen == [1, 2, 3]


def test_for_each_remove_current():
    values = [1, 2, 3, 4, 5, 6]
    seen = []

    def callback(element, remove):
        seen.append(element)
        if element % 2 == 0:
            remove()

    for_each(values, callback)
    assert seen == [1, 2, 3, 4, 5, 6]
    assert values == [1, 3, 5]


def test_for_each_remove_consecutive():
    values = [1, 1, 1, 2]
    seen = []

    def callback(element, remove):
        seen.append(element)
        if element == 1:
            remove()

    for_each(values, callback)
    assert seen == [1, 1, 1, 2]
    assert values == [2]


def test_for_each_remove_all():
    values = list("abc")
    for_each(values, lambda element, remove: remove())
    assert values == []


def test_for_each_double_remove_deletes_once():
    values = [1, 2, 3, 4]
    seen = []

    def callback(element, remove):
        seen.append(element)
        if element == 3:
            remove()
            remove()

    for_each(values, callback)
    assert seen == [1, 2, 3, 4]
    assert values == [1, 2, 4]


def test_move_negative_source_counts_from_end():
    values = [1, 2, 3]
    move(values, -1, 0)
    assert values == [3, 1, 2]


def test_move_negative_source_past_start_resolves_to_first():
    values = [1, 2, 3]
    move(values, -10, 2)
    assert values == [2, 3, 1]
