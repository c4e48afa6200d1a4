import random

from sortvis.area import new_area
from sortvis.cases.bubble import bubble_pass, bubble_sort, create_bubble_case
from sortvis.model import RAND_MAX, Nodes
from sortvis.sorting import SortingCase, SortingCases
from sortvis.visual import Renderer


def make_case(values):
    nodes = Nodes.from_values(values)
    area = new_area("bubble", len(nodes), 10, 10, 0, 10, nodes)
    return SortingCase(nodes=nodes, area=area, sort=bubble_sort)


def collection(scase):
    cases = SortingCases()
    cases.add(scase)
    return cases


def inversions(values):
    return sum(
        1
        for i, a in enumerate(values)
        for b in values[i + 1 :]
        if a > b
    )


def run_to_end(scase, renderer, limit=1000):
    cases = collection(scase)
    for step in range(1, limit + 1):
        if bubble_sort(cases, scase, renderer):
            return step
    raise AssertionError("bubble sort did not finish")


def test_full_run_sorts_values():
    values = [5, 3, 9, 1, 7, 2, 8]
    scase = make_case(values)
    run_to_end(scase, Renderer())
    assert scase.nodes.values() == sorted(values)


def test_swaps_equal_inversions():
    rng = random.Random(7)
    values = [rng.randint(1, 100) for _ in range(30)]
    scase = make_case(values)
    run_to_end(scase, Renderer())
    assert scase.area.data.swaps == inversions(values)


def test_sorted_input_finishes_at_once():
    scase = make_case([1, 2, 3, 4])
    renderer = Renderer()
    assert bubble_sort(collection(scase), scase, renderer) is True
    assert scase.area.data.swaps == 0
    assert scase.area.data.swapped == [None, None]


def test_pass_returns_node_holding_largest_value():
    scase = make_case([3, 1, 2])
    updated = bubble_pass(collection(scase), scase, Renderer())
    assert updated is scase.nodes.tail
    assert updated.value == max(scase.nodes.values())


def test_pass_renders_every_swap():
    scase = make_case([4, 3, 2, 1])
    renderer = Renderer()
    bubble_pass(collection(scase), scase, renderer)
    assert len(renderer.frames) == scase.area.data.swaps


def test_step_renders_final_frame():
    scase = make_case([2, 1, 3])
    renderer = Renderer()
    bubble_sort(collection(scase), scase, renderer)
    assert len(renderer.frames) == scase.area.data.swaps + 1


def test_swapped_pair_is_adjacent():
    scase = make_case([2, 9, 4, 1])
    bubble_pass(collection(scase), scase, Renderer())
    first, second = scase.area.data.swapped
    assert first.next is second
    assert first.value <= second.value


def test_pass_stops_before_sorted_tail():
    scase = make_case([4, 1, 2, 3])
    cases = collection(scase)
    bubble_sort(cases, scase, Renderer())
    before = scase.area.data.shifts
    bubble_sort(cases, scase, Renderer())
    assert scase.area.data.shifts - before < len(scase.nodes) - 1


def test_empty_list_pass_returns_none():
    scase = make_case([])
    assert bubble_pass(collection(scase), scase, Renderer()) is None


def test_missing_case_pass_returns_none():
    assert bubble_pass(None, None, Renderer()) is None


def test_create_bubble_case():
    scase = create_bubble_case(15, 20, 100, 0, 200, random.Random(3))
    assert scase.area.data.name == "bubble"
    assert len(scase.nodes) == 15
    assert scase.area.scale.length == 15
    assert scase.sort is bubble_sort
    assert all(0 <= v <= RAND_MAX for v in scase.nodes.values())


def test_create_bubble_case_is_seeded():
    a = create_bubble_case(10, 20, 100, 0, 200, random.Random(11))
    b = create_bubble_case(10, 20, 100, 0, 200, random.Random(11))
    assert a.nodes.values() == b.nodes.values()