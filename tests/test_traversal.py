"""BFS and DFS traces."""

import pytest

from algorithms import ProgramPoint
from engine import generate
from conftest import all_pairs, random_graph, reachable


def labels(graph, ids):
    return "".join(graph.label(i) for i in ids)


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
def test_bfs_tree_visit_order(tree) -> None:
    trace = generate(tree, "bfs")
    assert labels(tree, trace.visit_order()) == "abcdefghijk"


def test_bfs_first_step_is_initialisation(tree) -> None:
    first = generate(tree, "bfs")[0]
    assert first.current is None
    assert first.program_point is ProgramPoint.INITIALIZE
    assert first.frontier == (0,)
    assert first.visited == frozenset({0})


def test_bfs_step_shapes(tree) -> None:
    trace = generate(tree, "bfs")
    assert len(trace) == 22

    visit_a, found_b, found_c, visit_b = trace[1], trace[2], trace[3], trace[4]
    assert (visit_a.current, visit_a.frontier) == (0, ())
    assert visit_a.message == "Visiting a"
    assert (found_b.program_point, found_b.frontier) == (ProgramPoint.DISCOVER, (1,))
    assert found_b.message == "Found b"
    assert found_c.frontier == (1, 2)
    assert found_c.visited == frozenset({0, 1, 2})
    assert (visit_b.current, visit_b.frontier) == (1, (2,))
    assert [s.step_number for s in trace] == list(range(22))


@pytest.mark.parametrize("seed", range(15))
def test_bfs_visits_reachable_nodes_once_in_hop_order(seed) -> None:
    graph = random_graph(seed)
    hops = all_pairs(graph, unit=True)[graph.start]
    order = generate(graph, "bfs").visit_order()

    assert sorted(order) == sorted(reachable(graph))
    assert [hops[n] for n in order] == sorted(hops[n] for n in order)


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
def test_dfs_tree_visit_order(tree) -> None:
    trace = generate(tree, "dfs")
    assert labels(tree, trace.visit_order()) == "abdheijcfkg"


def test_dfs_backtracks_to_b_after_d_subtree(tree) -> None:
    steps = list(generate(tree, "dfs"))
    first_b_backtrack = next(
        i for i, s in enumerate(steps)
        if s.program_point is ProgramPoint.BACKTRACK and s.current == 1
    )
    before = steps[first_b_backtrack - 1]
    assert (before.program_point, before.current) == (ProgramPoint.BACKTRACK, 3)
    assert steps[first_b_backtrack].frontier == (0, 1)
    assert steps[first_b_backtrack].message == "Backtrack to b"
    assert steps[first_b_backtrack + 1].message == "Visiting e"


def test_dfs_starts_with_initialisation_and_stack(tree) -> None:
    trace = generate(tree, "dfs")
    assert trace[0].current is None
    assert trace[0].frontier == (0,)
    assert trace[0].visited == frozenset()
    # a, b, d, h on the stack when h is entered
    assert trace[4].current == 7
    assert trace[4].frontier == (0, 1, 3, 7)


@pytest.mark.parametrize("seed", range(15))
def test_dfs_visits_each_reachable_node_and_pairs_backtracks(seed) -> None:
    graph = random_graph(seed, p=0.5)
    trace = generate(graph, "dfs")
    visits = [s for s in trace if s.program_point is ProgramPoint.VISIT]
    backtracks = [s for s in trace if s.program_point is ProgramPoint.BACKTRACK]

    assert sorted(s.current for s in visits) == sorted(reachable(graph))
    # every non-root visit is returned from exactly once
    assert len(backtracks) == len(visits) - 1
    for step in backtracks:
        assert step.frontier[-1] == step.current
