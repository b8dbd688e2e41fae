import json

import pytest

from algorithms import REGISTRY, get_algorithm, graph_for, list_algorithms
from engine import Trace, compare, generate, summarize


@pytest.mark.parametrize("key", sorted(REGISTRY))
def test_generation_is_deterministic(key) -> None:
    info = get_algorithm(key)
    first = json.dumps(generate(info.default_graph(), key).to_dict())
    second = json.dumps(generate(info.default_graph(), key).to_dict())
    assert first == second


@pytest.mark.parametrize("key", sorted(REGISTRY))
def test_every_trace_starts_with_a_bootstrap_step(key) -> None:
    info = get_algorithm(key)
    trace = generate(info.default_graph(), key)
    assert len(trace) >= 1
    assert trace[0].current is None
    assert all(step.current is not None for step in trace.steps[1:])


def test_unknown_algorithm(tree) -> None:
    with pytest.raises(ValueError, match="Unknown algorithm"):
        generate(tree, "bellman_ford")


def test_algorithm_keys_are_case_insensitive(tree) -> None:
    assert generate(tree, "BFS").algorithm == "bfs"


def test_trace_is_immutable(bfs_trace: Trace) -> None:
    with pytest.raises(AttributeError):
        bfs_trace.steps = ()  # type: ignore[misc]
    with pytest.raises(AttributeError):
        bfs_trace[0].current = 3  # type: ignore[misc]


def test_step_distances_are_read_only(network) -> None:
    trace = generate(network, "dijkstra")
    with pytest.raises(TypeError):
        trace.final_step.distances[5] = 999  # type: ignore[index]
    assert trace.final_step.distances[5] == 7
    assert hash(trace.final_step) == hash(generate(network, "dijkstra").final_step)


def test_graph_for_picks_the_graph_by_weighting() -> None:
    assert graph_for("bfs").name == "tree"
    assert graph_for("dfs").name == "tree"
    assert graph_for("AStar").name == "network"
    with pytest.raises(ValueError, match="Unknown algorithm"):
        graph_for("bogo")


def test_trace_to_dict_is_json_ready(network) -> None:
    data = generate(network, "dijkstra").to_dict()
    assert data["algorithm"] == "dijkstra"
    assert data["graph"] == "network"
    step = data["steps"][4]
    assert step == {
        "step_number": 4,
        "frontier": [1],
        "visited": [0, 2],
        "current": 2,
        "program_point": "visit",
        "message": "Visit B (2)",
        "explanation": step["explanation"],
        "distances": {"0": 0, "1": 4, "2": 2},
    }


def test_summary_and_comparison(network) -> None:
    dij = summarize(generate(network, "dijkstra"), network)
    ast = summarize(generate(network, "astar"), network)

    assert dij.algo_label == "Dijkstra's Algorithm"
    assert dij.total_steps == 13
    assert ast.visit_order == [0, 2, 4, 5]

    result = compare(dij, ast)
    assert result.winner_nodes == "A* Search"
    assert result.same_distance is True
    assert compare(dij, dij).winner_nodes == "tie"


def test_registry_metadata() -> None:
    assert [a.key for a in list_algorithms()] == ["bfs", "dfs", "dijkstra", "astar"]
    for info in list_algorithms():
        for point, line in info.program_lines.items():
            assert 0 <= line < len(info.pseudocode), (info.key, point)


def test_line_for_maps_program_points(bfs_trace) -> None:
    info = get_algorithm("bfs")
    assert [info.line_for(s) for s in bfs_trace.steps[:3]] == [0, 2, 4]
    dfs = get_algorithm("dfs")
    assert dfs.line_for(bfs_trace[2]) == -1
