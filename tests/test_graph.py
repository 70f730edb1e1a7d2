import inspect
import sys

from algotrace.generators.graph_mutation import graph_delete_steps, graph_insert_steps
from algotrace.generators.graph_traversal import (
    bfs_steps,
    build_adjacency,
    dfs_steps,
    dijkstra_steps,
    normalize_graph,
    unweighted_shortest_path_steps,
)


def final_visited(steps):
    return steps[-1]["graphState"]["visited"]


def assert_no_dangling_edges(steps):
    for step in steps:
        state = step["graphState"]
        ids = {nd["id"] for nd in state["nodes"]}
        for e in state["edges"]:
            assert e["source"] in ids and e["target"] in ids


class TestBFS:

    def test_visits_sample_in_breadth_first_order(self):
        assert final_visited(bfs_steps()) == ["A", "B", "C", "D", "E", "F"]

    def test_visited_never_repeats(self):
        for step in bfs_steps():
            visited = step["graphState"]["visited"]
            assert len(visited) == len(set(visited))

    def test_enqueue_snapshot_contains_new_node(self):
        for step in bfs_steps():
            if step["action"] == "enqueue":
                assert step["graphState"]["queue"][-1] in step["graphState"]["visited"]

    def test_only_reachable_nodes_visited(self):
        graph = {
            "nodes": [{"id": "A"}, {"id": "B"}, {"id": "Z"}],
            "edges": [{"source": "A", "target": "B"}],
            "start": "A",
        }
        assert final_visited(bfs_steps(graph)) == ["A", "B"]

    def test_empty_graph(self):
        steps = bfs_steps({"nodes": [], "edges": []})
        assert [s["action"] for s in steps] == ["init", "complete"]


class TestDFS:

    def test_visits_sample_depth_first(self):
        assert final_visited(dfs_steps()) == ["A", "B", "D", "C", "E", "F"]

    def test_stack_empties_after_backtracking(self):
        steps = dfs_steps()
        backtracks = [s for s in steps if s["action"] == "backtrack"]
        assert len(backtracks) == 6
        assert backtracks[-1]["graphState"]["queue"] == []

    def test_push_puts_neighbor_on_top(self):
        for step in dfs_steps():
            if step["action"] == "push":
                assert step["graphState"]["queue"][0] == "A"
                assert step["graphState"]["queue"][-1] not in step["graphState"]["visited"]

    def test_long_path_does_not_recurse(self):
        ids = [f"n{i}" for i in range(200)]
        graph = {
            "nodes": [{"id": nid} for nid in ids],
            "edges": [{"source": a, "target": b} for a, b in zip(ids, ids[1:])],
        }
        old = sys.getrecursionlimit()
        sys.setrecursionlimit(len(inspect.stack(0)) + 60)
        try:
            steps = dfs_steps(graph)
        finally:
            sys.setrecursionlimit(old)
        assert final_visited(steps) == ids
        assert steps[-1]["action"] == "complete"
        assert steps[-2]["graphState"]["queue"] == []


class TestShortestPaths:

    def test_dijkstra_final_distances(self):
        distances = dijkstra_steps()[-1]["graphState"]["distances"]
        assert distances == {"A": 0, "B": 3, "C": 1, "D": 4, "E": 7, "F": 8}

    def test_dijkstra_settles_by_distance(self):
        assert final_visited(dijkstra_steps()) == ["A", "C", "B", "D", "E", "F"]

    def test_dijkstra_unreachable_is_none(self):
        graph = {
            "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
            "edges": [{"source": "A", "target": "B", "weight": 2}],
        }
        distances = dijkstra_steps(graph)[-1]["graphState"]["distances"]
        assert distances == {"A": 0, "B": 2, "C": None}

    def test_dijkstra_skips_longer_route(self):
        graph = {
            "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
            "edges": [
                {"source": "A", "target": "B", "weight": 1},
                {"source": "A", "target": "C", "weight": 1},
                {"source": "B", "target": "C", "weight": 5},
            ],
        }
        steps = dijkstra_steps(graph)
        assert [s["action"] for s in steps] == ["init", "visit", "relax", "relax", "visit", "skip", "visit", "complete"]
        assert steps[-1]["graphState"]["distances"] == {"A": 0, "B": 1, "C": 1}

    def test_unweighted_shortest_path_follows_bfs(self):
        steps = unweighted_shortest_path_steps()
        assert final_visited(steps) == final_visited(bfs_steps())
        assert not any("BFS" in s["description"] for s in steps)


class TestNormalizeGraph:

    def test_skips_edges_to_unknown_nodes(self):
        nodes, edges, start = normalize_graph({
            "nodes": [{"id": "A"}, {"id": "B"}],
            "edges": [{"source": "A", "target": "B"}, {"source": "A", "target": "Q"}],
        })
        assert edges == [{"source": "A", "target": "B"}]
        assert start == "A"

    def test_missing_coordinates_get_laid_out(self):
        nodes, _, _ = normalize_graph({"nodes": [{"id": 1}, {"id": 2}], "edges": []})
        assert [nd["id"] for nd in nodes] == ["1", "2"]
        assert all(isinstance(nd["x"], float) and isinstance(nd["y"], float) for nd in nodes)
        assert nodes[0]["x"] != nodes[1]["x"]

    def test_negative_weight_dropped(self):
        _, edges, _ = normalize_graph({
            "nodes": [{"id": "A"}, {"id": "B"}],
            "edges": [{"source": "A", "target": "B", "weight": -3}],
        })
        assert "weight" not in edges[0]

    def test_adjacency_is_undirected_in_edge_order(self):
        nodes, edges, _ = normalize_graph(None)
        adj = build_adjacency(nodes, edges)
        assert [n for n, _ in adj["D"]] == ["B", "C", "E", "F"]


class TestGraphMutation:

    def test_insert_sample(self):
        steps = graph_insert_steps()
        assert [s["action"] for s in steps] == ["init", "addnode", "addedge", "complete"]
        final = steps[-1]["graphState"]
        assert "D" in {nd["id"] for nd in final["nodes"]}
        assert {"source": "B", "target": "D"} in final["edges"]
        assert_no_dangling_edges(steps)

    def test_insert_existing_node_only_adds_edge(self):
        graph = {"nodes": [{"id": "A"}, {"id": "B"}], "edges": []}
        steps = graph_insert_steps(graph, new_node={"id": "B"}, connect_to="A")
        assert [s["action"] for s in steps] == ["init", "addedge", "complete"]

    def test_delete_sample(self):
        steps = graph_delete_steps()
        assert [s["action"] for s in steps] == ["init", "highlight", "removeedges", "deletenode", "complete"]
        final = steps[-1]["graphState"]
        assert "D" not in {nd["id"] for nd in final["nodes"]}
        assert final["edges"] == [{"source": "A", "target": "B"}, {"source": "B", "target": "C"}]
        assert_no_dangling_edges(steps)

    def test_delete_isolated_node_skips_edge_removal(self):
        graph = {"nodes": [{"id": "A"}, {"id": "B"}], "edges": []}
        steps = graph_delete_steps(graph, target="B")
        assert [s["action"] for s in steps] == ["init", "highlight", "deletenode", "complete"]

    def test_delete_missing_node(self):
        steps = graph_delete_steps(target="Q")
        assert steps[-1]["action"] == "notfound"
