"""Tests for traversal/breadth_first.py"""

import pytest

from graph import UndirectedGraph
from traversal import BreadthFirstIterator, breadth_first_traverse


def make_graph(edges, vertices=()) -> UndirectedGraph:
    graph = UndirectedGraph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for a, b in edges:
        graph.add_vertex(a)
        graph.add_vertex(b)
        graph.add_edge(a, b)
    return graph


CHAIN = [("A", "B"), ("B", "C"), ("C", "D")]
STAR = [("A", "B"), ("A", "C"), ("A", "D")]


class TestBreadthFirstIterator:
    def test_chain(self):
        graph = make_graph(CHAIN)
        assert list(BreadthFirstIterator(graph, "A")) == ["A", "B", "C", "D"]

    def test_star(self):
        graph = make_graph(STAR)
        assert list(BreadthFirstIterator(graph, "A")) == ["A", "B", "C", "D"]

    def test_star_from_leaf(self):
        graph = make_graph(STAR)
        assert list(BreadthFirstIterator(graph, "C")) == ["C", "A", "B", "D"]

    def test_levels(self):
        """
        Graph:
              A
             / \\
            B   C
           / \\   \\
          D   E   F
        """
        graph = make_graph(
            [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")]
        )
        assert list(BreadthFirstIterator(graph, "A")) == [
            "A",
            "B",
            "C",
            "D",
            "E",
            "F",
        ]

    def test_converging_paths_emit_once(self):
        """Diamond: D is reachable from both B and C."""
        graph = make_graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
        assert list(BreadthFirstIterator(graph, "A")) == ["A", "B", "C", "D"]

    def test_complete_graph_queue_bounded(self):
        vertices = range(8)
        graph = make_graph([(a, b) for a in vertices for b in vertices if a < b])
        iterator = BreadthFirstIterator(graph, 0)
        next(iterator)
        # Everything was discovered by the root, nothing more gets queued
        assert len(iterator._queue) == 7
        assert sorted(iterator) == list(range(1, 8))

    def test_single_vertex(self):
        graph = make_graph([], vertices=["A"])
        assert list(BreadthFirstIterator(graph, "A")) == ["A"]

    def test_stays_in_component(self):
        graph = make_graph([("A", "B"), ("C", "D")], vertices=["E"])
        assert set(BreadthFirstIterator(graph, "A")) == {"A", "B"}
        assert set(BreadthFirstIterator(graph, "D")) == {"C", "D"}
        assert list(BreadthFirstIterator(graph, "E")) == ["E"]

    def test_cycle(self):
        graph = make_graph([("A", "B"), ("B", "C"), ("C", "A")])
        assert list(BreadthFirstIterator(graph, "B")) == ["B", "A", "C"]

    def test_has_next_and_exhaustion(self):
        graph = make_graph([("A", "B")])
        iterator = BreadthFirstIterator(graph, "A")
        assert iterator.has_next()
        assert next(iterator) == "A"
        assert iterator.has_next()
        assert next(iterator) == "B"
        assert not iterator.has_next()
        with pytest.raises(StopIteration):
            next(iterator)
        # Exhaustion is terminal
        assert not iterator.has_next()

    def test_iter_returns_self(self):
        iterator = BreadthFirstIterator(make_graph(CHAIN), "A")
        assert iter(iterator) is iterator

    def test_resumable(self):
        graph = make_graph(CHAIN)
        iterator = BreadthFirstIterator(graph, "A")
        first = [next(iterator), next(iterator)]
        rest = list(iterator)
        assert first + rest == ["A", "B", "C", "D"]

    def test_early_termination_leaves_graph_untouched(self):
        graph = make_graph(STAR + CHAIN)
        snapshot = UndirectedGraph(graph)
        iterator = BreadthFirstIterator(graph, "A")
        next(iterator)
        next(iterator)
        del iterator
        assert graph == snapshot
        assert graph.get_vertex_size() == snapshot.get_vertex_size()
        assert graph.get_path_length() == snapshot.get_path_length()

    def test_independent_iterators(self):
        graph = make_graph(CHAIN)
        first = BreadthFirstIterator(graph, "A")
        second = BreadthFirstIterator(graph, "A")
        assert next(first) == "A"
        assert next(first) == "B"
        assert list(second) == ["A", "B", "C", "D"]
        assert list(first) == ["C", "D"]


class TestBreadthFirstValidation:
    def test_root_not_in_graph(self):
        graph = make_graph(CHAIN)
        with pytest.raises(ValueError, match="must be in graph as a vertex: 'Z'"):
            BreadthFirstIterator(graph, "Z")

    def test_none_root(self):
        with pytest.raises(ValueError, match="root is not allowed to be None"):
            BreadthFirstIterator(make_graph(CHAIN), None)

    def test_none_graph(self):
        with pytest.raises(ValueError, match="graph is not allowed to be None"):
            BreadthFirstIterator(None, "A")

    def test_traverse_validates(self):
        with pytest.raises(ValueError, match="BreadthFirstIterator"):
            breadth_first_traverse(make_graph(CHAIN), "Z", print)


class TestBreadthFirstTraverse:
    def test_matches_iterator(self):
        graph = make_graph(
            [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E")]
        )
        seen = []
        result = breadth_first_traverse(graph, "A", seen.append)
        assert seen == list(BreadthFirstIterator(graph, "A"))
        assert result == tuple(seen)

    def test_classmethod(self):
        graph = make_graph(STAR)
        seen = []
        BreadthFirstIterator.traverse(graph, "A", seen.append)
        assert seen == ["A", "B", "C", "D"]

    def test_without_consumer(self):
        assert breadth_first_traverse(make_graph(CHAIN), "B") == ("B", "A", "C", "D")

    def test_consumer_error_aborts(self):
        graph = make_graph(CHAIN)
        seen = []

        def consumer(vertex):
            if vertex == "C":
                raise RuntimeError("stop")
            seen.append(vertex)

        with pytest.raises(RuntimeError, match="stop"):
            breadth_first_traverse(graph, "A", consumer)
        assert seen == ["A", "B"]
        assert graph.get_path_length() == 3
