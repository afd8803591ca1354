"""Tests for WL feature vectors and kernel scores."""
import math

import pytest

from wlrefine.errors import InvalidHorizon
from wlrefine.graph.model import Graph
from wlrefine.wl.features import feature_vectors, wl_kernel
from wlrefine.wl.refine import refine


def _path_vs_star():
    path = Graph.from_lists(
        [("A0", 2), ("A1", 1), ("A2", 1), ("A3", 1), ("A4", 2)],
        [("A0", "A1"), ("A1", "A2"), ("A2", "A3"), ("A3", "A4")],
    )
    star = Graph.from_lists(
        [("B0", 3), ("B1", 2), ("B2", 2), ("B3", 2), ("B4", 2)],
        [("B0", "B1"), ("B0", "B2"), ("B0", "B3"), ("B0", "B4")],
    )
    return path, star


def _uniform_cycle(n, prefix):
    return Graph.from_lists(
        [(f"{prefix}{i}", 1) for i in range(n)],
        [(f"{prefix}{i}", f"{prefix}{(i + 1) % n}") for i in range(n)],
    )


def test_feature_vectors_step0():
    steps = refine(*_path_vs_star(), 2)
    dims, vecA, vecB = feature_vectors(steps, upto=0)
    assert dims == [(0, "1"), (0, "2"), (0, "3")]
    assert vecA == [3, 2, 0]
    assert vecB == [0, 4, 1]


def test_kernel_step0():
    steps = refine(*_path_vs_star(), 0)
    score = wl_kernel(steps)
    assert score.dot == 8
    assert score.dimensions == 3
    assert score.cosine == pytest.approx(8 / math.sqrt(13 * 17))


def test_kernel_indistinguishable_cycles():
    A = _uniform_cycle(6, "a")
    B = _uniform_cycle(3, "b")
    # 6 vs 3 nodes: histograms never match but vectors are parallel
    steps = refine(A, B, 2)
    score = wl_kernel(steps)
    assert score.dimensions == 3
    assert score.dot == 3 * 6 * 3
    assert score.cosine == pytest.approx(1.0)


def test_kernel_accumulates_over_steps():
    steps = refine(*_path_vs_star(), 3)
    dims = [wl_kernel(steps, upto=k).dimensions for k in range(4)]
    assert dims == sorted(dims)
    assert dims[-1] == sum(len(s.unique_labels) for s in steps)


def test_kernel_empty_graph_has_zero_cosine():
    steps = refine(Graph(), _uniform_cycle(3, "b"), 1)
    assert wl_kernel(steps).cosine == 0.0


def test_upto_out_of_range():
    steps = refine(*_path_vs_star(), 1)
    with pytest.raises(InvalidHorizon):
        feature_vectors(steps, upto=2)
    with pytest.raises(InvalidHorizon):
        wl_kernel(steps, upto=-1)
