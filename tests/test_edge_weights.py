import math

import pytest

from shortpath.domain.errors import InvalidWeightError
from shortpath.graph.edge_weights import NonNegativeEdgeWeights


def test_mapping_lookup_directed():
    weights = NonNegativeEdgeWeights({("a", "b"): 2.5}, directed=True)

    assert weights.edge_weight("a", "b") == 2.5


def test_directed_lookup_does_not_use_reverse_orientation():
    weights = NonNegativeEdgeWeights({("a", "b"): 2.5}, directed=True)

    with pytest.raises(InvalidWeightError) as excinfo:
        weights.edge_weight("b", "a")
    assert excinfo.value.is_missing
    assert excinfo.value.edge == ("b", "a")


def test_undirected_lookup_accepts_either_orientation():
    weights = NonNegativeEdgeWeights({("a", "b"): 2.5}, directed=False)

    assert weights.edge_weight("a", "b") == 2.5
    assert weights.edge_weight("b", "a") == 2.5


def test_zero_weight_is_valid():
    weights = NonNegativeEdgeWeights({(1, 2): 0}, directed=True)

    assert weights.edge_weight(1, 2) == 0


def test_negative_weight_is_rejected():
    weights = NonNegativeEdgeWeights({(1, 2): -1}, directed=True)

    with pytest.raises(InvalidWeightError) as excinfo:
        weights.edge_weight(1, 2)
    assert excinfo.value.weight == -1
    assert not excinfo.value.is_missing
    assert "negative" in str(excinfo.value)


def test_nan_weight_is_rejected():
    weights = NonNegativeEdgeWeights({(1, 2): math.nan}, directed=True)

    with pytest.raises(InvalidWeightError) as excinfo:
        weights.edge_weight(1, 2)
    assert math.isnan(excinfo.value.weight)
    assert not excinfo.value.is_missing


def test_invalid_weight_error_is_a_value_error():
    weights = NonNegativeEdgeWeights({}, directed=True)

    with pytest.raises(ValueError):
        weights.edge_weight(1, 2)


def test_callable_weight_source():
    weights = NonNegativeEdgeWeights(lambda u, v: abs(u - v), directed=True)

    assert weights.edge_weight(1, 4) == 3


def test_callable_returning_none_is_undefined():
    weights = NonNegativeEdgeWeights(lambda u, v: None, directed=False)

    with pytest.raises(InvalidWeightError):
        weights.edge_weight(1, 4)


def test_every_lookup_is_validated():
    calls = []

    def weight_of(u, v):
        calls.append((u, v))
        return -5 if len(calls) > 1 else 1

    weights = NonNegativeEdgeWeights(weight_of, directed=True)

    assert weights.edge_weight("a", "b") == 1
    with pytest.raises(InvalidWeightError):
        weights.edge_weight("a", "b")
