import random

import numpy as np
import pytest

from arithsynth.common.netlist import Netlist
from arithsynth.synth.compressor import compress, compress_columns
from arithsynth.synth.operators import make_inputs
from arithsynth.simulator.core import NetlistSimulator, exhaustive_inputs


def _column_value(values, columns):
    return sum(int(values[w]) << weight for weight, col in enumerate(columns) for w in col)


def test_single_wire_passes_through(netlist):
    (x,) = make_inputs(netlist, "x", 1)
    assert compress(netlist, [[x]]) == [x]
    assert len(netlist) == 1


def test_all_ones_example(netlist):
    col0 = make_inputs(netlist, "u", 5)
    col1 = make_inputs(netlist, "v", 2)
    out = list(compress_columns(netlist, [col0, col1]))
    assert [weight for weight, _ in out] == [0, 1, 2, 3]

    values = NetlistSimulator(netlist).evaluate({w: 1 for w in col0 + col1})
    assert [int(values[w]) for _, w in out] == [1, 0, 0, 1]


def test_caller_columns_are_not_modified(netlist):
    col0 = make_inputs(netlist, "u", 4)
    col1 = make_inputs(netlist, "v", 1)
    columns = [list(col0), list(col1)]
    compress(netlist, columns)
    assert columns == [col0, col1]


def test_empty_columns_emit_no_bit(netlist):
    x, y = make_inputs(netlist, "x", 2)
    out = list(compress_columns(netlist, [[], [x], [], []]))
    assert out == [(1, x)]
    assert list(compress_columns(netlist, [])) == []
    assert list(compress_columns(netlist, [[]])) == []


def test_carry_creates_new_column(netlist):
    x, y = make_inputs(netlist, "x", 2)
    out = list(compress_columns(netlist, [[x, y]]))
    assert [weight for weight, _ in out] == [0, 1]


def test_weights_are_increasing(netlist):
    columns = [make_inputs(netlist, f"c{w}_", h) for w, h in enumerate([7, 0, 3, 6, 1])]
    weights = [weight for weight, _ in compress_columns(netlist, columns)]
    assert weights == sorted(weights)
    assert len(set(weights)) == len(weights)


@pytest.mark.parametrize("seed", range(12))
def test_value_is_preserved(seed):
    rng = random.Random(seed)
    heights = [rng.randint(0, 4) for _ in range(rng.randint(1, 4))]
    nl = Netlist()
    columns = [make_inputs(nl, f"c{w}_", h) for w, h in enumerate(heights)]
    wires = [w for col in columns for w in col]
    out = list(compress_columns(nl, columns))

    patterns = exhaustive_inputs(len(wires))
    values = NetlistSimulator(nl).evaluate(dict(zip(wires, patterns)))

    expected = np.zeros(patterns.shape[1], dtype=np.int64)
    for weight, col in enumerate(columns):
        for w in col:
            expected += values[w].astype(np.int64) << weight
    actual = np.zeros(patterns.shape[1], dtype=np.int64)
    for weight, w in out:
        actual += np.broadcast_to(values[w], patterns.shape[1:]).astype(np.int64) << weight

    assert np.array_equal(actual, expected)
    assert nl.is_acyclic()


def test_output_bit_count_matches_popcount_width():
    for n in range(1, 17):
        nl = Netlist()
        bits = make_inputs(nl, "x", n)
        assert len(compress(nl, [bits])) == n.bit_length()
