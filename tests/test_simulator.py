import numpy as np
import pytest

from arithsynth.common.netlist import Netlist, GateOp
from arithsynth.synth.operators import multiplier
from arithsynth.simulator.core import (
    NetlistSimulator, int_to_bits, bits_to_int, bind, exhaustive_inputs,
    MAX_ARRAY_BITS, MAX_EXHAUSTIVE_BITS,
)
from arithsynth.simulator.verify import verify_adder, verify_multiplier, verify_popcount


def test_bit_conversions():
    bits = int_to_bits(6, 4)
    assert [int(b) for b in bits] == [0, 1, 1, 0]
    assert bits_to_int(bits) == 6
    assert bits_to_int([]) == 0
    assert isinstance(bits_to_int([1, 1]), int)


def test_bit_conversions_vectorized():
    values = np.array([0, 5, 9, 15])
    bits = int_to_bits(values, 4)
    assert np.array_equal(bits[0], [0, 1, 1, 1])
    assert np.array_equal(bits_to_int(bits), values)


def test_exhaustive_inputs():
    patterns = exhaustive_inputs(3)
    assert patterns.shape == (3, 8)
    assert patterns.dtype == np.uint8
    assert list(patterns[:, 6]) == [0, 1, 1]
    assert exhaustive_inputs(0).shape == (0, 1)
    with pytest.raises(ValueError):
        exhaustive_inputs(-1)


def test_bind():
    nl = Netlist()
    wires = [nl.input(f"a{i}") for i in range(3)]
    assignment = bind(wires, 5)
    assert [int(assignment[w]) for w in wires] == [1, 0, 1]


def test_evaluate_gates_and_buffers():
    nl = Netlist()
    x, y = nl.input("x"), nl.input("y")
    g_and = nl.gate(GateOp.AND, x, y)
    g_or = nl.gate(GateOp.OR, x, y)
    g_xor = nl.gate(GateOp.XOR, x, y)
    buf = nl.buffer(g_xor)

    patterns = exhaustive_inputs(2)
    values = NetlistSimulator(nl).evaluate({x: patterns[0], y: patterns[1]})
    assert list(values[g_and]) == [0, 0, 0, 1]
    assert list(values[g_or]) == [0, 1, 1, 1]
    assert list(values[g_xor]) == [0, 1, 1, 0]
    assert list(values[buf]) == list(values[g_xor])


def test_missing_input_is_an_error():
    nl = Netlist()
    x, y = nl.input("x"), nl.input("y")
    nl.gate(GateOp.AND, x, y)
    with pytest.raises(ValueError, match="y"):
        NetlistSimulator(nl).evaluate({x: 1})


def test_input_values_are_masked_to_one_bit():
    nl = Netlist()
    x = nl.input("x")
    assert int(NetlistSimulator(nl).evaluate({x: 3})[x]) == 1


@pytest.mark.parametrize("width", [1, 3, 6])
def test_verify_adder(width):
    result = verify_adder(width)
    assert result.passed
    assert result.cases == 4 ** width
    assert "PASS" in result.summary()


def test_verify_multiplier_rectangular():
    result = verify_multiplier(3, 4)
    assert result.passed
    assert result.cases == 2 ** 7
    assert result.report.name == "multiplier 3x4"


def test_verify_popcount(capsys):
    result = verify_popcount(10, verbose=True)
    assert result.passed
    assert result.cases == 1024
    assert "popcount 10" in capsys.readouterr().out


def test_scalar_conversions_are_not_limited_to_int64():
    value = (1 << 100) + 5
    bits = int_to_bits(value, 101)
    assert bits_to_int(bits) == value


def test_array_conversions_reject_overflowing_widths():
    with pytest.raises(ValueError):
        int_to_bits(np.array([1, 2]), MAX_ARRAY_BITS + 1)
    wide = [np.array([1, 0])] * (MAX_ARRAY_BITS + 1)
    with pytest.raises(ValueError):
        bits_to_int(wide)


def test_exhaustive_inputs_are_capped():
    with pytest.raises(ValueError):
        exhaustive_inputs(MAX_EXHAUSTIVE_BITS + 1)


@pytest.mark.parametrize("check,args", [
    (verify_adder, (13,)),
    (verify_multiplier, (16,)),
    (verify_multiplier, (20, 5)),
    (verify_popcount, (MAX_EXHAUSTIVE_BITS + 1,)),
])
def test_verification_rejects_wide_operators(check, args):
    with pytest.raises(ValueError, match="limited"):
        check(*args)


def test_wide_multiplier_evaluates_with_scalars():
    nl = Netlist()
    a = [nl.input(f"a{i}") for i in range(40)]
    b = [nl.input(f"b{i}") for i in range(40)]
    out = multiplier(nl, a, b)
    x, y = (1 << 39) + 12345, (1 << 38) + 999
    assert NetlistSimulator(nl).run({**bind(a, x), **bind(b, y)}, out) == x * y
