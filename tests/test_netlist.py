import numpy as np
import pytest

from arithsynth.common.netlist import (
    Netlist, GateOp, InputGate, OpGate, BufferGate,
)


def test_wires_are_positions(netlist):
    x = netlist.input("x")
    y = netlist.input("y")
    g = netlist.gate(GateOp.AND, x, y)
    assert (x, y, g) == (0, 1, 2)
    assert len(netlist) == 3
    assert netlist[g] == OpGate(GateOp.AND, 0, 1)


def test_gate_variants_have_expected_arity(netlist):
    x = netlist.input("x")
    b = netlist.buffer(x)
    g = netlist.gate(GateOp.XOR, x, b)
    assert isinstance(netlist[x], InputGate)
    assert isinstance(netlist[b], BufferGate)
    assert netlist.operands(x) == ()
    assert netlist.operands(b) == (x,)
    assert netlist.operands(g) == (x, b)


def test_append_dispatches_on_operand_count(netlist):
    x = netlist.append("x")
    y = netlist.append("y")
    g = netlist.append("xor", x, y)
    h = netlist.append(GateOp.OR, x, g)
    d = netlist.append("anything", g)
    assert netlist[x] == InputGate("x")
    assert netlist[g] == OpGate(GateOp.XOR, x, y)
    assert netlist[h] == OpGate(GateOp.OR, x, g)
    assert netlist[d] == BufferGate(g)


def test_append_rejects_bad_arity_and_operator(netlist):
    x = netlist.input("x")
    with pytest.raises(ValueError):
        netlist.append("and", x, x, x)
    with pytest.raises(ValueError):
        netlist.append("nand", x, x)
    with pytest.raises(ValueError):
        netlist.gate("and", x, x)
    assert len(netlist) == 1


@pytest.mark.parametrize("ref", [-1, 1, 5])
def test_invalid_references_are_rejected(netlist, ref):
    netlist.input("x")
    with pytest.raises(ValueError):
        netlist.gate(GateOp.AND, 0, ref)
    with pytest.raises(ValueError):
        netlist.buffer(ref)
    assert len(netlist) == 1


def test_gate_cannot_reference_itself(netlist):
    with pytest.raises(ValueError):
        netlist.buffer(0)
    assert len(netlist) == 0


def test_name_of_follows_buffers(netlist):
    x = netlist.input("x")
    y = netlist.input("y")
    g = netlist.gate(GateOp.XOR, x, y)
    bx = netlist.buffer(netlist.buffer(x))
    bg = netlist.buffer(g)
    assert netlist.name_of(x) == "x"
    assert netlist.name_of(g) == "xor"
    assert netlist.name_of(bx) == "x"
    assert netlist.name_of(bg) == "xor"


def test_inputs_and_gate_counts(netlist):
    x = netlist.input("x")
    y = netlist.input("y")
    netlist.buffer(x)
    netlist.gate(GateOp.AND, x, y)
    netlist.gate(GateOp.AND, x, y)
    netlist.gate(GateOp.OR, x, y)
    z = netlist.input("z")
    assert netlist.inputs() == [x, y, z]
    assert netlist.gate_counts() == {"input": 3, "buffer": 1, "and": 2, "or": 1}


def test_summary_and_repr(netlist):
    netlist.input("x")
    assert "Gates: 1" in netlist.summary()
    assert repr(netlist) == "Netlist('test', gates=1)"


def test_iteration_and_acyclicity(netlist):
    x = netlist.input("x")
    y = netlist.input("y")
    netlist.gate(GateOp.AND, x, y)
    assert [type(g) for g in netlist] == [InputGate, InputGate, OpGate]
    assert netlist.is_acyclic()


def test_numpy_integers_are_valid_references(netlist):
    x = netlist.input("x")
    b = netlist.buffer(np.int64(x))
    g = netlist.gate(GateOp.AND, np.uint8(x), b)
    assert netlist[np.int32(b)] == BufferGate(x)
    assert netlist.operands(g) == (x, b)
    assert all(type(w) is int for w in netlist.operands(g))


@pytest.mark.parametrize("ref", [0.0, "0", True, None])
def test_non_integer_references_are_rejected(netlist, ref):
    netlist.input("x")
    with pytest.raises(ValueError):
        netlist.buffer(ref)
    assert len(netlist) == 1


@pytest.mark.parametrize("ref", [-1, 2])
def test_indexing_checks_references(netlist, ref):
    netlist.input("x")
    netlist.input("y")
    with pytest.raises(ValueError):
        netlist[ref]
    with pytest.raises(ValueError):
        netlist.operands(ref)
    with pytest.raises(ValueError):
        netlist.name_of(ref)
