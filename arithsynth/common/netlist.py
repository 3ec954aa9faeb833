"""
Netlist Representation for Gate-Level Synthesis.

A netlist is an ordered, append-only list of gates. The position of a gate
in the list is its permanent identity, a "wire", and any later gate may use
that wire as an operand.

Gate Variants:
    - Input:  a primary input wire with a text label (no operands)
    - Op:     a two-input AND, OR or XOR gate
    - Buffer: a zero-cost alias of one earlier wire, used to give each
              consumer of a fan-out signal its own identity

Because operands must already exist when a gate is appended, insertion
order is always a valid evaluation order and the netlist can never
contain a cycle. No topological sort is ever needed.

Example:
    >>> nl = Netlist()
    >>> x = nl.input("x")
    >>> y = nl.input("y")
    >>> s = nl.gate(GateOp.XOR, x, y)
    >>> nl.operands(s)
    (0, 1)
"""

from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import Dict, Iterator, List, NewType, Tuple, Union
from enum import Enum


Wire = NewType("Wire", int)


class GateOp(Enum):
    """Two-input Boolean operators."""
    AND = "and"
    OR = "or"
    XOR = "xor"


@dataclass(frozen=True)
class InputGate:
    """A primary input."""
    label: str

    @property
    def operands(self) -> Tuple[Wire, ...]:
        return ()

    def __repr__(self) -> str:
        return f"input({self.label})"


@dataclass(frozen=True)
class OpGate:
    """
    A two-input Boolean gate.

    Attributes:
        op: The operator (AND, OR or XOR)
        a: First operand wire
        b: Second operand wire
    """
    op: GateOp
    a: Wire
    b: Wire

    @property
    def operands(self) -> Tuple[Wire, ...]:
        return (self.a, self.b)

    def __repr__(self) -> str:
        return f"{self.op.value}({self.a}, {self.b})"


@dataclass(frozen=True)
class BufferGate:
    """
    Fan-out duplicate of an earlier wire.

    Carries the same value as its source. It never counts as a gate in
    any cost model.
    """
    source: Wire

    @property
    def operands(self) -> Tuple[Wire, ...]:
        return (self.source,)

    def __repr__(self) -> str:
        return f"buf({self.source})"


Gate = Union[InputGate, OpGate, BufferGate]


class Netlist:
    """
    Append-only store of gates.

    Only the netlist mints wires: every builder method checks its operand
    references against the current length and returns the new gate's
    wire. Nothing is ever removed or modified in place.

    Usage:
        >>> nl = Netlist()
        >>> a = nl.input("a")
        >>> b = nl.buffer(a)
        >>> len(nl)
        2
    """

    def __init__(self, name: str = "netlist"):
        self.name = name
        self._gates: List[Gate] = []

    def __len__(self) -> int:
        return len(self._gates)

    def __getitem__(self, wire: int) -> Gate:
        return self._gates[self._check(wire)]

    def __iter__(self) -> Iterator[Gate]:
        return iter(self._gates)

    def _check(self, wire: int) -> Wire:
        if isinstance(wire, bool):
            raise ValueError(f"Wire reference must be an integer, got {wire!r}")
        try:
            wire = operator.index(wire)
        except TypeError:
            raise ValueError(f"Wire reference must be an integer, got {wire!r}") from None
        if wire < 0 or wire >= len(self._gates):
            raise ValueError(
                f"Invalid wire reference {wire} "
                f"(netlist has {len(self._gates)} gates)"
            )
        return Wire(wire)

    def _push(self, gate: Gate) -> Wire:
        self._gates.append(gate)
        return Wire(len(self._gates) - 1)

    def input(self, label: str) -> Wire:
        """Append a primary input and return its wire."""
        return self._push(InputGate(str(label)))

    def gate(self, op: GateOp, a: int, b: int) -> Wire:
        """Append a two-input gate and return its wire."""
        if not isinstance(op, GateOp):
            raise ValueError(f"Unknown gate operator: {op!r}")
        a, b = self._check(a), self._check(b)
        return self._push(OpGate(op, a, b))

    def buffer(self, source: int) -> Wire:
        """Append a fan-out duplicate of ``source`` and return its wire."""
        return self._push(BufferGate(self._check(source)))

    def append(self, op_or_label: Union[GateOp, str], *operands: int) -> Wire:
        """
        Generic append, dispatching on the number of operands.

        Args:
            op_or_label: Input label (no operands) or gate operator
            operands: 0, 1 or 2 operand wires

        Returns:
            Wire of the appended gate

        With one operand the first argument is ignored and a buffer is
        appended; the buffer is displayed under its source's name.
        """
        if len(operands) == 0:
            return self.input(op_or_label)
        if len(operands) == 1:
            return self.buffer(operands[0])
        if len(operands) == 2:
            if isinstance(op_or_label, str):
                try:
                    op_or_label = GateOp(op_or_label.lower())
                except ValueError:
                    raise ValueError(f"Unknown gate operator: {op_or_label!r}") from None
            return self.gate(op_or_label, *operands)
        raise ValueError(f"Gates take 0, 1 or 2 operands, got {len(operands)}")

    def operands(self, wire: int) -> Tuple[Wire, ...]:
        """Operand wires of a gate."""
        return self._gates[self._check(wire)].operands

    def inputs(self) -> List[Wire]:
        """Wires of all primary inputs, in creation order."""
        return [Wire(i) for i, g in enumerate(self._gates) if isinstance(g, InputGate)]

    def name_of(self, wire: int) -> str:
        """
        Display name of a gate.

        Inputs show their label, operations their operator, and buffers
        the name of the gate they duplicate.
        """
        gate = self._gates[self._check(wire)]
        while isinstance(gate, BufferGate):
            gate = self._gates[gate.source]
        if isinstance(gate, InputGate):
            return gate.label
        return gate.op.value

    def gate_counts(self) -> Dict[str, int]:
        """Count gates by kind ('input', 'buffer', 'and', 'or', 'xor')."""
        counts: Dict[str, int] = {}
        for gate in self._gates:
            if isinstance(gate, InputGate):
                key = "input"
            elif isinstance(gate, BufferGate):
                key = "buffer"
            else:
                key = gate.op.value
            counts[key] = counts.get(key, 0) + 1
        return counts

    def is_acyclic(self) -> bool:
        """Check that every operand refers to an earlier wire."""
        return all(
            0 <= w < i
            for i, gate in enumerate(self._gates)
            for w in gate.operands
        )

    def summary(self) -> str:
        """Return summary string."""
        counts = self.gate_counts()
        return (
            f"Netlist '{self.name}':\n"
            f"  Gates: {len(self)}\n"
            f"  Inputs: {counts.get('input', 0)}\n"
            f"  Buffers: {counts.get('buffer', 0)}\n"
            f"  AND: {counts.get('and', 0)}, OR: {counts.get('or', 0)}, "
            f"XOR: {counts.get('xor', 0)}"
        )

    def __repr__(self) -> str:
        return f"Netlist('{self.name}', gates={len(self)})"
