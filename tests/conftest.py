import itertools

import pytest

from arithsynth.common.netlist import Netlist
from arithsynth.simulator.core import NetlistSimulator


@pytest.fixture
def netlist():
    return Netlist("test")


@pytest.fixture
def truth_table():
    """Evaluate ``outputs`` of a netlist for every 0/1 assignment of ``inputs``."""
    def run(nl, inputs, outputs):
        sim = NetlistSimulator(nl)
        rows = []
        for bits in itertools.product([0, 1], repeat=len(inputs)):
            values = sim.evaluate(dict(zip(inputs, bits)))
            rows.append((bits, tuple(int(values[w]) for w in outputs)))
        return rows
    return run
