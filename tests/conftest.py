"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the xornet test-suite.
"""

import pytest

from xornet.network import Network

XOR_INPUTS = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
XOR_TARGETS = [0.0, 1.0, 1.0, 0.0]

# Outputs of the seed-42 2-2-1 network after 10000 epochs at rate 0.5,
# formatted to four decimals. This network settles in a local minimum.
REFERENCE_XOR_OUTPUTS = ["0.0210", "0.6622", "0.6621", "0.6635"]


@pytest.fixture
def xor_data():
    """The XOR truth table as (inputs, targets)."""
    return [list(x) for x in XOR_INPUTS], list(XOR_TARGETS)


@pytest.fixture
def reference_xor_outputs():
    """Four-decimal outputs of the trained seed-42 2-2-1 network."""
    return list(REFERENCE_XOR_OUTPUTS)


@pytest.fixture
def untrained_network():
    """A fresh 2-2-1 network with learning rate 0.5."""
    return Network(2, 2, 0.5)


@pytest.fixture(scope="module")
def trained_xor_network():
    """A 2-2-1 network trained on XOR for 10000 epochs."""
    net = Network(2, 2, 0.5)
    net.train(XOR_INPUTS, XOR_TARGETS, 10000)
    return net


@pytest.fixture(scope="module")
def converged_xor_network():
    """A 2-3-1 network trained on XOR for 10000 epochs."""
    net = Network(2, 3, 0.5)
    net.train(XOR_INPUTS, XOR_TARGETS, 10000)
    return net
