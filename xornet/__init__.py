"""
xornet package
~~~~~~~~~~~~~~

Single-hidden-layer feedforward network trained by backpropagation,
demonstrated on the XOR function. Contains the network engine, its
deterministic random source and activation function, a command-line
demo and a small REST API.
"""

from xornet.exceptions import DimensionMismatch
from xornet.network import Network

__version__ = "1.0.0"

__all__ = ['DimensionMismatch', 'Network', '__version__']
