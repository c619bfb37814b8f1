"""
activations.py
~~~~~~~~~~~~~~

Logistic sigmoid and its derivative, for scalars and numpy arrays.
"""

import numpy as np


def sigmoid(z):
    """The sigmoid function."""
    return 1.0 / (1.0 + np.exp(-z))


def sigmoid_backprop(error, y):
    """
    Scale ``error`` by the slope of the sigmoid at output ``y``.

    The slope is taken from the output as ``y * (1 - y)``, so the
    exponential is never re-evaluated.

    Args:
        error: Error arriving at the unit
        y: A value already produced by ``sigmoid``

    Returns:
        ``error * y * (1 - y)``, grouped left to right
    """
    return error * y * (1.0 - y)
