"""
demo.py
~~~~~~~

Train a network on XOR and print its predictions.

Usage:
    python -m xornet

Epochs and learning rate can be overridden with XORNET_EPOCHS and
XORNET_LEARNING_RATE.
"""

import logging
from typing import List, Optional

from xornet.config import DEFAULT_HIDDEN_SIZE, Settings, configure_logging
from xornet.network import Network

logger = logging.getLogger(__name__)

XOR_INPUTS = [
    [0.0, 0.0],
    [0.0, 1.0],
    [1.0, 0.0],
    [1.0, 1.0],
]
XOR_TARGETS = [0.0, 1.0, 1.0, 0.0]


def format_prediction(x: List[float], output: float) -> str:
    """Format one prediction line, e.g. ``Input: [0.0, 1.0] => Output: 0.9871``."""
    return f"Input: {x} => Output: {output:.4f}"


def run(settings: Settings) -> Network:
    """Build and train the XOR network described by ``settings``."""
    net = Network(2, DEFAULT_HIDDEN_SIZE, settings.learning_rate)
    logger.info(
        f"Training XOR network: epochs={settings.epochs}, "
        f"lr={settings.learning_rate}"
    )
    net.train(XOR_INPUTS, XOR_TARGETS, settings.epochs)
    return net


def main(settings: Optional[Settings] = None) -> int:
    """Main demo function."""
    if settings is None:
        settings = Settings.from_env()
        configure_logging(settings)

    net = run(settings)

    print("Testing the trained network:")
    for x in XOR_INPUTS:
        print(format_prediction(x, net.predict(x)))
    return 0
