"""
network.py
~~~~~~~~~~

A feedforward neural network with exactly one hidden layer and a single
sigmoid output unit, trained by online stochastic gradient descent with
backpropagation.

Parameters are initialized from a fixed-seed ``SimpleRng`` so that two
networks built with the same sizes are identical, and stay identical
under identical training.
"""

import time
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from xornet.activations import sigmoid, sigmoid_backprop
from xornet.exceptions import DimensionMismatch
from xornet.simple_rng import SimpleRng

logger = logging.getLogger(__name__)

INIT_SEED = 42
INIT_LOW, INIT_HIGH = -1.0, 1.0

# Epoch interval between DEBUG progress messages during training
LOG_EVERY = 1000


class Network:
    """
    Single-hidden-layer network with one output unit.

    Attributes:
        weights_input_hidden: (hidden_size, input_size) array; row ``i``
            holds the weights feeding hidden unit ``i``
        bias_hidden: (hidden_size,) array
        weights_hidden_output: (hidden_size,) array feeding the output unit
        bias_output: Output unit bias
    """

    def __init__(self, input_size: int, hidden_size: int, learning_rate: float):
        """
        Build the network and initialize its parameters.

        Args:
            input_size: Number of input features
            hidden_size: Number of hidden units
            learning_rate: Fixed gradient descent step size

        Raises:
            ValueError: If a size is not a positive integer or the
                learning rate is not a positive number
        """
        for name, value in (('input_size', input_size),
                            ('hidden_size', hidden_size)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if (isinstance(learning_rate, bool)
                or not isinstance(learning_rate, (int, float))
                or not learning_rate > 0):
            raise ValueError(
                f"learning_rate must be a positive number, got {learning_rate!r}"
            )

        self._input_size = input_size
        self._hidden_size = hidden_size
        self._learning_rate = float(learning_rate)

        self.weights_input_hidden = np.zeros((hidden_size, input_size))
        self.bias_hidden = np.zeros(hidden_size)
        self.weights_hidden_output = np.zeros(hidden_size)
        self.bias_output = 0.0

        self._initialize_weights()
        logger.debug(
            f"Created network {input_size}-{hidden_size}-1 "
            f"with learning rate {self._learning_rate}"
        )

    @property
    def input_size(self) -> int:
        return self._input_size

    @property
    def hidden_size(self) -> int:
        return self._hidden_size

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    def _initialize_weights(self) -> None:
        """
        Fill every parameter with draws in [-1, 1] from ``SimpleRng(42)``.

        The draw order is part of the contract: each hidden unit's input
        weights followed by its bias, then all hidden-to-output weights,
        then the output bias.
        """
        rng = SimpleRng(INIT_SEED)

        for i in range(self._hidden_size):
            for j in range(self._input_size):
                self.weights_input_hidden[i, j] = rng.gen_range(INIT_LOW, INIT_HIGH)
            self.bias_hidden[i] = rng.gen_range(INIT_LOW, INIT_HIGH)

        for i in range(self._hidden_size):
            self.weights_hidden_output[i] = rng.gen_range(INIT_LOW, INIT_HIGH)
        self.bias_output = rng.gen_range(INIT_LOW, INIT_HIGH)

    def _as_input(self, x) -> np.ndarray:
        """Convert ``x`` to a float vector, checking it fits the input layer."""
        a = np.asarray(x, dtype=float)
        if a.ndim != 1 or a.shape[0] != self._input_size:
            actual = a.shape[0] if a.ndim == 1 else a.size
            raise DimensionMismatch(
                f"Expected an input vector of length {self._input_size}, "
                f"got shape {a.shape}",
                expected=self._input_size,
                actual=actual
            )
        return a

    def feedforward(self, x: np.ndarray) -> Tuple[np.ndarray, float]:
        """
        Evaluate the network on a validated input vector.

        Returns:
            tuple: (hidden layer activations, output activation)
        """
        # Elementwise products summed along each row keep a fixed addition order
        hidden_input = (self.weights_input_hidden * x).sum(axis=1) + self.bias_hidden
        hidden_output = sigmoid(hidden_input)
        final_input = (hidden_output * self.weights_hidden_output).sum() + self.bias_output
        return hidden_output, float(sigmoid(final_input))

    def predict(self, x: Sequence[float]) -> float:
        """
        Return the network's output for a single input vector.

        Never modifies the network.

        Raises:
            DimensionMismatch: If ``len(x) != input_size``
        """
        _, prediction = self.feedforward(self._as_input(x))
        return prediction

    def predict_many(self, inputs: Sequence[Sequence[float]]) -> List[float]:
        """Predict every input in order; all inputs are checked first."""
        vectors = [self._as_input(x) for x in inputs]
        return [self.feedforward(x)[1] for x in vectors]

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        targets: Sequence[float],
        epochs: int,
        callback: Optional[Callable[[Dict[str, Any]], None]] = None
    ) -> None:
        """
        Train the network using online stochastic gradient descent.

        Each epoch visits the examples in the order given and updates the
        parameters after every example. Output layer parameters are
        updated before input layer parameters; both updates use the
        deltas computed from the pre-update weights.

        Args:
            inputs: Training input vectors, each of length ``input_size``
            targets: One target value per input vector
            epochs: Number of passes over the training set
            callback: Optional function called after each epoch with a
                dict of 'epoch', 'total_epochs', 'loss' and 'elapsed_time'

        Raises:
            DimensionMismatch: If inputs and targets differ in length or
                an input vector has the wrong length
            ValueError: If epochs is not a non-negative integer
        """
        if len(inputs) != len(targets):
            raise DimensionMismatch(
                f"Got {len(inputs)} input vectors but {len(targets)} targets",
                expected=len(inputs),
                actual=len(targets)
            )
        if isinstance(epochs, bool) or not isinstance(epochs, int) or epochs < 0:
            raise ValueError(f"epochs must be a non-negative integer, got {epochs!r}")

        training_data = [
            (self._as_input(x), float(y)) for x, y in zip(inputs, targets)
        ]
        n = len(training_data)
        eta = self._learning_rate
        start_time = time.time()
        loss = 0.0

        for epoch in range(1, epochs + 1):
            squared_error = 0.0
            for x, target in training_data:
                squared_error += self._update(x, target, eta)
            loss = 0.5 * squared_error / n if n else 0.0

            if epoch % LOG_EVERY == 0:
                logger.debug(f"Epoch {epoch}/{epochs}: loss {loss:.6f}")

            if callback:
                callback({
                    'epoch': epoch,
                    'total_epochs': epochs,
                    'loss': loss,
                    'elapsed_time': time.time() - start_time
                })

        logger.info(
            f"Trained {self._input_size}-{self._hidden_size}-1 network for "
            f"{epochs} epoch(s) on {n} example(s): final loss {loss:.6f}"
        )

    def _update(self, x: np.ndarray, target: float, eta: float) -> float:
        """
        Apply one backpropagation step for a single example.

        Returns:
            float: The squared output error measured before the update
        """
        hidden_output, prediction = self.feedforward(x)

        output_error = target - prediction
        output_delta = sigmoid_backprop(output_error, prediction)

        hidden_error = self.weights_hidden_output * output_delta
        hidden_delta = sigmoid_backprop(hidden_error, hidden_output)

        self.weights_hidden_output += eta * output_delta * hidden_output
        self.bias_output += eta * output_delta

        self.weights_input_hidden += (eta * hidden_delta)[:, np.newaxis] * x
        self.bias_hidden += eta * hidden_delta

        return output_error ** 2

    def evaluate(
        self,
        inputs: Sequence[Sequence[float]],
        targets: Sequence[float],
        tolerance: float = 0.1
    ) -> int:
        """
        Return the number of inputs whose prediction lies within
        ``tolerance`` of its target.
        """
        if len(inputs) != len(targets):
            raise DimensionMismatch(
                f"Got {len(inputs)} input vectors but {len(targets)} targets",
                expected=len(inputs),
                actual=len(targets)
            )
        predictions = self.predict_many(inputs)
        return sum(
            int(abs(p - float(y)) <= tolerance)
            for p, y in zip(predictions, targets)
        )

    def get_parameters(self) -> Dict[str, Any]:
        """
        Return a copy of all parameters as plain Python lists and floats.

        Changing the returned structure never affects the network.
        """
        return {
            'weights_input_hidden': self.weights_input_hidden.tolist(),
            'bias_hidden': self.bias_hidden.tolist(),
            'weights_hidden_output': self.weights_hidden_output.tolist(),
            'bias_output': float(self.bias_output),
            'learning_rate': self._learning_rate
        }

    def __repr__(self) -> str:
        return (
            f"Network(input_size={self._input_size}, "
            f"hidden_size={self._hidden_size}, "
            f"learning_rate={self._learning_rate})"
        )
