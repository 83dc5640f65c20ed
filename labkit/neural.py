"""A small fully connected sigmoid network trained by backpropagation."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence
from itertools import islice


def sigmoid(x: float) -> float:
    """The logistic function."""
    return 1.0 / (1.0 + math.exp(-x))


def sigmoid_prime(x: float) -> float:
    """Derivative of the sigmoid, given a value that is already a sigmoid output."""
    return x * (1.0 - x)


class Layer:
    """One layer of neurons, linked to its neighbours.

    The input layer (``prev is None``) holds only outputs. Every other layer
    holds one incoming weight per (input, neuron) pair, a bias and a delta
    error per neuron.
    """

    def __init__(
        self,
        num_outputs: int,
        prev: Layer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if num_outputs < 1:
            raise ValueError("a layer needs at least one neuron")
        rng = rng if rng is not None else random.Random()
        self.num_outputs = num_outputs
        self.prev = prev
        self.next: Layer | None = None
        self.outputs = [0.0] * num_outputs

        if prev is None:
            self.num_inputs = 0
            self.weights: list[list[float]] = []
            self.biases: list[float] = []
            self.deltas: list[float] = []
            return

        self.num_inputs = prev.num_outputs
        self.biases = [0.0] * num_outputs
        self.deltas = [0.0] * num_outputs
        self.weights = [
            [rng.random() - 0.5 for _ in range(num_outputs)]
            for _ in range(self.num_inputs)
        ]
        prev.next = self

    @property
    def is_input(self) -> bool:
        return self.prev is None

    def compute_outputs(self) -> None:
        """Recompute this layer's outputs from the previous layer's outputs."""
        if self.prev is None:
            raise ValueError("cannot compute outputs of the input layer")
        inputs = self.prev.outputs
        self.outputs = [
            sigmoid(bias + sum(w * x for w, x in zip(column, inputs)))
            for bias, column in zip(self.biases, zip(*self.weights))
        ]

    def compute_deltas(self) -> None:
        """Backpropagate the next layer's delta errors into this layer."""
        following = self.next
        if following is None:
            raise ValueError("cannot backpropagate into a layer with no successor")
        self.deltas = [
            sigmoid_prime(output) * sum(w * d for w, d in zip(row, following.deltas))
            for output, row in zip(self.outputs, following.weights)
        ]

    def update(self, l_rate: float) -> None:
        """Adjust weights and biases by the delta errors at the given learning rate."""
        if self.prev is None:
            raise ValueError("the input layer has no weights to update")
        for row, x in zip(self.weights, self.prev.outputs):
            for j, delta in enumerate(self.deltas):
                row[j] += l_rate * x * delta
        self.biases = [b + l_rate * d for b, d in zip(self.biases, self.deltas)]


class Network:
    """A chain of layers from an input layer to an output layer."""

    def __init__(
        self, layer_outputs: Sequence[int], rng: random.Random | None = None
    ) -> None:
        sizes = list(layer_outputs)
        if not sizes:
            raise ValueError("a network needs at least one layer")
        rng = rng if rng is not None else random.Random()
        self.input_layer = Layer(sizes[0], None, rng)
        layer = self.input_layer
        for size in sizes[1:]:
            layer = Layer(size, layer, rng)
        self.output_layer = layer

    def layers(self) -> Iterator[Layer]:
        """Yield the layers from input to output."""
        layer: Layer | None = self.input_layer
        while layer is not None:
            yield layer
            layer = layer.next

    def predict(self, inputs: Sequence[float]) -> list[float]:
        """Run a forward pass and return the output layer's outputs."""
        values = [float(v) for v in inputs]
        if len(values) != self.input_layer.num_outputs:
            raise ValueError(
                f"expected {self.input_layer.num_outputs} inputs, got {len(values)}"
            )
        self.input_layer.outputs = values
        for layer in islice(self.layers(), 1, None):
            layer.compute_outputs()
        return list(self.output_layer.outputs)

    def train(
        self, inputs: Sequence[float], targets: Sequence[float], l_rate: float
    ) -> None:
        """Apply a single backpropagation update for one example."""
        if l_rate <= 0:
            raise ValueError("learning rate must be positive")
        wanted = [float(t) for t in targets]
        out = self.output_layer
        if len(wanted) != out.num_outputs:
            raise ValueError(f"expected {out.num_outputs} targets, got {len(wanted)}")
        if out is self.input_layer:
            raise ValueError("a network with a single layer has nothing to train")

        self.predict(inputs)

        out.deltas = [
            sigmoid_prime(o) * (t - o) for o, t in zip(out.outputs, wanted)
        ]

        layer = out.prev
        while layer is not None and layer is not self.input_layer:
            layer.compute_deltas()
            layer = layer.prev

        for layer in islice(self.layers(), 1, None):
            layer.update(l_rate)