"""Build a small network and train it on the XOR function."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

from labkit.neural import Layer, Network

XOR_INPUTS: tuple[tuple[float, float], ...] = ((0, 0), (0, 1), (1, 0), (1, 1))
XOR_TARGETS: tuple[float, ...] = (0, 1, 1, 0)


def train_xor(network: Network, epochs: int = 25000, l_rate: float = 1.0) -> list[float]:
    """Train on XOR one example at a time and return the outputs for each input."""
    for _ in range(epochs):
        for inputs, target in zip(XOR_INPUTS, XOR_TARGETS):
            network.train(inputs, [target], l_rate)
    return [network.predict(inputs)[0] for inputs in XOR_INPUTS]


def _print_hidden(network: Network, sizes: Sequence[int]) -> None:
    hidden = network.input_layer.next
    assert hidden is not None
    print("The current state of the hidden layer:")
    for i in range(sizes[0]):
        for j in range(sizes[1]):
            print(f"  weights[{i}][{j}]: {hidden.weights[i][j]:f}")
    for i in range(sizes[1]):
        print(f"  biases[{i}]: {hidden.biases[i]:f}")
    for i in range(sizes[1]):
        print(f"  outputs[{i}]: {hidden.outputs[i]:f}")


def _print_predictions(network: Network) -> None:
    for a, b in XOR_INPUTS:
        out = network.predict([a, b])[0]
        print(f"  [{a:1.0f}, {b:1.0f}] -> {out:f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Walk through layer construction, then train an XOR network."""
    rng = random.Random(42)
    print("Big data machine learning.\n")
    print("--------------------------")

    print("PART I - Creating a layer.\n")
    print("Trying to layer_create.")
    print("Running layer_init.")
    first = Layer(2, None, rng)
    print("Here are some of the properties:")
    print(f"  num_outputs: {first.num_outputs}")
    print(f"   num_inputs: {first.num_inputs}")
    print(f"   outputs[0]: {first.outputs[0]:f}")
    print(f"   outputs[1]: {first.outputs[1]:f}")

    print("\nCreating second layer.")
    print("Running layer_init on second layer.")
    second = Layer(1, first, rng)
    print("Here are some of the properties:")
    print(f"  num_outputs: {second.num_outputs}")
    print(f"   num_inputs: {second.num_inputs}")
    print(f"   weights[0]: {second.weights[0][0]:f}")
    print(f"   weights[1]: {second.weights[1][0]:f}")
    print(f"    biases[0]: {second.biases[0]:f}")
    print(f"   outputs[0]: {second.outputs[0]:f}")

    print("\nComputing second layer outputs:")
    second.compute_outputs()
    print("Here is the new output:")
    print(f"   outputs[0]: {second.outputs[0]:f}")
    print("\nFreeing both layers.")

    print("\n--------------------------")
    print("PART II - Creating a neural network.")
    print("2 inputs, 2 hidden neurons and 1 output.\n")
    print(" * - * \\ ")
    print("         * - ")
    print(" * - * / \n")
    sizes = [2, 2, 1]
    network = Network(sizes, rng)

    print("Initialising network with random weights...")
    _print_hidden(network, sizes)

    print("Current random outputs of the network:")
    _print_predictions(network)

    print("\nTraining the network...")
    train_xor(network)

    _print_hidden(network, sizes)

    print("\nAfter training magic happened the outputs are:")
    _print_predictions(network)
    return 0


if __name__ == "__main__":
    sys.exit(main())