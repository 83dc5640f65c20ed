import random

from labkit.neural import Network
from labkit.train import XOR_INPUTS, XOR_TARGETS, main, train_xor


def _loss(network):
    return sum(
        (network.predict(x)[0] - t) ** 2 for x, t in zip(XOR_INPUTS, XOR_TARGETS)
    )


def test_train_xor_returns_one_output_per_input():
    network = Network([2, 2, 1], random.Random(42))
    outputs = train_xor(network, epochs=10, l_rate=1.0)
    assert len(outputs) == len(XOR_INPUTS)
    assert all(0.0 < o < 1.0 for o in outputs)


def test_train_xor_reduces_error():
    network = Network([2, 3, 1], random.Random(42))
    before = _loss(network)
    train_xor(network, epochs=2000, l_rate=1.0)
    assert _loss(network) < before


def test_train_xor_zero_epochs_leaves_network_unchanged():
    network = Network([2, 2, 1], random.Random(4))
    expected = [network.predict(x)[0] for x in XOR_INPUTS]
    assert train_xor(network, epochs=0, l_rate=1.0) == expected


def test_main_prints_walkthrough(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Big data machine learning.\n")
    assert "PART I - Creating a layer." in out
    assert "  num_outputs: 2" in out
    assert "   num_inputs: 0" in out
    assert "PART II - Creating a neural network." in out
    after = out.split("After training magic happened the outputs are:\n")[1]
    lines = after.splitlines()
    assert [line.split(" -> ")[0] for line in lines] == [
        "  [0, 0]",
        "  [0, 1]",
        "  [1, 0]",
        "  [1, 1]",
    ]
    assert all(0.0 <= float(line.split(" -> ")[1]) <= 1.0 for line in lines)