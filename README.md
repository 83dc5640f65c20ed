# labkit

A collection of small teaching programs, each usable as a library module and
from the command line. Only the Python standard library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module              | Contents                                                                   |
|---------------------|----------------------------------------------------------------------------|
| `labkit.neural`     | `sigmoid`, `sigmoid_prime`, `Layer` and `Network`: a sigmoid network trained by backpropagation |
| `labkit.rdata`      | `random_data`, `format_data`: random training data                         |
| `labkit.train`      | `train_xor`: trains a network on the XOR truth table                       |
| `labkit.trie`       | `Dictionary`: a trie of words made of the letters A to Z                   |
| `labkit.doublets`   | `valid_step`, `valid_chain`, `find_chain`, `format_chain`: word ladders    |
| `labkit.binaryheap` | `HeapNode`, `initial_heap`, `max_heapify`, `build_max_heap`, `heapsort`: a 1-based max-heap over a string's suffixes |
| `labkit.unique`     | `derived_lookup_table`, `copy_unique_letters`, `int_sequence`              |
| `labkit.textutils`  | `trim_newline`, `tokenize`, `rewrite_string`                               |
| `labkit.elizastate` | `ElizaState`, `Rule`: what a conversation script configures                |
| `labkit.rules`      | `decomp_to_regex`, `rule_applies`, `rule_apply`, `find_rules`, `choose_rule`, `RuleError` |
| `labkit.script`     | `parse_lines`, `parse_eliza_script`: reading conversation scripts          |
| `labkit.eliza`      | `respond`, `run`: the conversation itself                                  |
| `labkit.image`      | `Image`, `ImageFormat`, `ImageError`, `read_image`: binary PBM/PGM/PPM images |
| `labkit.dragon`     | `Turtle`, `starting_direction`, `dragon`: the twin Heighway dragon          |

## Command-line tools

### Neural network

```
labkit-train
```

Seeds its random generator with 42, builds a two-neuron input layer and a
one-neuron layer on top of it and prints their properties, then builds a
2-2-1 network. It prints the hidden layer and the outputs for the four XOR
inputs, trains for 25000 epochs at learning rate 1.0, one example at a time,
and prints them again.

```
labkit-rdata ROWS COLUMNS
```

Prints `ROWS` lines, each holding `COLUMNS` random values in [0, 1)
followed by `-> target`. With any other number of arguments it prints a usage
line and exits with status 1.

From Python:

```python
import random
from labkit.neural import Network

net = Network([2, 2, 1], random.Random(42))
net.train([0, 1], [1], 1.0)
print(net.predict([0, 1]))
```

### Doublets

```
labkit-doublets [START] [TARGET] [--words FILE] [--max-words N]
```

Loads the word list `FILE` (default `words.txt`, one word per line) and
searches depth first for a chain from `START` (default `HARD`) to `TARGET`
(default `EASY`) of at most `N` words (default 7), each differing from the
one before it in exactly one letter. A chain found is printed one word per
line, its first and last words in upper case and the rest in lower case.

```python
from labkit.trie import Dictionary
from labkit.doublets import find_chain, valid_chain

words = Dictionary()
words.load_from_file("words.txt")
chain = find_chain(words, "HARD", "EASY", 6)  # a list of words, or None
```

### Heapsort

```
labkit-heapsort STRING
```

Makes one heap node for each suffix of `STRING`, with its 1-based starting
position, and prints the heap three times: as first laid out, after it is
made a max-heap, and after sorting. Each time the first line holds the first
letter of each suffix and the second line their positions, so the last two
lines give the suffixes in sorted order.

### Unique letters

```
labkit-unique
```

Prints the distinct letters of `attack`, in order of first appearance, then
those of `good luck` together with a list of integers numbered by position.

### ELIZA

```
labkit-eliza [--script FILE]
```

Reads the rule script `FILE` (default `./script`) and holds a conversation on
standard input and output until a quit word is typed or input ends. If the
script cannot be opened it exits with status 1.

Script lines take the form `prefix: value`; only the text between the first
and second colon counts as the value. The prefixes are:

- `initial`, `final`: the greeting and the farewell.
- `quit`: a word that ends the session.
- `synon`: a word followed by words that stand for it.
- `pre`, `post`: a word followed by its replacement, applied to input before
  matching, and to matched text before it is echoed.
- `key`: a keyword and a priority; starts a new group of rules.
- `decomp`: a pattern in which `*` captures any text, a space is optional
  and `@` is ignored.
- `reasmb`: a reply in which `(n)` is replaced by the n-th captured text, or
  `goto KEY` to use the rules of another keyword.

A rule's precedence is the length of its `decomp` pattern. When no keyword of
the input gives an applicable rule, the rules of the key `xnone` are tried.

### Dragon curve

```
labkit-dragon [ITERATIONS]
```

Traces a twin dragon with `2 * ITERATIONS` rewriting steps (9 iterations when
no argument is given) on an image `2 ** ITERATIONS` pixels high and 1.5 times
as wide, and saves it to `../output/twindragon.pgm`. The grey of each pixel
brightens as the path grows. The file carries a P4 header followed by one
byte per pixel. If the file cannot be written it exits with status 1.

## What is not included

- No word list is shipped: `labkit-doublets` needs a `words.txt` of its own.
- No conversation script is shipped: `labkit-eliza` needs a script file.
- `labkit-dragon` does not create its output directory; `../output` must
  exist.