"""Teaching programs: a backpropagation network, word ladders, suffix heapsort, an ELIZA chatbot and a dragon-curve renderer."""

__version__ = "0.1.0"