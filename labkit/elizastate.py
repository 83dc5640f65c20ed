"""The state of a conversation engine: greetings, word tables and rules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Rule:
    """A keyword, a decomposition pattern, a reassembly template and its precedence."""

    key: str
    decomp: str
    reasmb: str
    precedence: int = 0


@dataclass
class ElizaState:
    """Everything a script configures.

    Word tables keep the first value given for a key; later ones are ignored.
    Rules are kept most recently added first.
    """

    begin: str = "<no greeting set>"
    end: str = "<no final statement set>"
    quit_words: set[str] = field(default_factory=set)
    prereplace: dict[str, str] = field(default_factory=dict)
    postreplace: dict[str, str] = field(default_factory=dict)
    synonyms: dict[str, str] = field(default_factory=dict)
    rules: list[Rule] = field(default_factory=list)

    def add_quit_word(self, word: str) -> bool:
        """Record a word that ends the session; False if it was already known."""
        if word in self.quit_words:
            return False
        self.quit_words.add(word)
        return True

    @staticmethod
    def _add_first(table: dict[str, str], key: str, value: str) -> bool:
        if key in table:
            return False
        table[key] = value
        return True

    def add_synonym(self, word: str, target: str) -> bool:
        """Map word to target unless word already has a mapping."""
        return self._add_first(self.synonyms, word, target)

    def add_prereplace(self, word: str, replacement: str) -> bool:
        """Add a substitution applied to input before matching."""
        return self._add_first(self.prereplace, word, replacement)

    def add_postreplace(self, word: str, replacement: str) -> bool:
        """Add a substitution applied to matched text before it is echoed."""
        return self._add_first(self.postreplace, word, replacement)

    def add_rule(self, rule: Rule) -> None:
        """Add a rule in front of those already known."""
        self.rules.insert(0, rule)