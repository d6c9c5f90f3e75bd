from typing import Iterable, Iterator, Self


class Trie:
    """Prefix tree over an arbitrary alphabet.

    Words are stored exactly as given; there is no case folding.
    """

    _children: dict[str, Self]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = {}

    def starts_word(self, ch: str):
        return ch in self._children

    def descend(self, ch: str) -> Self | None:
        return self._children.get(ch)

    def is_word(self):
        return self._is_word

    def children(self):
        return self._children.items()

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        """Insert word below this node and return the node that ends it."""
        node = self
        for ch in word:
            child = node._children.get(ch)
            if child is None:
                child = node._children[ch] = Trie()
            node = child
        node.set_is_word()
        return node

    def nodes(self) -> Iterator[Self]:
        """Every node in this subtree, this one first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node._children.values())

    def size(self):
        return sum(1 for node in self.nodes() if node.is_word())

    def num_nodes(self):
        return sum(1 for _ in self.nodes())

    def find_prefix(self, prefix: str) -> Self | None:
        node = self
        for ch in prefix:
            node = node.descend(ch)
            if node is None:
                return None
        return node

    def find_word(self, word: str) -> Self | None:
        node = self.find_prefix(word)
        if node is None or not node.is_word():
            return None
        return node

    def all_words(self) -> list[str]:
        """Stored words in sorted order, each word before its extensions."""
        out = []
        stack = [("", self)]
        while stack:
            prefix, node = stack.pop()
            if node.is_word():
                out.append(prefix)
            for ch, child in sorted(node._children.items(), reverse=True):
                stack.append((prefix + ch, child))
        return out

    @staticmethod
    def reverse_lookup(root: Self, node: Self):
        return reverse_lookup(root, node)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie


def reverse_lookup(root: Trie, node: Trie) -> str | None:
    stack = [("", root)]
    while stack:
        prefix, t = stack.pop()
        if t is node:
            return prefix
        for ch, child in t.children():
            stack.append((prefix + ch, child))
    return None


def make_trie(dict_input: str) -> Trie:
    """Load a dictionary file with one word per line."""
    t = Trie()
    with open(dict_input) as f:
        for line in f:
            word = line.strip()
            if word:
                t.add_word(word)
    return t
