"""Prefix trie with pruning removal and subtree enumeration."""

from __future__ import annotations

from collections.abc import Iterator


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie for word and prefix checks.

    Childless non-terminal nodes never outlive a ``remove`` call, so the
    tree only ever holds paths that lead to at least one stored word.
    """

    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str) -> bool:
        """Mark ``word`` as stored. False if it was already there."""
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if node.is_terminal:
            return False
        node.is_terminal = True
        return True

    def remove(self, word: str) -> bool:
        """Unmark ``word`` and prune the branch left dead behind it."""
        path: list[tuple[TrieNode, str]] = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child
        if not node.is_terminal:
            return False
        node.is_terminal = False

        # Walk back up, dropping edges to nodes that lead nowhere.
        while path:
            parent, ch = path.pop()
            child = parent.children[ch]
            if child.children or child.is_terminal:
                break
            del parent.children[ch]
        return True

    def is_word(self, word: str) -> bool:
        node = self.walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self.walk(prefix) is not None

    def walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def words_from(self, node: TrieNode, prefix: str = "") -> Iterator[str]:
        """Yield every stored word in the subtree under ``node``, depth-first.

        ``prefix`` is the path that spells ``node`` and is prepended to each
        word.  The node itself is yielded first when it is terminal.
        """
        stack: list[tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            current, built = stack.pop()
            if current.is_terminal:
                yield built
            # Reversed so children come off the stack in insertion order.
            for ch, child in reversed(list(current.children.items())):
                stack.append((child, built + ch))

    def __iter__(self) -> Iterator[str]:
        return self.words_from(self.root)

    def node_count(self) -> int:
        """Number of nodes in the tree, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count
