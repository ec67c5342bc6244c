"""In-memory string dictionary backed by a prefix tree."""

import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from sortedcontainers import SortedDict

from edit_distance import levenshtein_distance

log = logging.getLogger("trie_dictionary")

MAX_EDIT_DISTANCE = 2


class EmptyQueryError(ValueError):
    """Raised when a spelling lookup is asked for an empty word."""


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        label (str):
            The character on the edge leading into this node. The root
            carries a blank sentinel.
        children (SortedDict[str, TrieNode]):
            Mapping from a character to the next TrieNode, kept in
            ascending character order.
        is_end (bool):
            True if this node marks the end of a valid word.
    """
    __slots__ = ("label", "children", "is_end")

    def __init__(self, label: str = " "):
        self.label = label
        self.children = SortedDict()
        self.is_end = False

    def has_child(self, ch: str) -> bool:
        """
        Check whether this node has an edge labeled ``ch``.

        Args:
            ch (str): The character to look up.

        Returns:
            bool: True if a child exists for ``ch``.
        """
        return ch in self.children

    def __repr__(self) -> str:
        return f"TrieNode({self.label!r}, children={len(self.children)}, is_end={self.is_end})"


class Trie:
    """
    A trie (prefix tree) dictionary supporting insertion, search,
    deletion with pruning, prefix-based autocompletion and
    edit-distance spelling suggestions.

    Child nodes are always visited in ascending character order, so every
    list of words returned by this class has a reproducible order:
    depth-first, a word before its extensions.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        """
        Initialize a trie, optionally filling it with ``words``.

        Args:
            words (Iterable[str] | None): Words to insert up front.
        """
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            for word in words:
                self.insert(word)

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> bool:
        """
        Insert a word into the trie.

        Args:
            word (str): The word to insert.

        Returns:
            bool: True if the word was added,
                  False if it was already present.
        """
        node = self.root
        for ch in word:
            if not node.has_child(ch):
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]

        if node.is_end:
            log.debug("insert: %r already present", word)
            return False

        node.is_end = True
        self._size += 1
        return True

    def search(self, word: str) -> bool:
        """
        Determine whether a word exists in the trie.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the word exists, False otherwise.
        """
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any word in the trie begins with the given prefix.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
        """
        node = self._walk(prefix)
        return node is not None and (node.is_end or len(node.children) > 0)

    def delete(self, word: str) -> bool:
        """
        Delete a word from the trie, pruning every node that is left
        without children and without a word ending at it.

        Args:
            word (str): The word to delete.

        Returns:
            bool: True if the word was deleted,
                  False if the word was not present.
        """
        # (parent, ch) for every edge on the way down
        path: List[Tuple[TrieNode, str]] = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                log.debug("delete: %r not present", word)
                return False
            path.append((node, ch))
            node = child

        if not node.is_end:
            log.debug("delete: %r not present", word)
            return False

        node.is_end = False
        self._size -= 1

        # the root is never on the popped side, so it is never pruned
        while path and not node.is_end and len(node.children) == 0:
            parent, ch = path.pop()
            del parent.children[ch]
            node = parent

        return True

    # -------------------------------------------------------------
    # Enumeration
    # -------------------------------------------------------------

    def auto_suggest(self, prefix: str) -> List[str]:
        """
        Retrieve all words in the trie that share a given prefix.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[str]: All words that begin with the prefix, in
            depth-first ascending order. Empty if no word matches.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._words_from(node, prefix))

    def get_all_words(self) -> List[str]:
        """Return every stored word, in depth-first ascending order."""
        return list(self._words_from(self.root, ""))

    def get_spelling_suggestions(self, word: str, max_distance: int = MAX_EDIT_DISTANCE) -> List[str]:
        """
        Suggest stored words that are close to ``word``.

        Only words sharing the first character of ``word`` are considered,
        so a typo in the leading character is never corrected.

        Args:
            word (str): The (possibly misspelled) query word.
            max_distance (int): Largest Levenshtein distance accepted.

        Returns:
            list[str]: Matching words in depth-first ascending order.

        Raises:
            EmptyQueryError: If ``word`` is empty.
            ValueError: If ``max_distance`` is negative.
        """
        if not word:
            raise EmptyQueryError("spelling suggestions need a non-empty word")
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")

        first = word[0]
        branch = self.root.children.get(first)
        if branch is None:
            log.debug("spelling: no words start with %r", first)
            return []

        return [
            candidate
            for candidate in self._words_from(branch, first)
            if levenshtein_distance(word, candidate) <= max_distance
        ]

    # -------------------------------------------------------------
    # Debug output
    # -------------------------------------------------------------

    def render(self) -> str:
        """
        Draw the trie structure as a tree of box-drawing connectors.

        Returns:
            str: One line per node, starting with ``root``.
        """
        lines = ["root"]

        # (node, indent, is_last_child); children pushed in reverse so
        # the smallest character is drawn first
        stack: List[Tuple[TrieNode, str, bool]] = []
        last = len(self.root.children) - 1
        for i, child in reversed(list(enumerate(self.root.children.values()))):
            stack.append((child, "", i == last))

        while stack:
            node, indent, is_last = stack.pop()
            if is_last:
                lines.append(f"{indent}└─{node.label}")
                child_indent = indent + "  "
            else:
                lines.append(f"{indent}├─{node.label}")
                child_indent = indent + "│ "

            last = len(node.children) - 1
            for i, child in reversed(list(enumerate(node.children.values()))):
                stack.append((child, child_indent, i == last))

        return "\n".join(lines)

    def print_structure(self, file: Optional[TextIO] = None) -> None:
        """
        Print the output of ``render``.

        Args:
            file (TextIO | None): Stream to write to. Defaults to stdout.

        Returns:
            None
        """
        print(self.render(), file=file or sys.stdout)

    # -------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _words_from(self, node: TrieNode, prefix: str) -> Iterator[str]:
        """
        Yield every word in the subtree under ``node``, depth-first, a
        word before its extensions, children in ascending order.

        Args:
            node (TrieNode): Subtree root, reached by spelling ``prefix``.
            prefix (str): Characters on the path from the trie root to ``node``.

        Yields:
            str: Next word in the subtree.
        """
        stack: List[Tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_end:
                yield path
            for ch, child in reversed(node.children.items()):
                stack.append((child, path + ch))

    def __iter__(self) -> Iterator[str]:
        """
        Iterate over all words stored in the trie.

        Yields:
            str: Next word in the trie.
        """
        return self._words_from(self.root, "")

    def __contains__(self, word: str) -> bool:
        return self.search(word)

    def __len__(self) -> int:
        return self._size
