from typing import Dict, List, Optional

class TrieNode:
    __slots__ = ('children', 'is_end', 'original')

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.is_end: bool = False
        self.original: Optional[str] = None

class Trie:
    """
    Case-insensitive prefix index over catalog names.
    Keys are lowercased; the exact inserted string is kept at the terminus node
    so suggestions come back with their display casing.
    Not thread-safe: the owner serialises insert/query.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str):
        """
        Insert a word into the trie.
        A later insert whose lowercase form matches an earlier one replaces the
        stored original (last write wins).
        """
        node = self.root
        for char in word.lower():
            if char not in node.children:
                node.children[char] = TrieNode()
            node = node.children[char]

        if not node.is_end:
            node.is_end = True
            self._size += 1
        node.original = word

    def query(self, prefix: str) -> List[str]:
        """
        Returns the original strings of all indexed words starting with prefix.
        Order is pre-order by child insertion order.
        """
        node = self._find(prefix)
        if node is None:
            return []

        results: List[str] = []
        self._collect(node, results)
        return results

    def _find(self, prefix: str) -> Optional[TrieNode]:
        node = self.root
        for char in prefix.lower():
            if char not in node.children:
                return None
            node = node.children[char]
        return node

    def _collect(self, node: TrieNode, results: List[str]):
        # Explicit stack; depth is bounded by word length, not the recursion limit
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_end:
                results.append(current.original)
            stack.extend(reversed(list(current.children.values())))

    def __contains__(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.is_end

    def __len__(self) -> int:
        return self._size
