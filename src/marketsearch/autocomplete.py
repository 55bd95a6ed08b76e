import os
import sys
import json
import threading
from typing import Iterable, List, Optional
from marketsearch.trie import Trie
from marketsearch.ranking import RankingEngine
from marketsearch.config import ConfigManager
from marketsearch.database import SearchHistoryManager

class CatalogSuggester:
    """
    Search-box suggestions over a catalog of names (products, categories, icons).

    Exact prefix matches from the trie come first, followed by names within
    max_distance edits of the typed text. Previously searched names are ranked
    ahead when a history store is attached.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, catalog_file: Optional[str] = None,
                 config: Optional[ConfigManager] = None, history: Optional[SearchHistoryManager] = None):
        self.config = config
        self.max_suggestions = int(self._setting("max_suggestions", 10))
        self.max_distance = int(self._setting("max_distance", 2))

        # Components
        self.trie = Trie()
        self.names: List[str] = []
        self.history = history
        self.ranking = RankingEngine(history_bonus=float(self._setting("history_bonus", 15.0)))
        self._lock = threading.Lock()

        if catalog_file is None:
            catalog_file = self._setting("catalog_file", None)

        if words:
            self.add_words(words)
        if catalog_file:
            self._load_catalog(catalog_file)
        if self.history is not None:
            self.ranking.update_history(self.history.get_terms())

    def _setting(self, key, default):
        if self.config is None:
            return default
        value = self.config.get(key)
        return default if value is None else value

    def _load_catalog(self, path: str):
        if not os.path.exists(path):
            print(f"ERROR: Catalog file not found: {path}", file=sys.stderr)
            return

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.lower().endswith(".json"):
                    data = json.load(f)
                    if not isinstance(data, list):
                        print(f"WARNING: {path} is not a JSON list of names, skipping", file=sys.stderr)
                        return
                    words = [w for w in data if isinstance(w, str)]
                    if len(words) != len(data):
                        print(f"WARNING: Skipped {len(data) - len(words)} non-string entries in {path}", file=sys.stderr)
                else:
                    words = [line.strip() for line in f]
        except (OSError, ValueError) as e:
            print(f"WARNING: Failed to load catalog {path}: {e}", file=sys.stderr)
            return

        self.add_words(words)
        print(f"DEBUG: Loaded {len(self.trie)} catalog names from {path}", file=sys.stderr)

    def add_words(self, words: Iterable[str]):
        with self._lock:
            for word in words:
                if not word or not word.strip():
                    continue
                if word not in self.trie:
                    self.names.append(word)
                else:
                    # Same lowercase key with a new casing replaces the old name
                    self.names = [n for n in self.names if n.lower() != word.lower()]
                    self.names.append(word)
                self.trie.insert(word)

    def __len__(self):
        return len(self.trie)

    def suggest(self, prefix: str) -> List[str]:
        return self.get_suggestions(prefix)

    def get_suggestions(self, prefix: str) -> List[str]:
        with self._lock:
            exact = self.trie.query(prefix)
            fuzzy = self.ranking.fuzzy_matches(self.names, prefix, self.max_distance) if prefix else []

        candidates = self.ranking.rank(self.ranking.merge(exact, fuzzy), prefix)
        return candidates[:self.max_suggestions]

    def record_search(self, term: str, source: str = "storefront"):
        if not term or not term.strip():
            return
        if self.history is not None:
            self.history.add_entry(term, source)
        self.ranking.update_history([term.strip()])
