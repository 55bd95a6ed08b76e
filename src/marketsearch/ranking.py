from typing import Iterable, List, Optional, Set
from rapidfuzz import distance

class RankingEngine:
    def __init__(self, history_terms: Optional[Iterable[str]] = None, history_bonus: float = 15.0):
        self.history_bonus = history_bonus
        self.history: Set[str] = set()
        if history_terms:
            self.update_history(history_terms)

    def update_history(self, terms: Iterable[str]):
        for term in terms:
            if term:
                self.history.add(term.lower())

    def is_history(self, word: str) -> bool:
        return word.lower() in self.history

    def fuzzy_matches(self, words: Iterable[str], query: str, max_distance: int = 2) -> List[str]:
        """
        Words whose case-insensitive edit distance to the whole query is at most
        max_distance, in input order.
        """
        query_lower = query.lower()
        matches = []
        for word in words:
            # score_cutoff makes rapidfuzz return max_distance + 1 past the limit
            d = distance.Levenshtein.distance(word.lower(), query_lower, score_cutoff=max_distance)
            if d <= max_distance:
                matches.append(word)
        return matches

    def score(self, word: str, prefix: str, is_history: bool = False) -> float:
        # score = (matched prefix length * 10) + history bonus

        # 1. Prefix boost, only when the word really starts with the prefix
        score = 0.0
        if word.lower().startswith(prefix.lower()):
            score += len(prefix) * 10.0

        # 2. User history bonus
        if is_history:
            score += self.history_bonus

        return score

    def rank(self, words: List[str], prefix: str) -> List[str]:
        """Stable sort by score, best first."""
        return sorted(words, key=lambda w: self.score(w, prefix, is_history=self.is_history(w)), reverse=True)

    @staticmethod
    def merge(exact: Iterable[str], fuzzy: Iterable[str], limit: Optional[int] = None) -> List[str]:
        seen: Set[str] = set()
        merged: List[str] = []
        for word in list(exact) + list(fuzzy):
            if word not in seen:
                seen.add(word)
                merged.append(word)
        if limit is not None:
            return merged[:limit]
        return merged
