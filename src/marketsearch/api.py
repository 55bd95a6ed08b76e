import threading
from marketsearch.autocomplete import CatalogSuggester
from marketsearch.config import ConfigManager
from marketsearch.database import SearchHistoryManager

_suggester = None
_lock = threading.Lock()

def get_suggester() -> CatalogSuggester:
    global _suggester
    with _lock:
        if _suggester is None:
            config = ConfigManager()
            history = None
            if config.get("history_enabled"):
                history = SearchHistoryManager(config.get("history_db"), config.get("history_limit"))
            _suggester = CatalogSuggester(config=config, history=history)
        return _suggester

def suggest(prefix: str):
    """
    Main API: suggest(prefix: string) -> list<string>
    """
    return get_suggester().suggest(prefix)

def reset():
    global _suggester
    with _lock:
        _suggester = None
