import sqlite3
import os
from typing import List, Dict, Optional

class SearchHistoryManager:
    def __init__(self, db_path: str = None, history_limit: Optional[int] = None):
        if db_path is None:
            data_dir = os.path.expanduser("~/.local/share/marketsearch")
            os.makedirs(data_dir, exist_ok=True)
            db_path = os.path.join(data_dir, "history.db")

        self.db_path = db_path
        self.history_limit = history_limit
        self._init_db()

    def _init_db(self):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS search_history (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    term TEXT NOT NULL,
                    source TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            # Migration check: older databases may lack newer columns
            cursor = conn.execute("PRAGMA table_info(search_history)")
            existing_columns = {row[1] for row in cursor.fetchall()}

            required_columns = {
                'term': 'TEXT NOT NULL DEFAULT ""',
                'source': 'TEXT',
                # ALTER TABLE rejects non-constant defaults; add_entry sets created_at itself
                'created_at': 'TIMESTAMP'
            }

            for col, definition in required_columns.items():
                if col not in existing_columns:
                    print(f"DEBUG: Adding missing column {col} to search_history table")
                    conn.execute(f"ALTER TABLE search_history ADD COLUMN {col} {definition}")

            conn.commit()

    def add_entry(self, term: str, source: str = "storefront"):
        term = term.strip() if term else ""
        if not term:
            return

        with sqlite3.connect(self.db_path) as conn:
            # One row per term, case-insensitive; the newest search wins
            conn.execute("DELETE FROM search_history WHERE lower(term) = lower(?)", (term,))
            conn.execute(
                "INSERT INTO search_history (term, source, created_at) VALUES (?, ?, CURRENT_TIMESTAMP)",
                (term, source)
            )
            if self.history_limit:
                conn.execute(
                    "DELETE FROM search_history WHERE id NOT IN "
                    "(SELECT id FROM search_history ORDER BY id DESC LIMIT ?)",
                    (self.history_limit,)
                )
            conn.commit()

    def get_history(self, search_query: str = None) -> List[Dict]:
        # id breaks ties between rows written within the same second
        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            if search_query:
                cursor = conn.execute(
                    "SELECT * FROM search_history WHERE term LIKE ? ORDER BY created_at DESC, id DESC",
                    (f"%{search_query}%",)
                )
            else:
                cursor = conn.execute("SELECT * FROM search_history ORDER BY created_at DESC, id DESC")

            return [dict(row) for row in cursor.fetchall()]

    def get_terms(self) -> List[str]:
        return [row["term"] for row in self.get_history()]

    def delete_entry(self, entry_id: int):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM search_history WHERE id = ?", (entry_id,))
            conn.commit()

    def clear_history(self):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM search_history")
            conn.commit()
