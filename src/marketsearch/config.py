import json
from pathlib import Path

class ConfigManager:
    def __init__(self, config_dir=None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "marketsearch"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "settings.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        # Default settings
        self.defaults = {
            "max_suggestions": 10,
            "max_distance": 2,
            "catalog_file": None,
            "history_enabled": True,
            "history_db": None,
            "history_limit": 1000,
            "history_bonus": 15.0
        }
        self.settings = self.defaults.copy()
        self.load()

    def load(self):
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        self.settings.update(data)
                    else:
                        print(f"DEBUG: Ignoring config {self.config_file}: expected an object")
            except (OSError, ValueError) as e:
                print(f"DEBUG: Failed to load config: {e}")

    def save(self):
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=4)
        except OSError as e:
            print(f"DEBUG: Failed to save config: {e}")

    def get(self, key):
        return self.settings.get(key, self.defaults.get(key))

    def set(self, key, value):
        self.settings[key] = value
        self.save()
