import sys
import os
import time

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "src")))

from marketsearch.autocomplete import CatalogSuggester

ADJECTIVES = ["wireless", "gaming", "portable", "smart", "classic", "compact", "premium", "organic"]
NOUNS = ["mouse", "keyboard", "speaker", "lamp", "chair", "desk", "kettle", "backpack", "charger", "blender"]

def build_catalog():
    names = []
    for adj in ADJECTIVES:
        for noun in NOUNS:
            for model in range(50):
                names.append(f"{adj.title()} {noun.title()} {model}")
    return names

def benchmark():
    names = build_catalog()
    print(f"Indexing {len(names)} catalog names...")
    start_time = time.time()
    suggester = CatalogSuggester(words=names)
    print(f"Initialization took {time.time() - start_time:.4f}s")

    test_prefixes = ["w", "gam", "smart k", "Premium Blender 4", "keybaord"]

    for prefix in test_prefixes:
        print(f"\nSuggestions for '{prefix}':")
        start_query = time.time()
        results = suggester.suggest(prefix)
        query_time = (time.time() - start_query) * 1000

        for i, res in enumerate(results):
            print(f"{i+1}. {res}")

        print(f"Query latency: {query_time:.2f}ms")

        if query_time > 10:
            print("WARNING: Latency exceeded 10ms!")
        else:
            print("Latency OK (< 10ms)")

if __name__ == "__main__":
    benchmark()
