import argparse
import sys
from pathlib import Path
from marketsearch.autocomplete import CatalogSuggester

def main(argv=None):
    parser = argparse.ArgumentParser(prog="marketsearch", description="Search suggestions over a catalog of names")
    parser.add_argument("catalog", help="text file with one name per line, or a JSON list")
    parser.add_argument("prefixes", nargs="+", metavar="prefix")
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument("--max-distance", type=int, default=2)
    args = parser.parse_args(argv)

    path = Path(args.catalog).absolute()
    if not path.exists():
        print(f"Given {path=} doesn't exist", file=sys.stderr)
        return 1

    suggester = CatalogSuggester(catalog_file=str(path))
    suggester.max_suggestions = args.limit
    suggester.max_distance = args.max_distance

    for prefix in args.prefixes:
        if len(args.prefixes) > 1:
            print(f"PREFIX: {prefix}")
        for word in suggester.suggest(prefix):
            print(word)
    return 0

if __name__ == "__main__":
    sys.exit(main())
