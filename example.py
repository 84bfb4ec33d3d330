#!/usr/bin/env python3
"""
Example usage of the JSON Minifier.

This script demonstrates minifying a pretty-printed document, the
fail-open behaviour on malformed input, and the file eligibility rules.
"""

import json
import logging
from pathlib import Path
from json_minifier import JSONMinifier, JSONTokenizer


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("JSON Minifier Example")
    print("=" * 50)

    sample_data = {
        "users": [
            {"id": 1, "name": "Alice Johnson", "email": "alice@example.com", "score": 1.0},
            {"id": 2, "name": "Bob Smith", "email": "bob@example.com", "score": 2.50},
        ],
        "greeting": "Hello, 世界! 😀",
        "settings": {"theme": "dark", "notifications": True, "quota": None},
    }
    pretty = json.dumps(sample_data, indent=4, ensure_ascii=False)

    minifier = JSONMinifier()

    print(f"\nOriginal ({len(pretty)} chars):")
    print(pretty)

    minified = minifier.minify(pretty, Path("data/sample.json"))
    print(f"\nMinified ({len(minified)} chars):")
    print(minified)
    print(f"Saved {len(pretty) - len(minified)} chars")

    print("\nToken stream:")
    with JSONTokenizer('{"a": [1.0, "x\\n"]}') as tokenizer:
        for token in tokenizer:
            print(f"   {token.type.value:<12} {token.text}")

    print("\nMalformed input is returned unchanged:")
    broken = '{ "a": 1, unclosed: ['
    print(f"   {minifier.minify(broken, Path('data/broken.json'))!r}")

    print("\nEligibility:")
    for name in ["data/users.json", "package.json", "tsconfig.json",
                 "package-lock.json", "dependencies.lock.json"]:
        decision = "minify" if minifier.should_minify(Path(name)) else "skip"
        print(f"   {name:<25} {decision}")


if __name__ == "__main__":
    main()
