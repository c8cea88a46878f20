"""Print the distinct substrings of a word, shortest first."""

from __future__ import annotations

import argparse

from gradient_slice import Gradient


def main() -> None:
    parser = argparse.ArgumentParser(description="List distinct substrings of WORD in gradient order")
    parser.add_argument("word", help="Word to slice")
    parser.add_argument("--max-width", type=int, help="Longest substring to list")
    args = parser.parse_args()

    seen: set[str] = set()
    for view in Gradient(args.word, max_width=args.max_width):
        text = view.join()
        if text not in seen:
            seen.add(text)
            print(text)
    print(f"{len(seen)} distinct substrings of {args.word!r}")


if __name__ == "__main__":
    main()
