from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import List, Optional

from .select import top_k
from .tree import AVLMap
from .wordcount import word_frequencies

logger = logging.getLogger("avlmap")


def count_files(paths: List[str]) -> AVLMap[str, int]:
    if len(paths) == 0:
        stdin = sys.stdin
        if isinstance(stdin, io.TextIOWrapper):
            stdin.reconfigure(encoding="utf-8", errors="replace")
        return word_frequencies(stdin)

    counts: AVLMap[str, int] = AVLMap()
    for path in paths:
        logger.debug("reading %s", path)
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for word, n in word_frequencies(f).to_vector():
                counts[word] = counts.get(word, 0) + n
    return counts


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="avlmap", description="Print the most frequent words in text files."
    )
    parser.add_argument("files", nargs="*", help="input files (default: stdin)")
    parser.add_argument(
        "-n", "--count", type=int, default=10, help="number of words to print"
    )
    parser.add_argument(
        "--dump", action="store_true", help="also print the word tree"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.count < 0:
        parser.error("--count must be non-negative")

    counts = count_files(args.files)

    for word, n in top_k(counts, args.count):
        print("{}\t{}".format(word, n))

    if args.dump:
        print(counts.print().rstrip("\n"))

    return 0


if __name__ == "__main__":
    sys.exit(main())
