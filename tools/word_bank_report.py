from __future__ import annotations

import argparse
import logging
from pathlib import Path

from fishertype.engine.candidates import candidate_count, tokenize
from fishertype.paths import get_paths
from fishertype.services.content import ContentService


def report(csv_path: Path | None, warn_over: int) -> int:
    """Print every word with its morae and spelling count. Returns the number of warnings."""
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    bank = content.load_word_bank(csv_path)

    warnings = 0
    for level in bank.levels():
        print(f"Level {level}")
        for entry in bank.entries(level):
            morae = " ".join(t.text for t in tokenize(entry.romanization))
            n = candidate_count(entry.romanization)
            flag = ""
            if n > warn_over:
                flag = "  <-- many spellings"
                warnings += 1
            print(f"  {entry.display_text:<12} {entry.romanization:<16} [{morae}] {n}{flag}")
    if not bank.levels():
        print("No words loaded.")
    return warnings


def main() -> int:
    parser = argparse.ArgumentParser(prog="word_bank_report")
    parser.add_argument("--csv", type=Path, default=None)
    parser.add_argument("--warn-over", type=int, default=500)
    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING)
    report(args.csv, args.warn_over)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
