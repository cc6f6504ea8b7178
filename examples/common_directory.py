"""
Common-directory example.

Abbreviates a handful of paths to their unique prefixes, then derives the
directory they share from the shortest one.
"""

from prefix_abbrev import split_sequence, join_sequence, summarize, common_directory

DIRS = [
    "/home/user1/tmp/coverage/test",
    "/home/user1/tmp/covert/operator",
    "/home/user1/tmp/coven/members",
]

if __name__ == "__main__":
    print("=" * 60)
    print("UNIQUE PREFIXES")
    print("=" * 60)

    result = summarize(split_sequence(d) for d in DIRS)
    for abbrev in result.abbreviations:
        print(f"  {join_sequence(abbrev)}")

    print(f"\nPath components:      {result.original_tokens}")
    print(f"Abbreviated:          {result.abbreviated_tokens}")
    print(f"Savings:              {result.savings_pct}%")

    print("\n" + "-" * 60)
    print(f"Common directory:     {common_directory(DIRS)}")
