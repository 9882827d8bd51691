#!/usr/bin/env python3
"""Exercise the search, indexing and rendering tools without touching disk."""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from errdigest.tools import RegexMatcher, assign_indices, render_report, search_errors


def check_search():
    print("Checking search_errors...")
    sample = """package main

func run() error {
	if err := dial(); err != nil {
		return fmt.Errorf("error: dial failed | retrying")
	}
	log.Println("ERROR: unreachable")
	return nil
}"""

    default_hits = search_errors(sample, "main.go")
    regex_hits = search_errors(sample, "main.go", RegexMatcher([r"fmt\.Errorf"]))
    print(f"  Default rule: {len(default_hits)} lines")
    print(f"  Regex rule:   {len(regex_hits)} lines")
    print("  ✓ search_errors working")
    return [default_hits, regex_hits]


def check_render(batches):
    print("\nChecking assign_indices + render_report...")
    records = assign_indices(batches)
    print(f"  Indexed {len(records)} records (last index {records[-1].index if records else 0})")
    print(render_report(records))
    print("  ✓ rendering working (pipes escaped)")


if __name__ == "__main__":
    print("Running tools checks...\n")

    try:
        batches = check_search()
        check_render(batches)

        print("\n✅ All tool checks passed!")
    except Exception as e:
        print(f"\n❌ Check failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
