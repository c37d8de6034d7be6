#!/usr/bin/env python3
"""Run the excessive cancelling check over a trade dataset.

Usage:
    python scripts/run_checker.py [path/to/Trades.data]

Without a path the dataset configured in config/settings.yaml is used.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cancelling_app.checker import ExcessiveCancellingChecker
from cancelling_app.errors import ConfigurationError
from cancelling_app.logging import configure_logging


def main() -> int:
    """Main entry point."""
    configure_logging(level="WARNING")

    overrides = {}
    if len(sys.argv) > 1:
        overrides = {"data_source": {"path": str(Path(sys.argv[1]).resolve())}}

    try:
        checker = ExcessiveCancellingChecker.from_config(overrides=overrides)
    except ConfigurationError as e:
        print(f"❌ {e}:")
        for error in e.errors:
            print(f"  • {error}")
        return 1

    flagged = checker.list_flagged_companies()
    print(f"🚩 Companies involved in excessive cancelling ({len(flagged)}):")
    for company in flagged:
        print(f"  • {company}")
    print(f"✅ Well-behaved companies: {checker.count_well_behaved_companies()}")

    stats = checker.load_stats
    if stats.get("failed_parses"):
        print(f"⚠️  Skipped {stats['failed_parses']} malformed line(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
