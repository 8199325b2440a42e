"""
Check if the pull request title asks to skip reviewer/assignee assignment.

This script compares the PR title with the "skipKeywords" of the
configuration so a workflow can skip the assignment job entirely.

Exit codes:
    0: Assignment should run (no skip keyword in the title)
    1: Assignment should be skipped (title contains a skip keyword)
    2: Error (missing configuration, no title available, ...)

Environment Variables:
    CONFIG_PATH: YAML configuration (default: .github/auto_assign.yml)
    PR_TITLE: Pull request title. If empty, the title is read from the
              GITHUB_EVENT_PATH event payload.
"""

import os
import sys
import traceback
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.chooser import includes_skip_keywords  # noqa: E402
from lib.config_loader import load_config_from_file  # noqa: E402
from lib.utilities import read_pull_request_event  # noqa: E402


def get_pull_request_title() -> str:
    title = os.environ.get("PR_TITLE", "").strip()
    if title:
        return title
    return read_pull_request_event().title


def main() -> None:
    """
    Check the PR title against the configured skip keywords.

    Returns:
        Exit code 0 if assignment should run, 1 if it should be skipped
    """
    try:
        config = load_config_from_file()
        title = get_pull_request_title()
    except Exception:  # noqa: BLE001 # pylint: disable=broad-except
        traceback.print_exc()
        sys.exit(2)

    print(f"📋 Pull request title: '{title}'")
    print(f"🔑 Skip keywords: {config.skip_keywords}")

    if includes_skip_keywords(title, config.skip_keywords):
        print("⏭️  Title includes a skip keyword - assignment is skipped")
        sys.exit(1)
    else:
        print("✅ No skip keyword found - assignment is needed")
        sys.exit(0)


if __name__ == "__main__":
    main()
