#!/usr/bin/env python3
"""Post the run summary from run/meta.json to Slack.

Environment:
    SLACK_WEBHOOK_URL: Incoming Webhook URL (skips when unset)
    CI_STATUS, BRANCH_NAME, COMMIT_SHA, REPOSITORY, RUN_ID,
    PLAYWRIGHT_REPORT_PAGES_URL: fallbacks for fields missing from meta.json

Exits 0 even when posting fails; the notification never fails the CI job.
"""
import logging
import sys
from pathlib import Path

from tests.helpers.reporting import notify_slack
from tests.helpers.utils import print_section_header

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger("notify_slack")


if __name__ == "__main__":
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")

    print_section_header("SLACK NOTIFICATION")
    if notify_slack(root):
        log.info("✅ Done")
    else:
        log.info("Slack notification not sent")
