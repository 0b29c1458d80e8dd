#!/usr/bin/env python3
"""Collect pytest results and failure screenshots into run/meta.json for the Slack step.

Usage (after `pytest ... | tee pytest-summary.log`):
    python collect_results.py [ROOT]
"""
import logging
import sys
from pathlib import Path

from tests.helpers.reporting import collect_results, load_screenshot_map
from tests.helpers.utils import print_section_header, print_summary_list

logging.basicConfig(level=logging.INFO, format="%(message)s")
log = logging.getLogger("collect_results")


if __name__ == "__main__":
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")

    print_section_header("COLLECT TEST RESULTS")
    meta = collect_results(root)

    log.info(f"  Status: {meta['status']}")
    log.info(f"  Total: {meta['total']}  Passed: {meta['passed']}  Failed: {meta['failed']}  Flaky: {meta['flaky']}")
    log.info(f"  Failure screenshots: {meta['failedScreenshotCount']}")

    screenshots = load_screenshot_map(root, meta) if meta["screenshotMapPath"] else []
    print_summary_list(
        [{"name": s["testName"], "file": s["fileName"]} for s in screenshots],
        title="Failed tests",
        verbose=bool(screenshots),
    )
