#!/usr/bin/env python3
"""Debug the /login landing page: which entry heuristics match on the current A/B variant."""

from tests.helpers.browser import cleanup_browser, create_incognito_context, get_browser_connection
from tests.helpers.config import get_login_url
from tests.helpers.locators import DIRECT_HEURISTICS, GENERIC_HEURISTICS, EntryResolver
from tests.helpers.login_page import LoginPage

login_url = get_login_url()

playwright, browser, session = get_browser_connection()
context = create_incognito_context(browser)

try:
    page = context.new_page()
    login_page = LoginPage(page, login_url=login_url)

    print("\n" + "="*60)
    print("LOGIN LANDING PAGE")
    print("="*60)
    print(f"Navigating to: {login_url}")
    login_page.goto()
    print(f"Current URL: {page.url}")
    print(f"Refund info modal: {login_page.close_expected_refund_info_if_open().value}")

    print("\n" + "="*60)
    print("ENTRY HEURISTICS")
    print("="*60)
    for registry, kind in ((DIRECT_HEURISTICS, "kakao"), (GENERIC_HEURISTICS, "refund")):
        for heuristic in registry:
            count = page.locator(f"{heuristic.selector}:visible").count()
            print(f"  [{kind}] {heuristic.name:16s} {count} visible  ({heuristic.selector})")

    resolver = EntryResolver(page)
    print(f"\nKakao candidates: {resolver.direct_entry_candidates().count()}")
    print(f"Refund candidates: {resolver.generic_entry_candidates().count()}")

    # Show all buttons
    buttons = page.locator("button:visible").all()
    print(f"\nAll visible buttons on page ({len(buttons)}):")
    for i, b in enumerate(buttons[:15]):
        text = b.inner_text(timeout=500).strip().replace("\n", " ")
        box = b.bounding_box()
        area = box["width"] * box["height"] if box else 0
        print(f"  {i+1}. '{text}' (area {area:.0f}px²)")

    page.screenshot(path="/tmp/login_debug.png", full_page=True)
    print("Screenshot: /tmp/login_debug.png")
finally:
    cleanup_browser(playwright, context, session, browser)

print("\n✅ Done! Check screenshot in /tmp/")
