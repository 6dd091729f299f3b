"""Check Zoom API credentials and connectivity."""

import logging
import sys

from zoom_meetings import Config, ZoomClient
from zoom_meetings.cache import InMemoryCache
from zoom_meetings.exceptions import ZoomApiError

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main() -> int:
    print("=" * 60)
    print("Zoom API Connection Test")
    print("=" * 60)
    print()

    missing = Config.validate()
    if missing:
        print("✗ Zoom credentials not configured")
        print()
        print("Please add the following to your .env file:")
        for name in missing:
            print(f"  {name}=...")
        return 1

    try:
        zoom = ZoomClient.from_config(Config, cache=InMemoryCache())

        if not zoom.test_connection():
            print()
            print("✗ Connection failed")
            print()
            print("Please check:")
            print("  1. Credentials are correct in .env")
            print("  2. Zoom Server-to-Server OAuth app is activated")
            print("  3. Scopes user:read:admin, recording:read:admin, meeting:read:admin are granted")
            return 1

        print("Fetching upcoming meetings...")
        meetings = zoom.get_upcoming_meetings(skip_cache=True)
        print(f"✓ Found {len(meetings)} upcoming meetings")

        for meeting in meetings[:5]:  # Show first 5
            topic = meeting.get("topic", "Unknown")
            start_time = meeting.get("start_time", "")
            print(f"  - {topic} ({start_time})")

        if len(meetings) > 5:
            print(f"  ... and {len(meetings) - 5} more")

    except ZoomApiError as e:
        print(f"✗ Error ({e.code}): {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
