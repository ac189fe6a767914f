"""
Editor event logging utilities.

Appends one JSON object per line to the editor event log so a session's
mutations can be inspected after the fact. This is a trace, not persistence:
nothing reads it back into a document.

For detailed within-context logging, use vitae.utils.logger instead.

Usage:
    from vitae.utils.event_logging import log_editor_event

    log_editor_event(
        event_type="update",
        source="router",
        address=[0, 1],
        key="title",
    )
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from vitae.utils.timestamp import now_exact

load_dotenv()


def get_events_file() -> Optional[Path]:
    """Return the configured event log path, or None when event logging is off."""
    events_file = os.getenv("EDITOR_EVENTS_FILE")
    return Path(events_file) if events_file else None


def log_editor_event(event_type: str, source: str, **extra_fields) -> None:
    """
    Log an event to the editor event log.

    Does nothing when EDITOR_EVENTS_FILE is unset.

    Args:
        event_type: Type of event (e.g., "add", "update", "toggle_hidden")
        source: Event source (e.g., "router", "session")
        **extra_fields: Additional event-specific fields (must be JSON serializable)
    """
    events_file = get_events_file()
    if events_file is None:
        return

    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event, default=str) + "\n")


def get_recent_events(n: int = 10, event_type: Optional[str] = None) -> List[Dict]:
    """
    Get the last n events from the editor event log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        event_type: Filter to only events of this type (optional)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = get_events_file()
    if events_file is None or not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
