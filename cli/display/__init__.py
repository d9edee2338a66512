"""
CLI display modules.
"""

from cli.display.tables import (
    display_header_info,
    display_tracks_table,
    display_events,
)

__all__ = [
    "display_header_info",
    "display_tracks_table",
    "display_events",
]
