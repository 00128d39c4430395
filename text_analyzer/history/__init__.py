"""Recent-history package.

Provides `HistoryStore`, a bounded most-recent-first list of analyses kept
in a JSON file, and `calculate_statistics` for dashboard-style aggregates.
"""

from .store import HistoryStore, make_entry
from .stats import calculate_statistics
