"""Domain Watch Lists - Dirty tracking for aggregate children."""

from .watch_list import WatchList
from .transactions_watch_list import TransactionsWatchList

__all__ = ["WatchList", "TransactionsWatchList"]
