"""Watch list of transactions."""

from domain.entities.transaction import TransactionEntity
from .watch_list import WatchList


class TransactionsWatchList(WatchList[TransactionEntity]):
    """Tracks transactions added, updated or removed since load."""
