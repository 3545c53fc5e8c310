"""
Business logic for accounts.
"""

from ..core.store import Collection
from ..schemas.account import Account
from .base import CollectionService


class AccountService(CollectionService[Account]):
    """Accounts; deletes may match on ``username`` instead of ``id``."""

    collection = Collection.ACCOUNTS
    record_type = Account
    alternate_key = "username"
