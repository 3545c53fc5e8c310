"""
Business logic for attendance links.

A link's alternate delete key is ``account_id``: deleting by account
removes that account's first link in insertion order.
"""

from ..core.store import Collection
from ..schemas.link import AttendanceLink
from .base import CollectionService


class LinkService(CollectionService[AttendanceLink]):

    collection = Collection.LINKS
    record_type = AttendanceLink
    alternate_key = "account_id"
