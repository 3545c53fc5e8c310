"""
Service layer abstraction.

Each service encapsulates the queries and mutations of one collection
and works against a ``RecordStore`` handed to it at construction, so
handlers never touch the store directly.
"""
