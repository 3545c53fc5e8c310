"""
Pydantic schema definitions for records and API payloads.

Each collection (accounts, events, locations, links) defines a record
type, a create input and a separate patch type whose fields are all
optional.  The record types are what the store holds; the inputs are
what callers send.
"""
