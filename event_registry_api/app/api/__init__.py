"""
API package containing versioned routes.

A version subpackage such as ``v1`` exposes a top-level ``router``
which includes one router per collection.
"""
