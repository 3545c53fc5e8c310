"""
Top-level package for the Event Registry API.

The package provides no public exports; all functionality lives in
submodules under ``app``, e.g. ``event_registry_api.app.main``.
"""

__all__ = []
