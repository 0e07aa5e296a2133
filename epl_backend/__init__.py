"""
Top-level package for the EPL backend.

All functionality lives in submodules under ``app``: the record
services in ``app.services`` and the HTTP adapter in ``app.api``.
"""

__all__ = []
