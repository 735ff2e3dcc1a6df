"""
calc-spine REST API.

Thin FastAPI transport over the expression engine. Build the application with
:func:`create_app`; run it with ``calc-spine serve``.
"""

from calc_spine.api.app import create_app

__all__ = ["create_app"]
