"""
Domain services.

These services hold the tracker's behaviour while depending only on domain
models and ports so that infrastructure and UI layers can remain thin.
"""

from .internship_list import InternshipList

__all__ = ["InternshipList"]
