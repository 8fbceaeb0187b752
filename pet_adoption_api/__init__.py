"""
Top-level package for the Pet Adoption API.

This file makes ``pet_adoption_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``pet_adoption_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
