"""
Core cost parsing engine, domain models, and contracts.

This module contains the building blocks that are independent
of external systems (data stores, currency rendering, translations).
"""
