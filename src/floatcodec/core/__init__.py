"""
Core domain models, exact arithmetic and contracts.

This module contains the foundational building blocks the codec is built on.
"""
