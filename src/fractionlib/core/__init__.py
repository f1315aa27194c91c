"""
Core domain models, integer primitives, and text grammar.

This module contains the foundational building blocks: canonical-form
arithmetic on bounded integers and the two value types built on it.
"""
