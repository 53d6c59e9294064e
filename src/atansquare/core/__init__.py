"""
Core domain models, exact arithmetic verifiers, and error taxonomy.

This module contains the foundational building blocks that are independent
of input sources and reporting.
"""
