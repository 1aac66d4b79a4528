"""
Mortgage amortization and property investment analysis.
"""

__version__ = "0.1.0"
