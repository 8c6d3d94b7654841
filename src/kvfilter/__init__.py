"""
KV Path Filter - Core Package

Navigation logic behind the filter box of a hierarchical key listing: turns
what the user types into the directory to show and the filter to apply there.
"""

__version__ = "0.1.0"
__author__ = "KV Path Filter Team"
