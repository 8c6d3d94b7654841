"""
Navigation tools for the KV path filter.

This module contains the path filter engine and the helpers that turn its
decisions into route transitions and directory listings.
"""
