"""Ledger storage layer.

This package encodes measurement records as ledger assets and provides
a file-backed ledger with world state, history, and job dispatch.
"""
