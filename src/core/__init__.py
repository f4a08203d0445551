"""
Core domain models, mathematical primitives, and contracts.

Building blocks shared by the feed scanner and the price gate; independent
of external systems (RPC nodes, price APIs, wallets).
"""
