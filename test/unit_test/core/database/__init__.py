"""Unit tests for the FunShop database layer.

Covers the entities, the repositories and the engine helpers in
funshop/core/database. Every test runs against in-memory SQLite.
"""
