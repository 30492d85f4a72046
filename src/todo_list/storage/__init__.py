"""
Durable storage.

Components:
- kv_store.py: SQLite-backed opaque string key-value store
"""
