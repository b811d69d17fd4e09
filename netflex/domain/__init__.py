"""Domain types (catalog entries, sessions, response envelope) and pure catalog helpers."""
