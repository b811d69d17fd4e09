"""Netflex mock backend (catalog persistence, session and helpers)."""
