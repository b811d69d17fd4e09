"""
Core utilities shared across the Netflex backend.

This package hosts:
- configuration helpers (env vars, storage paths, latency scale)
- cross-cutting helpers such as logging setup, password hashing and the
  simulated network latency used by every service call.

Services depend on these primitives instead of reading os.environ directly.
"""
