"""
Supabase client initialization.

This module contains *only* the database connection setup. The client is
built on demand from explicit credentials (see config.settings) rather than
at import time, so modules that never touch Supabase can be imported freely.
"""

from __future__ import annotations

# The dependency is `supabase` (supabase-py). If your editor can't resolve it,
# install it in your environment: `pip install supabase`.
from supabase import Client, create_client  # type: ignore[import-not-found]


def create_supabase_client(url: str, key: str) -> Client:
    """Create a Supabase client; use a server-side key only on the backend."""

    if not url:
        raise RuntimeError(
            "Missing Supabase URL. Set SUPABASE_URL to your Supabase project URL."
        )
    if not key:
        raise RuntimeError(
            "Missing Supabase key. Set SUPABASE_KEY to your Supabase API key."
        )
    return create_client(url, key)


__all__ = ["Client", "create_supabase_client"]
