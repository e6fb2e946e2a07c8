"""BFHL API - single-key arithmetic and one-word AI answers over HTTP."""
