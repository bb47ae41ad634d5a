"""Domain models and errors.

Why:
- Plain, strict data structures (Pydantic v2) live here.
- The domain knows nothing about files, stdin or the CLI.
"""
