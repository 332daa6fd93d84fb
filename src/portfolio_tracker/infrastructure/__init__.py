"""Infrastructure adapters: logging, settings, database and repositories."""
