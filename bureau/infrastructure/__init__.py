"""Infrastructure adapters: database, mail."""
