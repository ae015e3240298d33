"""Infrastructure adapters: file persistence and observability."""
