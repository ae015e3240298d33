"""User-facing interfaces for ocrsheet."""
