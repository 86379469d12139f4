"""Infrastructure layer: SQLite storage and seed data."""
