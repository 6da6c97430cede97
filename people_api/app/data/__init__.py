"""Static seed data for the in-memory store."""
