"""
Placeholder API root package.

A JSONPlaceholder-style mock REST API: users and posts with CRUD,
pagination and basic login/register, stored in a local SQLite file that is
seeded with synthetic data on first run.
"""
