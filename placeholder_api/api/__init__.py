"""
API layer for the Placeholder API.

Exposes the JSON endpoints (login/register, posts, users), the HTML
documentation page at /, and the error handlers that give every failure an
{"error": message} body.
"""
