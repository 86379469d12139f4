# Standard library imports
from html import escape
from typing import List, NamedTuple

# External package imports
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse


router = APIRouter(tags=["documentation"])


class EndpointDoc(NamedTuple):
    method: str
    path: str
    summary: str
    example_body: str = ""


ENDPOINT_GROUPS = (
    ("Authentication", [
        EndpointDoc("POST", "/login", "Check credentials; returns the user without its password",
                    '{"email": "user@example.com", "password": "password"}'),
        EndpointDoc("POST", "/register", "Create an account (name, username, email, password required)",
                    '{"name": "Jane Doe", "username": "jane", "email": "jane@example.com", "password": "secret"}'),
    ]),
    ("Posts", [
        EndpointDoc("GET", "/posts?page=1&limit=10", "List posts with their authors embedded"),
        EndpointDoc("POST", "/posts", "Create a post (title up to 50, body up to 300 characters)",
                    '{"title": "Hello", "body": "First post", "userId": 1}'),
        EndpointDoc("GET", "/posts/:id", "Get one post"),
        EndpointDoc("PUT", "/posts/:id", "Update any of title, body, userId", '{"title": "Edited"}'),
        EndpointDoc("DELETE", "/posts/:id", "Delete a post"),
    ]),
    ("Users", [
        EndpointDoc("GET", "/users?page=1&limit=10", "List users"),
        EndpointDoc("POST", "/users", "Create a user (same rules as /register)"),
        EndpointDoc("GET", "/users/:id", "Get one user"),
        EndpointDoc("PUT", "/users/:id", "Update any of name, username, email, address, phone, website, company",
                    '{"phone": "555-0100"}'),
        EndpointDoc("DELETE", "/users/:id", "Delete a user and all of its posts"),
    ]),
)

PAGE_STYLE = """
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; line-height: 1.6;
       color: #333; background: #f4f5fb; margin: 0; }
.container { max-width: 960px; margin: 0 auto; padding: 20px; }
h1 { color: #4c51bf; }
.card { background: white; border-radius: 10px; padding: 20px 30px; margin-bottom: 24px;
        box-shadow: 0 4px 12px rgba(0,0,0,0.08); }
.endpoint { border-top: 1px solid #e2e8f0; padding: 12px 0; }
.method { display: inline-block; min-width: 64px; padding: 2px 10px; border-radius: 4px;
          color: white; font-weight: bold; text-align: center; }
.get { background: #38a169; } .post { background: #3182ce; }
.put { background: #d69e2e; } .delete { background: #e53e3e; }
code, pre { background: #edf2f7; padding: 2px 6px; border-radius: 4px; }
"""


def render_docs_page(base_url: str) -> str:
    """Render the HTML documentation page for the API served at `base_url`"""
    sections: List[str] = []
    for title, endpoints in ENDPOINT_GROUPS:
        items = []
        for endpoint in endpoints:
            body = f"<pre>{escape(endpoint.example_body)}</pre>" if endpoint.example_body else ""
            items.append(
                f'<div class="endpoint"><span class="method {endpoint.method.lower()}">{endpoint.method}</span> '
                f"<code>{escape(endpoint.path)}</code><p>{escape(endpoint.summary)}</p>{body}</div>"
            )
        sections.append(f'<div class="card"><h2>{escape(title)}</h2>{"".join(items)}</div>')
    
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Placeholder API Documentation</title>
<style>{PAGE_STYLE}</style>
</head>
<body>
<div class="container">
<h1>Placeholder API</h1>
<div class="card">
<p>A mock REST API for testing and prototyping, served at <code>{escape(base_url)}</code>.
All request and response bodies are JSON. Errors come back as <code>{{"error": "message"}}</code>.
Seed users share the password <code>password</code>.</p>
</div>
{"".join(sections)}
</div>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def docs_page(request: Request) -> HTMLResponse:
    """Human-readable API documentation"""
    return HTMLResponse(render_docs_page(str(request.base_url).rstrip("/")))


@router.api_route(
    "/{unmatched_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def route_not_found(unmatched_path: str) -> None:
    """Catch-all for any path/verb no other route handles; must be registered last"""
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Route not found"
    )
