"""
HTTP method override for HTML forms.

Browsers can only submit GET/POST. A POST carrying either

    ?_method=PUT            (query string)
    X-HTTP-Method-Override  (header)

is rewritten to that method before routing, so the edit form can hit
PUT /posts/<id> and the delete button DELETE /posts/<id>.
Only POST requests are rewritten.
"""

from __future__ import annotations

from urllib.parse import parse_qs

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    def __init__(self, app, input_name: str = "_method"):
        self.app = app
        self.input_name = input_name

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = environ.get("HTTP_X_HTTP_METHOD_OVERRIDE", "")
            if not method:
                query = parse_qs(environ.get("QUERY_STRING", ""))
                method = (query.get(self.input_name) or [""])[0]

            method = method.upper()
            if method in OVERRIDABLE_METHODS:
                environ["REQUEST_METHOD"] = method

        return self.app(environ, start_response)
