"""WSGI middleware for HTML forms, which can only send GET and POST."""
from urllib.parse import parse_qs

OVERRIDABLE_METHODS = {'PUT', 'PATCH', 'DELETE'}


class MethodOverrideMiddleware:
    """
    Let a POST stand in for another method.

    The method is taken from the ``X-HTTP-Method-Override`` header or the
    ``_method`` query parameter, e.g. ``<form method="post"
    action="/repo/abc/file/def?_method=DELETE">``. The request body is never
    read here.
    """

    def __init__(self, app, param='_method'):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE')
            if not method:
                query = parse_qs(environ.get('QUERY_STRING', ''))
                method = query.get(self.param, [''])[0]
            method = method.upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
