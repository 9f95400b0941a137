from io import BytesIO

from werkzeug.wrappers import Request


class MethodOverrideMiddleware:
    """
    WSGI middleware letting HTML forms reach PUT/PATCH/DELETE routes.

    A POST carrying ``_method=<VERB>`` in its query string, or in a
    url-encoded form body, is dispatched as ``<VERB>``. The body is put
    back on ``wsgi.input`` so the view can still read the form.
    """

    allowed_methods = frozenset(["PUT", "PATCH", "DELETE"])

    def __init__(self, app, field="_method"):
        self.app = app
        self.field = field

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = self._override_from(environ)
            if method in self.allowed_methods:
                environ["werkzeug.method_override.original"] = "POST"
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)

    def _override_from(self, environ):
        request = Request(environ)
        method = request.args.get(self.field)
        if method is None and request.mimetype == "application/x-www-form-urlencoded":
            body = request.get_data(cache=False)
            environ["wsgi.input"] = BytesIO(body)
            method = Request(environ).form.get(self.field)
            environ["wsgi.input"] = BytesIO(body)
        return (method or "").strip().upper()
