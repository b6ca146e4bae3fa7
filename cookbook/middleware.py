from django.utils.deprecation import MiddlewareMixin

OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware(MiddlewareMixin):
    """
    HTML forms can only POST; a hidden `_method` field tunnels PUT/PATCH/DELETE.

    Runs in `process_view` and must sit after CsrfViewMiddleware, so the
    request is CSRF-checked as the POST it really is before being rewritten.
    """

    def process_view(self, request, view_func, view_args, view_kwargs):
        if request.method != "POST":
            return None
        override = (request.POST.get("_method") or "").upper()
        if override in OVERRIDABLE_METHODS:
            request.method = override
        return None
