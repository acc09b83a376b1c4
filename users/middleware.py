from django.http import HttpResponseBadRequest

from .exceptions import AccountError


class AccountErrorMiddleware:
    """Turn account errors raised by views into 400 responses.

    The response body is the error message as plain text.  Other
    exceptions are left to Django's default handling.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, AccountError):
            return HttpResponseBadRequest(
                str(exception), content_type="text/plain; charset=utf-8"
            )
        return None
