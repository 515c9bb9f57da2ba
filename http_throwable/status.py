import traceback
from .throwable import HTTPThrowable
from .exceptions import ConstructionError
from .env import ThrowableEnv
from .method import allow_value


def _str_field(field, value, required=True):
    if value is None:
        if required:
            raise ConstructionError(field)
        return None
    if not isinstance(value, str):
        raise ConstructionError(field, "must be str type")
    return value


class _StatusThrowable(HTTPThrowable):
    """
    Throwable whose status code and reason are fixed by the class.
    """
    def __init__(self, message=None):
        super().__init__(self._status, self._reason, message)


# 3xx Redirection
class _RedirectThrowable(_StatusThrowable):
    _location_required = True

    def __init__(self, message=None, *, location=None):
        self._location = _str_field(
            "location", location, self._location_required
        )
        super().__init__(message)

    @property
    def location(self):
        return self._location

    def additional_headers(self):
        headers = super().additional_headers()
        if self._location is not None:
            headers.append(("Location", self._location))
        return headers

class MultipleChoices(_RedirectThrowable):
    _status=300
    _reason="Multiple Choices"
    _location_required = False
class MovedPermanently(_RedirectThrowable):
    _status=301
    _reason="Moved Permanently"
class Found(_RedirectThrowable):
    _status=302
    _reason="Found"
class SeeOther(_RedirectThrowable):
    _status=303
    _reason="See Other"
class NotModified(_StatusThrowable):
    _status=304
    _reason="Not Modified"
class UseProxy(_RedirectThrowable):
    _status=305
    _reason="Use Proxy"
class TemporaryRedirect(_RedirectThrowable):
    _status=307
    _reason="Temporary Redirect"

# 4xx Error (Client error)
class BadRequest(_StatusThrowable):
    _status=400
    _reason="Bad Request"

class Unauthorized(_StatusThrowable):
    _status=401
    _reason="Unauthorized"

    def __init__(self, message=None, *, www_authenticate=None):
        self._www_authenticate = _str_field(
            "www_authenticate", www_authenticate
        )
        super().__init__(message)

    @property
    def www_authenticate(self):
        return self._www_authenticate

    def additional_headers(self):
        headers = super().additional_headers()
        headers.append(("WWW-Authenticate", self._www_authenticate))
        return headers

class Forbidden(_StatusThrowable):
    _status=403
    _reason="Forbidden"
class NotFound(_StatusThrowable):
    _status=404
    _reason="Not Found"

class MethodNotAllowed(_StatusThrowable):
    _status=405
    _reason="Method Not Allowed"

    def __init__(self, message=None, *, allow=None):
        if allow is None:
            raise ConstructionError("allow")
        if isinstance(allow, str) or not isinstance(allow, (list, tuple)):
            raise ConstructionError("allow", "must be list type")
        if len(allow) == 0:
            raise ConstructionError("allow", "must not be empty")
        try:
            self._allow_value = allow_value(allow)
        except (TypeError, ValueError) as e:
            raise ConstructionError("allow", f"has invalid method ({e})") from e
        self._allow = tuple(allow)
        super().__init__(message)

    @property
    def allow(self):
        return self._allow

    def additional_headers(self):
        headers = super().additional_headers()
        headers.append(("Allow", self._allow_value))
        return headers

class NotAcceptable(_StatusThrowable):
    _status=406
    _reason="Not Acceptable"

class ProxyAuthenticationRequired(_StatusThrowable):
    _status=407
    _reason="Proxy Authentication Required"

    def __init__(self, message=None, *, proxy_authenticate=None):
        self._proxy_authenticate = _str_field(
            "proxy_authenticate", proxy_authenticate
        )
        super().__init__(message)

    @property
    def proxy_authenticate(self):
        return self._proxy_authenticate

    def additional_headers(self):
        headers = super().additional_headers()
        headers.append(("Proxy-Authenticate", self._proxy_authenticate))
        return headers

class RequestTimeout(_StatusThrowable):
    _status=408
    _reason="Request Timeout"
class Conflict(_StatusThrowable):
    _status=409
    _reason="Conflict"
class Gone(_StatusThrowable):
    _status=410
    _reason="Gone"
class LengthRequired(_StatusThrowable):
    _status=411
    _reason="Length Required"
class PreconditionFailed(_StatusThrowable):
    _status=412
    _reason="Precondition Failed"
class RequestEntityTooLarge(_StatusThrowable):
    _status=413
    _reason="Request Entity Too Large"
class RequestURITooLong(_StatusThrowable):
    _status=414
    _reason="Request-URI Too Long"
class UnsupportedMediaType(_StatusThrowable):
    _status=415
    _reason="Unsupported Media Type"
class RequestedRangeNotSatisfiable(_StatusThrowable):
    _status=416
    _reason="Requested Range Not Satisfiable"
class ExpectationFailed(_StatusThrowable):
    _status=417
    _reason="Expectation Failed"

# 5xx Error (Server error)
class InternalServerError(_StatusThrowable):
    """
    500 is the only status which includes the stack trace,
    captured at construction unless disabled by HTTP_THROWABLE_STACK_TRACE.
    """
    _status=500
    _reason="Internal Server Error"

    def __init__(self, message=None, *, stack_trace=None):
        if stack_trace is None and ThrowableEnv().stack_trace:
            # drop this frame
            stack_trace = "".join(traceback.format_stack()[:-1])
        self._stack_trace = _str_field("stack_trace", stack_trace, False)
        super().__init__(message)

    @property
    def stack_trace(self):
        return self._stack_trace

    def as_string(self):
        out = super().as_string()
        if self._stack_trace is not None:
            out += "\n\n" + self._stack_trace
        return out

class HTTPNotImplemented(_StatusThrowable):
    _status=501
    _reason="Not Implemented"
class BadGateway(_StatusThrowable):
    _status=502
    _reason="Bad Gateway"

class ServiceUnavailable(_StatusThrowable):
    _status=503
    _reason="Service Unavailable"

    def __init__(self, message=None, *, retry_after=None):
        if retry_after is not None:
            if isinstance(retry_after, bool) or \
                    not isinstance(retry_after, (int, str)):
                raise ConstructionError("retry_after", "must be int or str type")
            if isinstance(retry_after, int) and retry_after < 0:
                raise ConstructionError("retry_after", "must not be negative")
        self._retry_after = retry_after
        super().__init__(message)

    @property
    def retry_after(self):
        return self._retry_after

    def additional_headers(self):
        headers = super().additional_headers()
        if self._retry_after is not None:
            headers.append(("Retry-After", str(self._retry_after)))
        return headers

class GatewayTimeout(_StatusThrowable):
    _status=504
    _reason="Gateway Timeout"
class HTTPVersionNotSupported(_StatusThrowable):
    _status=505
    _reason="HTTP Version Not Supported"


STATUS_THROWABLES = {
    x._status: x for x in (
        MultipleChoices,
        MovedPermanently,
        Found,
        SeeOther,
        NotModified,
        UseProxy,
        TemporaryRedirect,
        BadRequest,
        Unauthorized,
        Forbidden,
        NotFound,
        MethodNotAllowed,
        NotAcceptable,
        ProxyAuthenticationRequired,
        RequestTimeout,
        Conflict,
        Gone,
        LengthRequired,
        PreconditionFailed,
        RequestEntityTooLarge,
        RequestURITooLong,
        UnsupportedMediaType,
        RequestedRangeNotSatisfiable,
        ExpectationFailed,
        InternalServerError,
        HTTPNotImplemented,
        BadGateway,
        ServiceUnavailable,
        GatewayTimeout,
        HTTPVersionNotSupported,
    )
}

def throwable_for(status_code, **kwargs):
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        raise TypeError(
            "status_code must be int type."
        )
    cls = STATUS_THROWABLES.get(status_code)
    if cls is None:
        raise ValueError(
            f"no throwable for status code. ({status_code})"
        )
    return cls(**kwargs)

__all__ = [
    "STATUS_THROWABLES",
    "throwable_for",
] + [x.__name__ for x in STATUS_THROWABLES.values()]
