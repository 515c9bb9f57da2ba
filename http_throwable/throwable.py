from .exceptions import ConstructionError
from .env import ThrowableEnv


def _restore(cls, args, state):
    obj = cls.__new__(cls)
    obj.args = args
    obj.__dict__.update(state)
    return obj


class HTTPThrowable(Exception):
    """
    Base object of all HTTP throwables.

    - status_code: status code integer of HTTP (required)
    - reason: reason phrase of the status code (required)
    - message: additional message string (optional)

    Subclasses can fix status_code and reason with the
    class attributes _status and _reason.
    """
    _status = None
    _reason = None

    def __init__(
        self,
        status_code=None,
        reason=None,
        message=None,
    ):
        if status_code is None:
            status_code = self._status
        if reason is None:
            reason = self._reason

        if status_code is None:
            raise ConstructionError("status_code")
        if reason is None:
            raise ConstructionError("reason")
        # bool is a subclass of int
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            raise ConstructionError("status_code", "must be int type")
        if not isinstance(reason, str):
            raise ConstructionError("reason", "must be str type")
        if message is not None and not isinstance(message, str):
            raise ConstructionError("message", "must be str type or None")

        self._status_code = status_code
        self._reason_phrase = reason
        self._message = message
        self._encoding = ThrowableEnv().encoding
        super().__init__(status_code, reason, message)

    def __reduce__(self):
        # subclasses do not take (status_code, reason, message)
        return (_restore, (self.__class__, self.args, self.__dict__))

    @classmethod
    def throw(cls, *args, **kwargs):
        raise cls(*args, **kwargs)

    @property
    def status_code(self):
        return self._status_code

    @property
    def reason(self):
        return self._reason_phrase

    @property
    def message(self):
        return self._message

    @property
    def encoding(self):
        return self._encoding

    def content_type(self):
        return "text/plain"

    def as_string(self):
        out = f"{self.status_code} {self.reason}"
        if self.message is not None:
            out += " " + self.message
        return out

    def content_length(self, body):
        return len(body.encode(self._encoding))

    def additional_headers(self):
        """
        Headers which a subclass must send with its response.
        """
        return list()

    def build_headers(self, body):
        headers = [
            ("Content-Type", self.content_type()),
            ("Content-Length", str(self.content_length(body))),
        ]
        headers.extend(self.additional_headers())
        return headers

    def as_response(self):
        """
        Response triple of (status_code, headers, [body]).
        Nothing is sent, the caller's server does that.
        """
        body = self.as_string()
        headers = self.build_headers(body)
        return (self.status_code, headers, [body])

    def __str__(self):
        return self.as_string()

    def __repr__(self):
        return f"{self.__class__.__name__}(status_code={self.status_code!r}, reason={self.reason!r}, message={self.message!r})"
