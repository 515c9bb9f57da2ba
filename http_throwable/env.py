import os
import codecs

class ThrowableEnv:

    STACK_TRACE_ENV = "HTTP_THROWABLE_STACK_TRACE"
    ENCODING_ENV = "HTTP_THROWABLE_ENCODING"

    _DEFAULT_STACK_TRACE = True
    _DEFAULT_ENCODING = "utf-8"
    _FALSE_VALUES = ("0", "false", "no", "off")

    def __init__(self):
        self._envdict = dict()
        self._envdict.setdefault("stack_trace", os.getenv(ThrowableEnv.STACK_TRACE_ENV))
        self._envdict.setdefault("encoding", os.getenv(ThrowableEnv.ENCODING_ENV))

    @property
    def stack_trace(self):
        value = self._envdict["stack_trace"]
        if value is None or value == "":
            return ThrowableEnv._DEFAULT_STACK_TRACE
        if isinstance(value, bool):
            return value
        return value.strip().lower() not in ThrowableEnv._FALSE_VALUES

    @stack_trace.setter
    def stack_trace(self, value):
        if not isinstance(value, bool) and value is not None:
            raise TypeError(
                "stack_trace must be bool type or None."
            )
        self._envdict["stack_trace"] = value

    @property
    def encoding(self):
        _encoding = self._envdict["encoding"] if self._envdict["encoding"] else ThrowableEnv._DEFAULT_ENCODING
        try:
            codecs.lookup(_encoding)
        except LookupError:
            raise ValueError(
                f"encoding is invalid value. ({_encoding})"
            )
        return _encoding

    @encoding.setter
    def encoding(self, value):
        if not isinstance(value, str) and value is not None:
            raise TypeError(
                "encoding must be str type or None."
            )
        self._envdict["encoding"] = value
