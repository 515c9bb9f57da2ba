from .throwable import HTTPThrowable
from .status import throwable_for
from .template import render_throwable

"""

    Throw function:
    @params status_code(int):   Status code which has a throwable class
    @kwargs:                    message and required header values

"""
def throw(status_code, **kwargs):
    raise throwable_for(status_code, **kwargs)

"""
    HTML response function.
"""
def html_response(throwable, templates=None, filename=None):
    if not isinstance(throwable, HTTPThrowable):
        raise TypeError("throwable must be HTTPThrowable type.")

    body = render_throwable(throwable, templates, filename)
    headers = [
        ("Content-Type", "text/html"),
        ("Content-Length", str(throwable.content_length(body))),
    ]
    headers.extend(throwable.additional_headers())
    return (throwable.status_code, headers, [body])
