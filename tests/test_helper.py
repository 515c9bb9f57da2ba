import pytest
from http_throwable.helper import *
from http_throwable.status import NotFound, MovedPermanently
from http_throwable.throwable import HTTPThrowable

def test_throw():
    with pytest.raises(NotFound) as e:
        throw(404, message="no such user")
    assert(str(e.value) == "404 Not Found no such user")

def test_throw_unknown():
    with pytest.raises(ValueError):
        throw(299)

def test_html_response():
    e = NotFound("ユーザー")
    status, headers, body = html_response(e)
    assert(status == 404)
    assert(len(body) == 1)
    assert(headers == [
        ("Content-Type", "text/html"),
        ("Content-Length", str(len(body[0].encode("utf-8")))),
    ])

def test_html_response_additional_headers():
    _, headers, _ = html_response(MovedPermanently(location="/new"))
    assert(headers[-1] == ("Location", "/new"))

def test_html_response_type_error():
    with pytest.raises(TypeError):
        html_response("404 Not Found")

def test_html_response_base():
    status, _, body = html_response(HTTPThrowable(599, "Custom"))
    assert(status == 599)
    assert("<h1>599 Custom</h1>" in body[0])
