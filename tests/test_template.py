import pytest
from http_throwable.template import *
from http_throwable.status import NotFound

def test_text_render():
    txt = text_render("Hello {{ world }}", world="World")
    assert(isinstance(txt, str))
    assert(txt == "Hello World")

def test_text_render_escape():
    txt = text_render("{{ message }}", message="<b>")
    assert(txt == "&lt;b&gt;")

@pytest.mark.parametrize(
    "text", [
    None,
    b"Hello",
    1,
])
def test_text_render_type_error(text):
    with pytest.raises(TypeError):
        text_render(text)

@pytest.fixture(scope="function", autouse=False)
def template_init(tmp_path):
    (tmp_path / "error.html").write_text(
        "<p>{{ status_code }}: {{ reason }}</p>"
    )
    tmp = Templates(dir_path=str(tmp_path))
    yield tmp

def test_render(template_init):
    res = template_init.render("error.html", status_code=404, reason="Not Found")
    assert(res == "<p>404: Not Found</p>")

def test_render_throwable_default():
    res = render_throwable(NotFound("<script>"))
    assert("<title>404 Not Found</title>" in res)
    assert("<h1>404 Not Found</h1>" in res)
    assert("<p>&lt;script&gt;</p>" in res)

def test_render_throwable_without_message():
    res = render_throwable(NotFound())
    assert("<p>" not in res)

def test_render_throwable_template(template_init):
    res = render_throwable(NotFound(), template_init, "error.html")
    assert(res == "<p>404: Not Found</p>")

def test_render_throwable_template_without_filename(template_init):
    with pytest.raises(ValueError):
        render_throwable(NotFound(), template_init)
