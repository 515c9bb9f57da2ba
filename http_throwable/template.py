import jinja2 as j2

"""
Error pages are rendered by Jinja2.

detail of Jinja2: https://github.com/pallets/jinja
"""
_ERROR_PAGE = """<!DOCTYPE html>
<html>
<head><title>{{ status_code }} {{ reason }}</title></head>
<body>
<h1>{{ status_code }} {{ reason }}</h1>
{%- if message is not none %}
<p>{{ message }}</p>
{%- endif %}
</body>
</html>
"""

_env = j2.Environment(autoescape=True)

def text_render(text, **data):
    if text is None or not isinstance(text, str):
        raise TypeError(
            "text must be str type."
        )

    _tmp = _env.from_string(text)
    return _tmp.render(data)


class Templates:
    def __init__(self, dir_path):
        self._dir_path = dir_path
        self._loader = j2.FileSystemLoader(dir_path)
        self._env = j2.Environment(loader=self._loader, autoescape=True)

    def get_template(self, filename):
        return self._env.get_template(filename)

    def render(self, filename, **data):
        _tmp = self.get_template(filename)

        return _tmp.render(data)


def render_throwable(throwable, templates=None, filename=None):
    """
    Render throwable as an HTML page.

    Without templates, the built-in error page is used. Templates get
    status_code, reason, message and throwable as variables.
    """
    data = {
        "status_code": throwable.status_code,
        "reason": throwable.reason,
        "message": throwable.message,
        "throwable": throwable,
    }
    if templates is None and filename is None:
        return text_render(_ERROR_PAGE, **data)
    if templates is None or filename is None:
        raise ValueError(
            "templates and filename must be specified together."
        )
    return templates.render(filename, **data)
