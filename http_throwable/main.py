import click
import jinja2 as j2
import os
import sys
from http_throwable import __version__
from http_throwable.config import throwable_config
from http_throwable.err import display_throwable_error
from http_throwable.helper import html_response
from http_throwable.status import throwable_for
from http_throwable.template import Templates

@click.command()
@click.version_option(__version__)
@click.argument(
    "status_code",
    type=int,
)
@click.option(
    "-m",
    "--message",
    "message",
    default=None,
    type=str,
    help="Additional message of the error",
    show_default=False
)
@click.option(
    "-l",
    "--location",
    "location",
    default=None,
    type=str,
    help="Location header of 3xx redirection",
    show_default=False
)
@click.option(
    "-a",
    "--allow",
    "allow",
    multiple=True,
    type=str,
    help="Allowed method of 405 Method Not Allowed. Can be repeated.",
    show_default=False
)
@click.option(
    "--www-authenticate",
    "www_authenticate",
    default=None,
    type=str,
    help="WWW-Authenticate header of 401 Unauthorized",
    show_default=False
)
@click.option(
    "--proxy-authenticate",
    "proxy_authenticate",
    default=None,
    type=str,
    help="Proxy-Authenticate header of 407 Proxy Authentication Required",
    show_default=False
)
@click.option(
    "--retry-after",
    "retry_after",
    default=None,
    type=str,
    help="Retry-After header of 503 Service Unavailable (seconds or HTTP-date)",
    show_default=False
)
@click.option(
    "-c",
    "--conf-path",
    "conf_path",
    default=None,
    type=click.Path(exists=True),
    help="Configure path of http-throwable",
    show_default=False
)
@click.option(
    "-r",
    "--response",
    "response",
    is_flag=True,
    default=False,
    help="Display the whole response, not only the body",
    show_default=False
)
@click.option(
    "--html",
    "html",
    is_flag=True,
    default=False,
    help="Render the response body as HTML",
    show_default=False
)
@click.option(
    "-t",
    "--template-dir",
    "template_dir",
    default=None,
    type=click.Path(exists=True, file_okay=False),
    help="Directory of HTML templates (with --html)",
    show_default=False
)
@click.option(
    "--template",
    "template",
    default=None,
    type=str,
    help="Template file name in the template directory (with --html)",
    show_default=False
)
def throwable_command_line(
    status_code:        int,
    message:            str,
    location:           str,
    allow:              tuple,
    www_authenticate:   str,
    proxy_authenticate: str,
    retry_after:        str,
    conf_path:          str,
    response:           bool,
    html:               bool,
    template_dir:       str,
    template:           str,
):
    """Render an HTTP error of STATUS_CODE.\n
    Without --response, only the body is displayed.
    """
    kwargs = {
        "message":              message,
        "location":             location,
        "allow":                list(allow) if len(allow) > 0 else None,
        "www_authenticate":     www_authenticate,
        "proxy_authenticate":   proxy_authenticate,
        "retry_after":          int(retry_after) \
                if retry_after is not None and retry_after.isdigit() \
                else retry_after,
    }
    kwargs = {k: v for k, v in kwargs.items() if v is not None}

    try:
        if conf_path is not None:
            throwable_config(os.path.abspath(conf_path))
        throwable = throwable_for(status_code, **kwargs)
        if html:
            templates = Templates(template_dir) \
                    if template_dir is not None else None
            result = html_response(throwable, templates, template)
        else:
            result = throwable.as_response()
    except (TypeError, ValueError, j2.TemplateError) as e:
        display_throwable_error(e)
        sys.exit(1)

    run(throwable, result, response)

def run(throwable, result, response):
    status, headers, body = result
    if response:
        click.echo(f"{status} {throwable.reason}")
        for name, value in headers:
            click.echo(f"{name}: {value}")
        click.echo("")
    click.echo("".join(body))

if __name__ == "__main__":
    throwable_command_line()
