from .exceptions import ConstructionError
from .throwable import HTTPThrowable
from .status import *
from .helper import throw, html_response
from .template import Templates, text_render, render_throwable
from . import status as _status

__all__ = [
    ConstructionError.__name__,
    HTTPThrowable.__name__,
    throw.__name__,
    html_response.__name__,
    text_render.__name__,
    render_throwable.__name__,
    Templates.__name__,
] + _status.__all__

__version__ = "0.1.0"
