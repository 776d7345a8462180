from functools import lru_cache
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import settings
from ..constants import INF_TEMPLATES_PATH
from ..request.model import RequestDescriptor

TEMPLATE_NAME = 'request.inf'


@lru_cache(maxsize=None)
def template_engine(line_terminator: str) -> Environment:
    # certreq has no escaping syntax, so values go in verbatim
    return Environment(
        loader=FileSystemLoader(INF_TEMPLATES_PATH),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        newline_sequence=line_terminator,
    )


def render(descriptor: RequestDescriptor, line_terminator: Optional[str] = None) -> str:
    """
    render the certreq INF document for the descriptor

    line_terminator: ends every line of the document, defaults to settings.inf.line_terminator
    """
    if line_terminator is None:
        line_terminator = settings.inf.line_terminator
    return template_engine(line_terminator).get_template(TEMPLATE_NAME).render(
        common_name=descriptor.common_name,
        key_length=descriptor.key_length,
        exportable=descriptor.exportable,
        provider=descriptor.provider,
        aliases=descriptor.aliases,
    )
