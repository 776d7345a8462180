import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from ..exceptions import CSRException
from ..logger import logger
from .model import RequestDescriptor
from .service import resolve_output_file, split_aliases, validate_aliases, validate_common_name, validate_output_path
from .. import inf
from ..signer import CertReq, SigningUtility


def build_request(
    *,
    common_name: str,
    destination: Union[str, Path],
    aliases: Optional[str] = None,
    key_length: Optional[int] = None,
    exportable: bool = False,
    provider: Optional[str] = None,
) -> tuple[RequestDescriptor, str]:
    """
    validate the raw parameters and return the descriptor together with the final csr file path

    nothing is written here, a CSRException is raised on the first invalid parameter
    key_length and provider fall back to settings.request when not given
    """
    validate_common_name(common_name)
    validate_aliases(aliases)
    validate_output_path(destination)

    output_file = resolve_output_file(destination, common_name)
    descriptor = RequestDescriptor(
        common_name=common_name,
        key_length=settings.request.default_key_length if key_length is None else key_length,
        exportable=exportable,
        provider=provider or settings.request.default_provider,
        aliases=tuple(split_aliases(aliases)),
        output_path=Path(destination),
    )
    return descriptor, output_file


def encode_document(document: str) -> bytes:
    try:
        return document.encode(settings.inf.encoding)
    except UnicodeEncodeError as exc:
        raise CSRException(
            exctype='unencodableRequest',
            detail=f'request document cannot be written as {settings.inf.encoding}: {exc.object[exc.start:exc.end]!r} is not representable',
        ) from exc


def generate_csr(
    *,
    common_name: str,
    destination: Union[str, Path],
    aliases: Optional[str] = None,
    key_length: Optional[int] = None,
    exportable: bool = False,
    provider: Optional[str] = None,
    signer: Optional[SigningUtility] = None,
    keep_request_file: Optional[bool] = None,
    render_only: bool = False,
    line_terminator: Optional[str] = None,
) -> str:
    """
    render the request document for the given parameters and let the signing utility create the csr

    returns the path of the csr file, or the rendered document when render_only is set
    render_only: validate and render, but write nothing and do not run the signing utility
    line_terminator: passed to inf.render, defaults to settings.inf.line_terminator
    """
    descriptor, output_file = build_request(
        common_name=common_name,
        destination=destination,
        aliases=aliases,
        key_length=key_length,
        exportable=exportable,
        provider=provider,
    )
    document = inf.render(descriptor, line_terminator)
    if render_only:
        return document

    data = encode_document(document)

    if signer is None:
        signer = CertReq()
    if keep_request_file is None:
        keep_request_file = settings.keep_request_file

    f = tempfile.NamedTemporaryFile('wb', suffix='.inf', prefix='sancsr-', dir=settings.temp_dir, delete=False)  # pylint: disable=consider-using-with
    request_path = f.name
    try:
        with f:
            f.write(data)
        logger.debug('Request document for %s written to %s', descriptor.common_name, request_path)
        signer.sign(request_path, output_file)
    finally:
        if keep_request_file:
            logger.info('Keeping request document %s', request_path)
        else:
            os.remove(request_path)
    return output_file
