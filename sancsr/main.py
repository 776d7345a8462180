__version__ = "0.0.0"  # replaced during build, do not change

import argparse
import sys
from typing import Optional, Sequence

from .config import settings
from .constants import CRYPTO_PROVIDERS, KEY_LENGTHS
from .exceptions import CSRException
from .logger import logger
from .request import generate_csr


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sancsr',
        description='Generate a PKCS#10 certificate signing request with multiple subject alternative names using certreq',
    )
    parser.add_argument('--common-name', required=True, help='primary DNS name of the request, e.g. host.domain.org')
    parser.add_argument(
        '--key-length', type=int, choices=KEY_LENGTHS, default=settings.request.default_key_length, help='RSA key length in bits (default: %(default)s)'
    )
    parser.add_argument('--exportable', action=argparse.BooleanOptionalAction, default=False, help='mark the private key as exportable')
    parser.add_argument(
        '--encryption-algorithm', choices=CRYPTO_PROVIDERS, default=settings.request.default_provider, help='cryptographic provider (default: %(default)s)'
    )
    parser.add_argument('--aliases', default='', help='comma separated list of additional DNS names, e.g. "www.domain.org,domain.org"')
    parser.add_argument('--destination', required=True, help='existing directory the <common name>.csr file is written to')
    parser.add_argument('--keep-inf', action='store_true', default=None, help='do not delete the temporary request document')
    parser.add_argument('--print-inf', action='store_true', help='only print the request document, do not run the signing utility')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    params = {
        'common_name': args.common_name,
        'destination': args.destination,
        'aliases': args.aliases,
        'key_length': args.key_length,
        'exportable': args.exportable,
        'provider': args.encryption_algorithm,
    }
    try:
        if args.print_inf:
            # text mode stdout already translates \n to the platform line ending
            sys.stdout.write(generate_csr(**params, render_only=True, line_terminator='\n'))
            return 0
        output_file = generate_csr(**params, keep_request_file=args.keep_inf)
    except CSRException as exc:
        logger.warning('%s', exc.detail or exc.exc_type)
        return exc.exit_code
    print(output_file)
    return 0


def run() -> None:
    sys.exit(main())
