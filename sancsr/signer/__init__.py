# a custom signing utility can be passed to generate_csr()
# it only has to provide sign() with a matching function signature
import subprocess
from pathlib import Path
from typing import Optional, Protocol, Union

from ..config import settings
from ..exceptions import CSRException
from ..logger import logger


class SigningUtility(Protocol):  # pylint: disable=too-few-public-methods
    def sign(self, request_path: Union[str, Path], output_path: Union[str, Path]) -> None:
        """
        request_path: the rendered INF document
        output_path: where the finished CSR has to be written
        """


class CertReq:  # pylint: disable=too-few-public-methods
    def __init__(self, utility: Optional[str] = None, arguments: Optional[list[str]] = None) -> None:
        self.utility = utility or settings.signing.utility
        self.arguments = list(settings.signing.arguments if arguments is None else arguments)

    def command(self, request_path: Union[str, Path], output_path: Union[str, Path]) -> list[str]:
        return [self.utility, *self.arguments, str(request_path), str(output_path)]

    def sign(self, request_path: Union[str, Path], output_path: Union[str, Path]) -> None:
        cmd = self.command(request_path, output_path)
        logger.debug('Running signing utility: %s', cmd)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise CSRException(exctype='signingUtilityFailed', detail=f'could not start "{self.utility}": {exc}') from exc
        if result.returncode != 0:
            output = (result.stderr or result.stdout or '').strip()
            raise CSRException(
                exctype='signingUtilityFailed',
                detail=f'"{self.utility}" exited with status {result.returncode}' + (f': {output}' if output else ''),
            )
        logger.info('Certificate request written to %s', output_path)
