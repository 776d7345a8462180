import os
import re
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from ..constants import CSR_SUFFIX
from ..exceptions import CSRException


def validate_common_name(name: str) -> None:
    if not name or not re.fullmatch(settings.request.common_name_regex.pattern, name, re.IGNORECASE):
        raise CSRException(
            exctype='invalidCommonName',
            detail=f'"{name}" is not a valid common name, expected something like host.domain.org',
        )


def validate_aliases(raw_aliases: Optional[str]) -> None:
    if not raw_aliases:  # no aliases at all is fine
        return
    if not re.fullmatch(settings.request.aliases_regex.pattern, raw_aliases):
        raise CSRException(
            exctype='invalidAliases',
            detail=f'"{raw_aliases}" is not a valid alias list, only word characters, dots, whitespace and commas are allowed',
        )


def validate_output_path(path: Union[str, Path, None]) -> None:
    if not path or not os.path.exists(path):
        raise CSRException(exctype='missingOutputPath', detail=f'destination path "{path}" does not exist')


def resolve_output_file(output_path: Union[str, Path], common_name: str, separator: str = os.sep) -> str:
    """
    output_path: the destination directory as given by the user
    common_name: the main requested domain name, used as file name
    separator: path separator of the host the signing utility runs on
    """
    output_path = str(output_path)
    if output_path.endswith(separator):
        return output_path + common_name + CSR_SUFFIX
    return output_path + separator + common_name + CSR_SUFFIX


def split_aliases(raw_aliases: Optional[str]) -> list[str]:
    if not raw_aliases:
        return []
    if ',' in raw_aliases:
        return raw_aliases.split(',')
    # without a comma the whole input is a single alias, even if it contains whitespace
    return [raw_aliases]
