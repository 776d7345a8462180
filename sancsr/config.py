import os
import sys
from pathlib import Path
from typing import Any, Literal, Optional, Pattern

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import RSA_SCHANNEL_PROVIDER, CryptoProvider, KeyLength
from .logger import logger


class RequestSettings(BaseSettings):
    common_name_regex: Pattern = r'\w+\.\w+(\.\w+)*'
    aliases_regex: Pattern = r'[\w.\s,]+'
    default_key_length: KeyLength = 2048
    default_provider: CryptoProvider = RSA_SCHANNEL_PROVIDER

    model_config = SettingsConfigDict(env_prefix='request_')


class InfSettings(BaseSettings):
    line_terminator: Literal['\n', '\r\n', '\r'] = os.linesep  # type: ignore[assignment]
    encoding: str = 'utf-16'  # what certreq expects from PowerShell's Out-File

    model_config = SettingsConfigDict(env_prefix='inf_')

    @model_validator(mode='before')
    @classmethod
    def sanitize_values(cls, values: Any) -> Any:
        if 'line_terminator' in values:  # not in values if default value
            named = {'lf': '\n', 'crlf': '\r\n', 'cr': '\r'}
            values['line_terminator'] = named.get(str(values['line_terminator']).lower().strip(), values['line_terminator'])
        return values


class SigningSettings(BaseSettings):
    utility: str = 'certreq.exe'
    arguments: list[str] = ['-new']

    model_config = SettingsConfigDict(env_prefix='signing_')


class Settings(BaseSettings):
    keep_request_file: bool = False
    temp_dir: Optional[Path] = None
    request: RequestSettings = RequestSettings()
    inf: InfSettings = InfSettings()
    signing: SigningSettings = SigningSettings()

    model_config = SettingsConfigDict(env_prefix='csr_')

    @model_validator(mode='after')
    def valid_check(self) -> 'Settings':
        if self.temp_dir is not None and not self.temp_dir.is_dir():
            raise ValueError('Env var csr_temp_dir must point to an existing directory, not: ' + str(self.temp_dir))
        if Path(self.signing.utility).stem.lower() == 'certreq' and sys.platform != 'win32':
            logger.warning('Signing utility "%s" is only shipped with Windows, generating requests will fail on this host', self.signing.utility)
        return self


settings = Settings()


logger.debug('Settings: %s', settings.model_dump())
