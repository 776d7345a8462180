from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, constr

from ..config import settings
from ..constants import CryptoProvider, KeyLength


class RequestDescriptor(BaseModel):
    """
    everything needed to render one request document, built once per invocation
    """

    common_name: constr(min_length=1)  # type: ignore[valid-type]
    key_length: KeyLength = Field(default_factory=lambda: settings.request.default_key_length)
    exportable: bool = False
    provider: CryptoProvider = Field(default_factory=lambda: settings.request.default_provider)
    aliases: tuple[str, ...] = ()  # may repeat, order is kept
    output_path: Path

    model_config = ConfigDict(frozen=True)
