from pathlib import Path
from typing import Union

from sancsr.config import settings


class FakeSigner:
    """Records every call and the request document as it was on disk when sign() ran."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.documents: list[str] = []

    def sign(self, request_path: Union[str, Path], output_path: Union[str, Path]) -> None:
        self.calls.append((str(request_path), str(output_path)))
        with open(request_path, 'rb') as f:
            self.documents.append(f.read().decode(settings.inf.encoding))


class FailingSigner(FakeSigner):
    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self.exc = exc

    def sign(self, request_path: Union[str, Path], output_path: Union[str, Path]) -> None:
        super().sign(request_path, output_path)
        raise self.exc
