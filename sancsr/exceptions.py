from typing import Literal

CSRExceptionTypes = Literal[
    'invalidCommonName',
    'invalidAliases',
    'missingOutputPath',
    'unencodableRequest',
    'signingUtilityFailed',
]


class CSRException(Exception):
    exc_type: CSRExceptionTypes
    detail: str

    def __init__(self, *, exctype: CSRExceptionTypes, detail: str = '') -> None:
        self.exc_type = exctype
        self.detail = detail

        super().__init__(self.value)

    @property
    def value(self):
        return {'type': self.exc_type, 'detail': self.detail}

    @property
    def exit_code(self) -> int:
        # validation failures happen before anything is written, signing failures after
        return 2 if self.exc_type == 'signingUtilityFailed' else 1

    def __str__(self) -> str:
        return f'{self.exc_type}: {self.detail}' if self.detail else self.exc_type

    def __repr__(self) -> str:
        return f'CSR-Exception({self.value})'
