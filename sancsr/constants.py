from pathlib import Path
from typing import Literal

PROJECT_ROOT = Path(__file__).parent.parent

INF_TEMPLATES_PATH = PROJECT_ROOT / 'sancsr' / 'inf' / 'templates'

KeyLength = Literal[1024, 2048, 4096]
KEY_LENGTHS: tuple[int, ...] = (1024, 2048, 4096)

RSA_SCHANNEL_PROVIDER = 'Microsoft RSA SChannel Cryptographic Provider'
DSS_DH_PROVIDER = 'Microsoft Enhanced DSS and Diffie-Hellman Cryptographic Provider'

CryptoProvider = Literal[
    'Microsoft RSA SChannel Cryptographic Provider',
    'Microsoft Enhanced DSS and Diffie-Hellman Cryptographic Provider',
]
CRYPTO_PROVIDERS: tuple[str, ...] = (RSA_SCHANNEL_PROVIDER, DSS_DH_PROVIDER)

CSR_SUFFIX = '.csr'
