import pytest

from tests.utils import FakeSigner


@pytest.fixture
def fake_signer() -> FakeSigner:
    return FakeSigner()


@pytest.fixture
def destination(tmp_path):
    target = tmp_path / 'out'
    target.mkdir()
    return target
