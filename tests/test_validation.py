import pytest

from sancsr.exceptions import CSRException
from sancsr.request import build_request
from sancsr.request.service import validate_aliases, validate_common_name, validate_output_path


@pytest.mark.parametrize('name', ['host.domain.org', 'a.b', 'HOST.Domain.ORG', 'web_01.example.com', 'sub.host.domain.co.uk'])
def test_accepts_dotted_common_names(name):
    validate_common_name(name)


@pytest.mark.parametrize('name', ['', 'localhost', 'host.', '.host.org', 'host..org', 'host.domain.org.', 'host name.org', 'host.domain.org;x'])
def test_rejects_malformed_common_names(name):
    with pytest.raises(CSRException) as exc_info:
        validate_common_name(name)
    assert exc_info.value.exc_type == 'invalidCommonName'
    assert exc_info.value.exit_code == 1


@pytest.mark.parametrize('raw', [None, '', 'alias1', 'alias1,alias2', 'www.domain.org, mail.domain.org', 'a b c', 'alias1,,alias1'])
def test_accepts_alias_lists(raw):
    validate_aliases(raw)


@pytest.mark.parametrize('raw', ['alias;other', 'a"b', 'a/b', 'x*y.org'])
def test_rejects_alias_lists(raw):
    with pytest.raises(CSRException) as exc_info:
        validate_aliases(raw)
    assert exc_info.value.exc_type == 'invalidAliases'


def test_output_path_must_exist(tmp_path):
    validate_output_path(tmp_path)
    validate_output_path(str(tmp_path))

    with pytest.raises(CSRException) as exc_info:
        validate_output_path(tmp_path / 'missing')
    assert exc_info.value.exc_type == 'missingOutputPath'

    with pytest.raises(CSRException):
        validate_output_path('')


def test_common_name_is_checked_first(tmp_path):
    with pytest.raises(CSRException) as exc_info:
        build_request(common_name='localhost', destination=tmp_path / 'missing', aliases='bad;alias')
    assert exc_info.value.exc_type == 'invalidCommonName'


def test_aliases_are_checked_before_destination(tmp_path):
    with pytest.raises(CSRException) as exc_info:
        build_request(common_name='host.domain.org', destination=tmp_path / 'missing', aliases='bad;alias')
    assert exc_info.value.exc_type == 'invalidAliases'


def test_exception_value():
    exc = CSRException(exctype='missingOutputPath', detail='nope')
    assert exc.value == {'type': 'missingOutputPath', 'detail': 'nope'}
    assert str(exc) == 'missingOutputPath: nope'
    assert CSRException(exctype='signingUtilityFailed').exit_code == 2
