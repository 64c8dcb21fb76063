import pytest

from nettsuspend.status import HttpMethod, HttpStatus


@pytest.mark.parametrize(
    "code, member",
    [
        (100, HttpStatus.CONTINUE),
        (200, HttpStatus.OK),
        (226, HttpStatus.IM_USED),
        (308, HttpStatus.PERMANENT_REDIRECT),
        (404, HttpStatus.NOT_FOUND),
        (418, HttpStatus.IM_A_TEAPOT),
        (451, HttpStatus.UNAVAILABLE_FOR_LEGAL_REASONS),
        (511, HttpStatus.NETWORK_AUTHENTICATION_REQUIRED),
    ],
)
def test_from_code_known(code, member):
    result = HttpStatus.from_code(code)
    assert result is member
    assert int(result) == code


@pytest.mark.parametrize("code", [0, 419, 509, 999])
def test_from_code_unknown_returns_integer(code):
    result = HttpStatus.from_code(code)
    assert result == code
    assert not isinstance(result, HttpStatus)


def test_all_codes_in_valid_range():
    found = [HttpStatus.from_code(code) for code in range(100, 600)]
    members = [status for status in found if isinstance(status, HttpStatus)]
    assert set(members) == set(HttpStatus)


def test_codes_are_unique():
    for status in HttpStatus:
        assert HttpStatus.from_code(int(status)) is status


def test_status_compares_as_int():
    assert HttpStatus.from_code(200) == 200
    assert HttpStatus.from_code(500) > HttpStatus.from_code(404)


def test_methods_names_match_values():
    names = ["GET", "POST", "PATCH", "PUT", "DELETE"]
    methods = [HttpMethod(name) for name in names]
    assert [m.name for m in methods] == names
    assert list(HttpMethod) == methods


def test_method_lookup_by_value():
    assert HttpMethod("DELETE") is HttpMethod.DELETE
    with pytest.raises(ValueError):
        HttpMethod("TRACE")