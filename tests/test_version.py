from soapykit.version import (
    ABI_VERSION,
    API_VERSION,
    get_abi_version,
    get_api_version,
    get_lib_version,
)


def test_abi_version_matches_constant():
    assert get_abi_version() == ABI_VERSION
    assert get_abi_version() == "0.8"


def test_abi_version_format():
    base = get_abi_version().split("-", 1)[0]
    major, minor = base.split(".")
    assert (int(major), int(minor)) == (0, 8)


def test_api_version_string():
    assert get_api_version() == "0.8.0"


def test_api_version_major_minor_match_abi():
    major, minor, _increment = get_api_version().split(".")
    assert f"{major}.{minor}" == get_abi_version().split("-")[0]


def test_api_version_fields_fit_encoding():
    major, minor, increment = (int(part) for part in get_api_version().split("."))
    assert (major << 24) | (minor << 16) | increment == API_VERSION


def test_lib_version_format():
    base = get_lib_version().split("-", 1)[0]
    parts = base.split(".")
    assert len(parts) == 3
    numbers = [int(part) for part in parts]
    assert numbers[:2] == [0, 8]
    assert numbers[2] >= 0


def test_lib_version_starts_with_abi_version():
    assert get_lib_version().startswith(get_abi_version().split("-")[0] + ".")