import pytest

from kuekit.envar import get_env

CASES = [
    ("KEY_TEST_INT1", 1, "10", 10),
    ("KEY_TEST_INT2", 123456789, "", 123456789),
    ("KEY_TEST_INT3", 0, "10240985761", 10240985761),
    ("KEY_TEST_BOOL1", False, "True", True),
    ("KEY_TEST_BOOL2", True, "FalSe", False),
    ("KEY_TEST_BOOL3", False, "TRUE", True),
    ("KEY_TEST_BOOL4", False, "", False),
    (
        "KEY_TEST_STRING1",
        "",
        "http://localhost:5000/kk-ddd/wwwdd_1234/rrghj/45rghh\\\\/.;\\][]p[p[\\",
        "http://localhost:5000/kk-ddd/wwwdd_1234/rrghj/45rghh\\\\/.;\\][]p[p[\\",
    ),
    ("KEY_TEST_STRING2", "default-value", "m5k^^^-++*&`2&!Z(+En{S+FQw@#", "m5k^^^-++*&`2&!Z(+En{S+FQw@#"),
    ("KEY_TEST_STRING3", "default-value", "", "default-value"),
]


@pytest.mark.parametrize("key, default, value, want", CASES)
def test_get_env(monkeypatch, key, default, value, want):
    monkeypatch.delenv(key, raising=False)
    if value.strip():
        monkeypatch.setenv(key, value)
    result = get_env(key, default)
    assert result == want
    assert type(result) is type(want)


def test_get_env_invalid_int_falls_back(monkeypatch):
    monkeypatch.setenv("KEY_TEST_BAD_INT", "12abc")
    assert get_env("KEY_TEST_BAD_INT", 42) == 42


def test_get_env_invalid_bool_falls_back(monkeypatch):
    monkeypatch.setenv("KEY_TEST_BAD_BOOL", "yes")
    assert get_env("KEY_TEST_BAD_BOOL", True) is True


def test_get_env_trims_whitespace(monkeypatch):
    monkeypatch.setenv("KEY_TEST_TRIM", "  value  ")
    assert get_env("KEY_TEST_TRIM", "x") == "value"


def test_get_env_numeric_bool(monkeypatch):
    monkeypatch.setenv("KEY_TEST_NUM_BOOL", "0")
    assert get_env("KEY_TEST_NUM_BOOL", True) is False


def test_get_env_unsupported_type():
    with pytest.raises(TypeError):
        get_env("KEY_TEST_FLOAT", 1.5)