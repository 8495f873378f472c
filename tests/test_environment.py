import io

from cisfun.environment import get_env, is_a_number, is_non_interactive_mode


def test_get_env_finds_value():
    assert get_env("PATH", {"HOME": "/root", "PATH": "/bin:/usr/bin"}) == "/bin:/usr/bin"


def test_get_env_missing_name():
    assert get_env("PATH", {"PATHS": "/bin"}) is None


def test_get_env_none_inputs():
    assert get_env(None, {"PATH": "/bin"}) is None
    assert get_env("PATH", None) is None
    assert get_env("", {"": "x"}) is None


def test_string_stream_is_non_interactive():
    assert is_non_interactive_mode(io.StringIO("ls\n")) is True


def test_terminal_stream_is_interactive():
    class FakeTerminal(io.StringIO):
        def isatty(self):
            return True

    assert is_non_interactive_mode(FakeTerminal()) is False


def test_is_a_number():
    assert is_a_number("0123456789") is True
    assert is_a_number("") is True
    assert is_a_number("12a") is False
    assert is_a_number("-1") is False
    assert is_a_number("\u0663") is False