import pytest
from http_throwable.env import ThrowableEnv


@pytest.fixture(scope="function", autouse=False)
def env_init():
    yield ThrowableEnv()

def test_defaults(env_init):
    assert(env_init.stack_trace is True)
    assert(env_init.encoding == "utf-8")

@pytest.mark.parametrize(
    "value, expected", [
    ("0", False),
    ("false", False),
    ("Off", False),
    ("1", True),
    ("yes", True),
    ("", True),
])
def test_stack_trace_env(clean_env, value, expected):
    clean_env.setenv(ThrowableEnv.STACK_TRACE_ENV, value)
    assert(ThrowableEnv().stack_trace is expected)

def test_stack_trace_setter(env_init):
    env_init.stack_trace = False
    assert(env_init.stack_trace is False)

@pytest.mark.parametrize(
    "value", [
    "false",
    0,
])
def test_stack_trace_setter_type_error(env_init, value):
    with pytest.raises(TypeError):
        env_init.stack_trace = value

def test_encoding_env(clean_env):
    clean_env.setenv(ThrowableEnv.ENCODING_ENV, "latin-1")
    assert(ThrowableEnv().encoding == "latin-1")

def test_encoding_invalid(clean_env):
    clean_env.setenv(ThrowableEnv.ENCODING_ENV, "no-such-codec")
    with pytest.raises(ValueError):
        ThrowableEnv().encoding

def test_encoding_setter_type_error(env_init):
    with pytest.raises(TypeError):
        env_init.encoding = b"utf-8"
