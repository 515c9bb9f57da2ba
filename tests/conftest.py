import pytest
from http_throwable.env import ThrowableEnv


@pytest.fixture(scope="function", autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ThrowableEnv.STACK_TRACE_ENV, raising=False)
    monkeypatch.delenv(ThrowableEnv.ENCODING_ENV, raising=False)
    yield monkeypatch

@pytest.fixture(scope="function", autouse=False)
def no_stack_trace(monkeypatch):
    monkeypatch.setenv(ThrowableEnv.STACK_TRACE_ENV, "0")
    yield
