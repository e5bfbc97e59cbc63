import pytest

from texted import Buffer, Environment, TextedExecutionError, run_script


@pytest.fixture
def env():
    return Environment.default()


@pytest.fixture
def run():
    """Run a script on some text and return the ScriptResult."""
    def _run(text, script, syntax="shell"):
        return run_script(text, script, syntax)
    return _run


@pytest.fixture
def value_of(run):
    """Sexp rendering of a script's final value."""
    def _value_of(text, script, syntax="shell"):
        return str(run(text, script, syntax).value)
    return _value_of


@pytest.fixture
def fails(run):
    """Run a script that must fail; return the TextedExecutionError."""
    def _fails(text, script, syntax="shell"):
        with pytest.raises(TextedExecutionError) as exc:
            run(text, script, syntax)
        return exc.value
    return _fails


@pytest.fixture
def buffer():
    return Buffer("Hello world")
