import pytest


ADD_PROGRAM = """
def x1 = s(s(z))
def x2 = s(z)
def predIt(x, y) = if(eq(s(x), y)) then x else predIt(s(x), y)
def pred(x) = predIt(z, x)
def add(a, b) = if(eq(a, z)) then b else add(pred(a), s(b))
def x3 = add(x1, x2)
x3
"""


@pytest.fixture(autouse=True)
def _clean_peano_env(monkeypatch):
    # Keep tests independent of the developer's shell configuration.
    for var in ("PEANO_STRICT", "PEANO_PRELUDE_PATH", "PEANO_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def add_program():
    return ADD_PROGRAM
