import pytest

from risp.interpreter import Interpreter
from risp.types.symbol_table import SymbolTable


@pytest.fixture
def table():
    """Fresh symbol table with the well-known symbols interned."""
    return SymbolTable()


@pytest.fixture
def interp(table):
    return Interpreter(table=table)


@pytest.fixture(autouse=True, scope="session")
def _clean_risp_env():
    # Tests must not pick up limits or prompts from the developer's shell
    with pytest.MonkeyPatch.context() as mp:
        for var in ("RISP_MAX_DEPTH", "RISP_PROMPT", "RISP_LOG_LEVEL", "RISP_REPL_HOST", "RISP_REPL_PORT"):
            mp.delenv(var, raising=False)
        yield
