from __future__ import annotations
from pathlib import Path
from typing import Optional

from peano.config import get_prelude_root
from peano.reader.parser import parse
from peano.reader.syntax import Ast


PRELUDE_FILE = 'std.peano'


def resolve_prelude() -> Optional[Path]:
    candidate = get_prelude_root() / PRELUDE_FILE
    if candidate.is_file():
        return candidate
    return None


def read_prelude() -> str:
    p = resolve_prelude()
    if p is None:
        raise FileNotFoundError(f"Cannot find {PRELUDE_FILE} in PEANO_PRELUDE_PATH")
    return p.read_text(encoding='utf-8')


def load_prelude(code: Optional[str] = None) -> Ast:
    """Parse the prelude (the installed std.peano unless `code` is given).

    A prelude holds definitions only; a trailing expression is ignored.
    """
    ast = parse(read_prelude() if code is None else code)
    return Ast(ast.definitions)
