"""
Haskell FFI binding module generation
"""

from typing import Sequence
from ..core.models import Signature
from ..core.config import GENERATED_NOTICE, PRAGMAS, IMPORTS, SYMBOL_PREFIX


def foreign_import(sig: Signature) -> str:
    """Render the `foreign import` declaration binding one native symbol"""
    return f'foreign import ccall unsafe "{SYMBOL_PREFIX}{sig.name}" {sig}'


def render_module(module_name: str, signatures: Sequence[Signature]) -> str:
    """
    Produce the content of `{module_name}.hs` from parsed signatures.

    Exports and foreign imports follow the order of `signatures`; nothing
    is sorted or deduplicated.

    Args:
        module_name: Haskell module name
        signatures: Already validated signatures

    Returns:
        Haskell source code
    """
    exports = ", ".join(sig.name for sig in signatures)
    lines = [
        GENERATED_NOTICE,
        "",
        PRAGMAS,
        "",
        f"module {module_name} ({exports}) where",
        "",
        IMPORTS,
        "",
    ]
    lines.extend(foreign_import(sig) for sig in signatures)

    return "\n".join(lines)
