"""
Default type-token parser for Haskell C-FFI types
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from ..core.config import HS_TYPE_TABLE, HS_TYPE_CONSTRUCTORS, UNIT_TYPE


class TypeTokenError(ValueError):
    """Raised when a token is not a supported Haskell C-FFI type"""


@dataclass(frozen=True)
class HsTypeName:
    """A Haskell type: a scalar name, or a constructor applied to one argument"""
    name: str
    argument: Optional["HsTypeName"] = None

    def __str__(self) -> str:
        if self.argument is None:
            return self.name
        inner = str(self.argument)
        if self.argument.argument is not None:
            inner = f"({inner})"
        return f"{self.name} {inner}"


def _wrapped_in_parens(text: str) -> bool:
    """True if the outer parentheses of `text` enclose all of it"""
    if len(text) < 2 or text[0] != "(" or text[-1] != ")":
        return False
    depth = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0 and i != len(text) - 1:
                return False
    return depth == 0


def _split_application(text: str) -> Tuple[str, str]:
    """Split `text` into its head and the (possibly empty) argument text"""
    for constructor in HS_TYPE_CONSTRUCTORS:
        rest = text[len(constructor):]
        if text.startswith(constructor) and (not rest or rest[0].isspace() or rest[0] == "("):
            return constructor, rest
    parts = text.split(None, 1)
    return parts[0], parts[1] if len(parts) > 1 else ""


def parse_hs_type(token: str) -> HsTypeName:
    """
    Parse one type token such as `CInt`, `()`, `Ptr CChar` or `IO (Ptr Word8)`.

    Args:
        token: Type text, surrounding whitespace allowed

    Returns:
        HsTypeName rendering to its canonical Haskell name

    Raises:
        TypeTokenError: If the token is empty or not a supported type
    """
    text = token.strip()
    if not text:
        raise TypeTokenError("empty type, expected a Haskell C-FFI type")

    if "".join(text.split()) == UNIT_TYPE:
        return HsTypeName(UNIT_TYPE)

    if _wrapped_in_parens(text):
        return parse_hs_type(text[1:-1])

    head, rest = _split_application(text)
    if head in HS_TYPE_CONSTRUCTORS:
        if not rest.strip():
            raise TypeTokenError(f"type constructor `{head}` expects an argument")
        return HsTypeName(head, parse_hs_type(rest))

    if rest:
        raise TypeTokenError(f"type `{text}` is not a supported type application")

    if text not in HS_TYPE_TABLE:
        raise TypeTokenError(
            f"type `{text}` isn't in the list of supported Haskell C-FFI types"
        )
    return HsTypeName(HS_TYPE_TABLE[text])
