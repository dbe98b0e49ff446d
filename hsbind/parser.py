"""
Parser for the compact Haskell signature notation `NAME :: T1 -> ... -> Tn`.
"""

from typing import Any, Callable, Iterable, List, Optional

from hsbind.core.errors import HsType, MalformedSig, MissingSig
from hsbind.core.models import Signature
from hsbind.translators.types import parse_hs_type

SIG_SEPARATOR = "::"
ARROW = "->"

TypeTokenParser = Callable[[str], Any]


class SignatureParser:
    """Parse raw signature lines into Signature objects"""

    def __init__(self, parse_type_token: Optional[TypeTokenParser] = None):
        """
        Args:
            parse_type_token: Callable turning one type token into a type
                descriptor, raising ValueError or LookupError (e.g. a
                `dict.__getitem__` table) on unknown tokens. Defaults to
                the built-in Haskell C-FFI type table.
        """
        self.parse_type_token = parse_type_token or parse_hs_type

    def parse(self, raw: str) -> Signature:
        """
        Parse one signature line.

        Args:
            raw: Signature text, e.g. "add :: Int -> Int -> Int"

        Returns:
            Signature with its types in left-to-right order

        Raises:
            MissingSig: If there is no `::` separator
            MalformedSig: If the name or the type chain is missing, if the
                name contains `->`, or if `::` occurs more than once
            HsType: If a type token is rejected (first failure wins)
        """
        parts = raw.split(SIG_SEPARATOR)
        if len(parts) == 1:
            raise MissingSig()

        name = parts[0].strip()
        if len(parts) > 2 or not name or ARROW in name or not parts[1].strip():
            raise MalformedSig(raw)

        types = []
        for token in parts[1].split(ARROW):
            try:
                types.append(self.parse_type_token(token.strip()))
            except (ValueError, LookupError) as e:
                raise HsType(str(e)) from e

        return Signature(name=name, types=types)

    def parse_many(self, lines: Iterable[str]) -> List[Signature]:
        """Parse every line, stopping at the first failure"""
        return [self.parse(line) for line in lines]


def parse_signature(raw: str,
                    parse_type_token: Optional[TypeTokenParser] = None) -> Signature:
    """Parse one signature line with an optional custom type-token parser"""
    return SignatureParser(parse_type_token).parse(raw)


def parse_signatures(lines: Iterable[str],
                     parse_type_token: Optional[TypeTokenParser] = None) -> List[Signature]:
    """Parse signature lines in order, raising on the first invalid one"""
    return SignatureParser(parse_type_token).parse_many(lines)
