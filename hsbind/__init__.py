"""
hsbind: Haskell FFI binding generator from compact type signatures
"""

from .core.models import Signature
from .core.errors import SignatureError, MissingSig, MalformedSig, HsType
from .core.pipeline import generate
from .generators.haskell import render_module
from .parser import SignatureParser, parse_signature, parse_signatures

__version__ = "0.1.0"
__all__ = [
    "generate",
    "parse_signature",
    "parse_signatures",
    "render_module",
    "Signature",
    "SignatureParser",
    "SignatureError",
    "MissingSig",
    "MalformedSig",
    "HsType",
]
