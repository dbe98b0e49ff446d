"""
Main generation pipeline
"""

import logging
from typing import Dict, Iterable, Optional

from .errors import SignatureError
from ..generators.haskell import render_module
from ..parser import SignatureParser, TypeTokenParser
from ..utils.files import save_module

logger = logging.getLogger(__name__)


def generate(module_name: str,
             raw_signatures: Iterable[str],
             parse_type_token: Optional[TypeTokenParser] = None,
             skip_invalid: bool = False,
             save: bool = False,
             output_dir: Optional[str] = None) -> Dict:
    """
    Generate a Haskell FFI binding module from raw signature lines.

    Args:
        module_name: Haskell module name
        raw_signatures: Lines like "add :: Int -> Int -> Int", in export order
        parse_type_token: Optional custom type-token parser
        skip_invalid: Skip lines that fail to parse instead of raising
        save: Whether to write `{module_name}.hs`
        output_dir: Directory for the written file

    Returns:
        Dict with:
            - source: Haskell source code
            - signatures: List of parsed Signature objects
            - errors: List of (line, message) for skipped lines
            - path: Path of the written file (None unless save=True)

    Raises:
        SignatureError: On the first invalid line, unless skip_invalid
    """
    parser = SignatureParser(parse_type_token)
    signatures = []
    errors = []

    for line in raw_signatures:
        try:
            signatures.append(parser.parse(line))
        except SignatureError as e:
            if not skip_invalid:
                raise
            logger.warning("Skipping signature %r: %s", line, e)
            errors.append((line, str(e)))

    source = render_module(module_name, signatures)
    logger.debug("Rendered module %s with %d bindings", module_name, len(signatures))

    result = {
        "source": source,
        "signatures": signatures,
        "errors": errors,
        "path": None,
    }

    if save:
        result["path"] = save_module(source, module_name, output_dir)

    return result
