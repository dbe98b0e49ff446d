"""
File I/O utilities
"""

import logging
import os
from typing import Optional

from ..core.config import DEFAULT_OUTPUT_DIR

logger = logging.getLogger(__name__)


def save_module(source: str,
                module_name: str,
                output_dir: Optional[str] = None) -> str:
    """
    Save a generated Haskell module to disk.

    Args:
        source: Haskell source code
        module_name: Module name, used as the file stem
        output_dir: Target directory (default: HSBIND_OUTPUT_DIR or ./lib)

    Returns:
        Path of the written `.hs` file
    """
    directory = output_dir or os.getenv("HSBIND_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"{module_name}.hs")

    with open(path, "w", encoding="utf-8") as f:
        f.write(source)

    logger.info("Wrote module %s to %s", module_name, path)
    return path
