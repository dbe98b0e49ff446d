"""
Data models for exported function signatures
"""

from dataclasses import dataclass
from typing import Any, List


@dataclass
class Signature:
    """
    Haskell-visible shape of one exported function:
    {name} :: {types[0]} -> {types[1]} -> ... -> {types[n-1]}

    The last entry of `types` is the return type, the others are the
    argument types in call order.
    """
    name: str
    types: List[Any]

    @property
    def arguments(self) -> List[Any]:
        return self.types[:-1]

    @property
    def return_type(self) -> Any:
        return self.types[-1]

    def type_signature(self) -> str:
        return " -> ".join(str(t) for t in self.types)

    def __str__(self) -> str:
        return f"{self.name} :: {self.type_signature()}"
