from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional
from .tokens import SourceLocation


@dataclass
class Symbol:
    name: str
    value: Any
    location: Optional[SourceLocation] = None


class Environment:
    """Flat name -> backend value table for one compilation session.

    Only the ``set`` form writes to it. Rebinding a name replaces the old
    symbol. Every Session creates its own instance.
    """

    def __init__(self):
        self._symbols: Dict[str, Symbol] = {}

    def bind(self, name: str, value: Any, location: Optional[SourceLocation] = None) -> Symbol:
        symbol = Symbol(name, value, location)
        self._symbols[name] = symbol
        return symbol

    def lookup(self, name: str) -> Optional[Any]:
        symbol = self._symbols.get(name)
        return symbol.value if symbol is not None else None

    def get_symbol(self, name: str) -> Optional[Symbol]:
        return self._symbols.get(name)

    def snapshot(self) -> Dict[str, Any]:
        return {name: sym.value for name, sym in self._symbols.items()}

    def clear(self):
        self._symbols.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))
