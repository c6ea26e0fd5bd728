from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator

from calcparse.extra.types import Function
from calcparse.vars import BUILTIN_FUNCTIONS


class Registry:
    """
    Read-only table of operators and routines, keyed by (identifier, arity)
    :param functions: functions to register
    :raises ValueError: duplicated (identifier, arity) pair or arity below 1
    """
    def __init__(self, functions: Iterable[Function]):
        self._functions = tuple(functions)
        table: dict[tuple[str, int], Function] = {}
        arities: dict[str, list[int]] = {}
        for func in self._functions:
            if func.arity < 1:
                raise ValueError(f"'{func.identifier}': arity must be positive, got {func.arity}")
            key = (func.identifier, func.arity)
            if key in table:
                raise ValueError(f"'{func.identifier}' with {func.arity} argument(s) is already registered")
            table[key] = func
            arities.setdefault(func.identifier, []).append(func.arity)

        self._table = MappingProxyType(table)
        self._arities = MappingProxyType({k: tuple(sorted(v)) for k, v in arities.items()})
        self._identifiers = frozenset(arities)

    def lookup(self, identifier: str, arity: int) -> Function | None:
        """
        Finds the function with exactly this name and argument count
        :return: Function or None if nothing is registered
        """
        return self._table.get((identifier, arity))

    def all_identifiers(self) -> frozenset[str]:
        return self._identifiers

    def arities(self, identifier: str) -> tuple[int, ...]:
        return self._arities.get(identifier, ())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._identifiers

    def __iter__(self) -> Iterator[Function]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)


@lru_cache(maxsize=None)
def default_registry() -> Registry:
    """
    Process-wide registry of the built-in operators and routines, built on first use
    """
    return Registry(BUILTIN_FUNCTIONS)
