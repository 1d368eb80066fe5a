"""
Predicate Registry: the single authoritative verb table.

Every predicate is registered exactly once under ``(family, verb)``.
Legacy or shorthand spellings are registered as aliases that resolve to
the same definition, so there is never a second evaluator for the same
check.

Predicate modules register themselves with the ``@predicate`` decorator:

    @predicate(Family.FILE, "directory", Operand("path", OperandKind.PATH),
               help="Checks if a path is a directory (-d).", aliases=("dir",))
    def is_directory(path: str) -> bool:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from .domain import Family, Operand


@dataclass(frozen=True)
class PredicateDef:
    """
    Definition of one predicate.

    ``func`` receives the converted operands positionally, in declaration
    order, and returns a bool. ``diagnose`` (optional) receives the same
    operands and returns the advisory text to emit when ``func`` is False.
    """
    family: Family
    verb: str
    func: Callable[..., bool]
    operands: tuple[Operand, ...]
    help: str
    aliases: tuple[str, ...] = ()
    diagnose: Optional[Callable[..., Optional[str]]] = None


class RegistryError(Exception):
    """Raised when a verb is registered twice or looked up unknown."""
    pass


_PREDICATES: dict[tuple[Family, str], PredicateDef] = {}
_ALIASES: dict[tuple[Family, str], str] = {}


def register(definition: PredicateDef) -> PredicateDef:
    """Add a definition (and its aliases) to the verb table."""
    names = (definition.verb,) + definition.aliases
    for name in names:
        key = (definition.family, name)
        if key in _PREDICATES or key in _ALIASES:
            raise RegistryError(
                f"Verb '{name}' already registered for family '{definition.family.value}'"
            )

    _PREDICATES[(definition.family, definition.verb)] = definition
    for alias in definition.aliases:
        _ALIASES[(definition.family, alias)] = definition.verb
    return definition


def predicate(
    family: Family,
    verb: str,
    *operands: Operand,
    help: str,
    aliases: tuple[str, ...] = (),
    diagnose: Optional[Callable[..., Optional[str]]] = None,
) -> Callable[[Callable[..., bool]], Callable[..., bool]]:
    """Decorator registering a predicate function under ``family verb``."""

    def decorator(func: Callable[..., bool]) -> Callable[..., bool]:
        register(PredicateDef(
            family=family,
            verb=verb,
            func=func,
            operands=tuple(operands),
            help=help,
            aliases=tuple(aliases),
            diagnose=diagnose,
        ))
        return func

    return decorator


def canonical_verb(family: Family, verb: str) -> str:
    """Map an alias to its canonical verb (canonical verbs map to themselves)."""
    return _ALIASES.get((family, verb), verb)


def get_predicate(family: Family, verb: str) -> PredicateDef:
    """
    Look up a definition by family and verb or alias.

    Raises:
        RegistryError: If the verb is unknown for the family
    """
    key = (family, canonical_verb(family, verb))
    try:
        return _PREDICATES[key]
    except KeyError:
        raise RegistryError(
            f"Unknown predicate '{verb}' for family '{family.value}'"
        ) from None


def iter_predicates(family: Optional[Family] = None) -> Iterator[PredicateDef]:
    """Yield definitions in registration order, optionally for one family."""
    for definition in _PREDICATES.values():
        if family is None or definition.family is family:
            yield definition
