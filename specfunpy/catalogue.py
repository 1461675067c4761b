"""Name-based lookup of every public special function.

The batch evaluator and the CLI resolve functions by their catalogue name.
"""

from __future__ import annotations

from specfunpy import special
from specfunpy.dispatch import SpecialFunction
from specfunpy.sequences import ExplicitCountSequence, SelfSizedSequence

Entry = SpecialFunction | ExplicitCountSequence | SelfSizedSequence

CATALOGUE: dict[str, Entry] = {
    entry.name: entry
    for entry in (getattr(special, name) for name in dir(special))
    if isinstance(entry, (SpecialFunction, ExplicitCountSequence, SelfSizedSequence))
}


def get_function(name: str) -> Entry:
    """Return the catalogue entry called ``name``.

    Raises
    ------
    KeyError
        If no function of that name exists.
    """
    try:
        return CATALOGUE[name]
    except KeyError:
        raise KeyError(
            f"Unknown special function {name!r}; see specfunpy.catalogue.names()"
        ) from None


def names() -> list[str]:
    return sorted(CATALOGUE)
