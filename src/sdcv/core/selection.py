"""Selection resolver — turn discovery results into a :class:`SelectionPlan`.

Two mutually exclusive branches:

* **Explicit selection** (``--use-dict``): every discovered dictionary not
  named is disabled, and the named ones are ordered as given on the
  command line.
* **Persisted preference** (ordering file): nothing is disabled; the
  listed dictionaries are simply moved to the front in file order.

In both branches a name that discovery did not find aborts resolution
with a :class:`~sdcv.exceptions.ConsistencyError` subclass.  No partial
plan is ever returned.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from sdcv.core.models import DiscoveryMap, SelectionPlan
from sdcv.exceptions import ConsistencyError, StaleOrderingError, UnknownDictionaryError


def _resolve_names(
    discovery: DiscoveryMap,
    names: Sequence[str],
    error_class: type[ConsistencyError],
    *,
    hint: str,
) -> tuple[Path, ...]:
    """Map *names* to descriptor paths, raising on the first miss."""
    paths: list[Path] = []
    for name in names:
        result = discovery.lookup(name)
        if not result.found:
            raise error_class(
                f"dictionary {name!r} was not found",
                bookname=name,
                hint=hint,
            )
        paths.append(result.descriptor_path)
    return tuple(paths)


def resolve_explicit(
    discovery: DiscoveryMap,
    explicit_names: Sequence[str],
) -> SelectionPlan:
    """Enable only *explicit_names*, in command-line order."""
    wanted = set(explicit_names)
    disabled = tuple(path for name, path in discovery.items() if name not in wanted)
    order = _resolve_names(
        discovery,
        explicit_names,
        UnknownDictionaryError,
        hint="Run 'sdcv --list-dicts' to see the available booknames.",
    )
    return SelectionPlan(order=order, disabled=disabled)


def resolve_persisted(
    discovery: DiscoveryMap,
    ordering: Sequence[str] | None,
) -> SelectionPlan:
    """Reorder by the ordering file; never disables anything."""
    if ordering is None:
        return SelectionPlan(order=(), disabled=())
    order = _resolve_names(
        discovery,
        ordering,
        StaleOrderingError,
        hint="Remove or fix the stale line in the ordering file.",
    )
    return SelectionPlan(order=order, disabled=())


def resolve_selection(
    discovery: DiscoveryMap,
    *,
    explicit_names: Sequence[str] | None = None,
    ordering: Sequence[str] | None = None,
) -> SelectionPlan:
    """Compute the activation plan.

    Parameters
    ----------
    discovery:
        Result of :func:`sdcv.core.discovery.discover`.
    explicit_names:
        Booknames passed with ``--use-dict``.  When non-empty, *ordering*
        is ignored.
    ordering:
        Lines of the ordering file, or ``None`` when it does not exist.

    Raises
    ------
    UnknownDictionaryError
        An explicit name was not discovered.
    StaleOrderingError
        An ordering-file line names a dictionary that was not discovered.
    """
    if explicit_names:
        return resolve_explicit(discovery, explicit_names)
    return resolve_persisted(discovery, ordering)
