"""Dictionary discovery — build the bookname → descriptor mapping.

Scanning and parsing are delegated to a *scanner* callable (the CLI
passes :func:`sdcv.infra.ifo.scan_descriptors`) so this module stays free
of filesystem access.

Precedence
----------
Descriptors are merged in the order the scanner yields them.  When two
descriptors share a bookname the later one replaces the earlier one, so
a directory scanned later overrides a directory scanned earlier.  With
the default directory set the system data directory therefore wins over
the per-user directory.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from sdcv.core.models import DictionaryDescriptor, DiscoveryMap

logger = logging.getLogger(__name__)

DescriptorScanner = Callable[[Sequence[Path]], Iterable[DictionaryDescriptor]]


def merge_descriptors(descriptors: Iterable[DictionaryDescriptor]) -> DiscoveryMap:
    """Fold *descriptors* into a :class:`DiscoveryMap`, later entries winning."""
    discovery = DiscoveryMap()
    for descriptor in descriptors:
        if descriptor.bookname in discovery:
            logger.debug(
                "Dictionary %r at %s overrides an earlier copy",
                descriptor.bookname,
                descriptor.descriptor_path,
            )
        discovery.add(descriptor)
    return discovery


def discover(
    directories: Sequence[Path],
    scanner: DescriptorScanner,
) -> DiscoveryMap:
    """Scan *directories* in order and return the merged discovery map."""
    discovery = merge_descriptors(scanner(directories))
    logger.debug("Discovered %d dictionaries", len(discovery))
    return discovery
