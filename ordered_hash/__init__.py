"""
Ordered associative container.

The `OrderedMap` class lives in `ordered_hash.ordered_map` and is also
available directly from this package::

    from ordered_hash import OrderedMap

    ordered_map = OrderedMap('a', 1, 'b', 2)

Utilities that build on it are provided by the modules in the
``ordered_hash.utils`` package:

`ordered_hash.utils.synchronized`
    thread-safe wrapper around an `OrderedMap`.

`ordered_hash.utils.oyaml`
    YAML loading and dumping that keeps the order of mapping keys.
"""

from ordered_hash.ordered_map import OrderedMap, OrderedMapIterator
from ordered_hash.utils.pairs import InvalidArgumentError
from ordered_hash.version import VERSION_STRING as __version__

__all__ = ["InvalidArgumentError", "OrderedMap", "OrderedMapIterator"]
