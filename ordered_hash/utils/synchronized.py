"""
Thread-safe wrapper for `~ordered_hash.ordered_map.OrderedMap`.

`OrderedMap` does not do any locking itself. Code that shares a map between
threads can wrap it in a `SynchronizedOrderedMap`, which protects each
operation with a lock. Each call is atomic, but a sequence of calls is not, so
code like ::

    if not synchronized_map.exists(key):
        synchronized_map.set(key, value)

can still race with other threads.
"""

import threading
import typing

from ordered_hash.ordered_map import OrderedMap, OrderedMapIterator

KeyT = typing.TypeVar("KeyT")
ValueT = typing.TypeVar("ValueT")


class SynchronizedOrderedMap(typing.Generic[KeyT, ValueT]):  # pylint: disable=E1136
    """
    Wrapper around an `OrderedMap` that makes it thread-safe.
    """

    def __init__(
            self,
            backing_map: typing.Optional[OrderedMap[KeyT, ValueT]] = None,
            lock: typing.Optional[typing.ContextManager] = None):
        """
        Wrap a map with a lock that protects all operations so that the map can
        safely be used from multiple threads.

        :param backing_map:
            map instance that actually stores the data. If ``None``, a new,
            empty `OrderedMap` is used. The backing map must not be used
            directly while it is wrapped.
        :param lock:
            lock that is used for protecting the map. If ``None`` (the
            default), a new ``threading.Lock`` is created. Passing a
            ``threading.RLock`` allows the wrapper to share a lock with other
            code that may already hold it.
        """
        if backing_map is None:
            backing_map = OrderedMap()
        if lock is None:
            lock = threading.Lock()
        self._backing_map = backing_map
        self._lock = lock

    def as_list(self) -> typing.List[typing.Tuple[KeyT, ValueT]]:
        with self._lock:
            return self._backing_map.as_list()

    def clear(self) -> None:
        with self._lock:
            self._backing_map.clear()

    def clone(self) -> "SynchronizedOrderedMap[KeyT, ValueT]":
        """
        Return a new wrapper around a shallow copy of the backing map.

        The copy gets its own lock.
        """
        with self._lock:
            backing_clone = self._backing_map.clone()
        return SynchronizedOrderedMap(backing_clone)

    def delete(
            self,
            key: KeyT,
            default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        with self._lock:
            return self._backing_map.delete(key, default)

    def exists(self, key: KeyT) -> bool:
        with self._lock:
            return self._backing_map.exists(key)

    def get(
            self,
            key: KeyT,
            default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        with self._lock:
            return self._backing_map.get(key, default)

    def is_empty(self) -> bool:
        with self._lock:
            return self._backing_map.is_empty()

    def iterator(self) -> OrderedMapIterator[KeyT, ValueT]:
        """
        Return a cursor over the current entries.

        The keys are captured while holding the lock. Each value is looked up
        through `get`, so it is read under the lock as well.
        """
        with self._lock:
            keys = self._backing_map.keys()
        return OrderedMapIterator(keys, self.get)

    def keys(self) -> typing.List[KeyT]:
        with self._lock:
            return self._backing_map.keys()

    def pop(self) -> typing.Optional[typing.Tuple[KeyT, ValueT]]:
        with self._lock:
            return self._backing_map.pop()

    def push(self, *pairs: typing.Any) -> int:
        with self._lock:
            return self._backing_map.push(*pairs)

    def set(self, key: KeyT, value: ValueT) -> ValueT:
        with self._lock:
            return self._backing_map.set(key, value)

    def shift(self) -> typing.Optional[typing.Tuple[KeyT, ValueT]]:
        with self._lock:
            return self._backing_map.shift()

    def unshift(self, *pairs: typing.Any) -> int:
        with self._lock:
            return self._backing_map.unshift(*pairs)

    def values(self) -> typing.List[ValueT]:
        with self._lock:
            return self._backing_map.values()

    def __bool__(self) -> bool:
        with self._lock:
            return bool(self._backing_map)

    def __contains__(self, key: KeyT) -> bool:
        with self._lock:
            return key in self._backing_map

    def __delitem__(self, key: KeyT) -> None:
        with self._lock:
            del self._backing_map[key]

    def __getitem__(self, key: KeyT) -> ValueT:
        with self._lock:
            return self._backing_map[key]

    def __iter__(self) -> typing.Iterator[KeyT]:
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._backing_map)

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}({self._backing_map!r})"

    def __setitem__(self, key: KeyT, value: ValueT) -> None:
        with self._lock:
            self._backing_map[key] = value
