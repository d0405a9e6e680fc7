"""
Provides an ordered associative container.

`OrderedMap` associates keys with values like a ``dict``, but it keeps the keys
in an order that can be manipulated explicitly. New keys are appended when
they are stored with `~OrderedMap.set`, and `~OrderedMap.push` and
`~OrderedMap.unshift` move keys to the end or to the front of the map::

    ordered_map = OrderedMap('a', 1, 'b', 2)
    ordered_map.push('b', 20, 'c', 3)
    ordered_map.as_list()  # -> [('a', 1), ('b', 20), ('c', 3)]
    ordered_map.unshift('c', 30)
    ordered_map.keys()  # -> ['c', 'a', 'b']

Internally, the map consists of a ``dict`` (the lookup table) and a ``list``
of keys (the order). Lookups are as fast as for a regular ``dict``. Removing a
key (through `~OrderedMap.delete` or by moving an existing key with ``push`` or
``unshift``) has to search the key in the order list, so its cost grows
linearly with the number of keys.

Methods that take key-value pairs expect them as flat positional arguments,
alternating between keys and values. An odd number of arguments results in an
`~ordered_hash.utils.pairs.InvalidArgumentError`.

Missing keys are not an error: `~OrderedMap.get` and `~OrderedMap.delete`
return ``None`` (or a specified default) and `~OrderedMap.pop` and
`~OrderedMap.shift` return ``None`` when the map is empty. Only the subscript
forms ``ordered_map[key]`` and ``del ordered_map[key]`` raise a ``KeyError``,
like they do for any other mapping.

This class is not thread-safe. If an instance is supposed to be used from
multiple threads, wrap it in a
`~ordered_hash.utils.synchronized.SynchronizedOrderedMap`.
"""

import collections
import collections.abc
import typing

from ordered_hash.utils.pairs import distinct_keys, split_pairs

KeyT = typing.TypeVar("KeyT")
ValueT = typing.TypeVar("ValueT")


class OrderedMapIterator(typing.Generic[KeyT, ValueT]):  # pylint: disable=E1136
    """
    Cursor over the entries of an `OrderedMap`.

    The cursor works on a snapshot of the keys that is taken when it is
    created. Keys that are added to the map later are never visited. The
    values, on the other hand, are looked up when the cursor reaches the
    respective key, so a key that has been deleted in the meantime is returned
    with a value of ``None``.

    Instances are usually created through `OrderedMap.iterator`. They can be
    used in a ``for`` loop or advanced explicitly with `next_pair`::

        iterator = ordered_map.iterator()
        pair = iterator.next_pair()
        while pair is not None:
            key, value = pair
            ...
            pair = iterator.next_pair()
    """

    def __init__(
            self,
            keys: typing.Iterable[KeyT],
            lookup: typing.Callable[[KeyT], typing.Optional[ValueT]]):
        """
        Create a cursor.

        :param keys:
            keys that shall be visited (in order). The iterable is copied, so
            later changes to it do not affect the cursor.
        :param lookup:
            callable that returns the current value for a key, or ``None`` if
            the key does not exist any longer.
        """
        self._keys = collections.deque(keys)
        self._lookup = lookup

    def __iter__(self) -> "OrderedMapIterator[KeyT, ValueT]":
        return self

    def __next__(self) -> typing.Tuple[KeyT, typing.Optional[ValueT]]:
        try:
            key = self._keys.popleft()
        except IndexError:
            raise StopIteration from None
        return key, self._lookup(key)

    def next_pair(
            self) -> typing.Optional[typing.Tuple[KeyT, typing.Optional[ValueT]]]:
        """
        Return the next key-value pair or ``None`` if the cursor is exhausted.
        """
        return next(self, None)


class OrderedMap(typing.Generic[KeyT, ValueT]):  # pylint: disable=E1136
    """
    Map that keeps its keys in an explicitly controlled order.

    Keys must be hashable. The map itself is not hashable because it is
    mutable.
    """

    def __init__(self, *pairs: typing.Any):
        """
        Create a map from key-value pairs.

        If a key is repeated, the value of its last occurrence is stored, but
        the key keeps the position of its first occurrence.

        :param pairs:
            keys and values, alternating. If no pairs are given, the map is
            empty.
        :raise InvalidArgumentError:
            if an odd number of arguments is passed.
        """
        # The table and the order list are never replaced after this point.
        # Iterators hold a reference to the table, so all modifications have to
        # happen in place.
        self._table, self._order = distinct_keys(
            split_pairs(pairs, "OrderedMap()"))

    @classmethod
    def from_items(
            cls,
            items: typing.Union[
                typing.Mapping[KeyT, ValueT],
                typing.Iterable[typing.Tuple[KeyT, ValueT]]]
    ) -> "OrderedMap[KeyT, ValueT]":
        """
        Create a map from a mapping or from an iterable of pairs.

        This is the counterpart to `as_list`:
        ``OrderedMap.from_items(ordered_map.as_list())`` creates a map that
        is equal to ``ordered_map``.

        :param items:
            `OrderedMap` or other mapping (its items are used in its
            iteration order) or iterable of ``(key, value)`` tuples. Repeated
            keys are handled like in the regular constructor.
        :return:
            new map.
        """
        if isinstance(items, OrderedMap):
            items = items.as_list()
        elif isinstance(items, collections.abc.Mapping):
            items = items.items()
        table, order = distinct_keys(items)
        ordered_map = cls()
        ordered_map._table.update(table)
        ordered_map._order.extend(order)
        return ordered_map

    def as_list(self) -> typing.List[typing.Tuple[KeyT, ValueT]]:
        """
        Return the entries of this map as a list of ``(key, value)`` tuples.

        The list is a snapshot and is not updated when the map changes.
        """
        table = self._table
        return [(key, table[key]) for key in self._order]

    def clear(self) -> None:
        """
        Remove all entries from this map.
        """
        self._table.clear()
        self._order.clear()

    def clone(self) -> "OrderedMap[KeyT, ValueT]":
        """
        Create a shallow copy of this map.

        The copy has its own lookup table and key order, so adding, removing,
        or reordering entries in one of the two maps does not affect the other
        one. The values themselves are not copied: a mutable value that is
        modified in place is modified for both maps.

        :return:
            new map of the same type as this map.
        """
        clone = type(self)()
        clone._table.update(self._table)
        clone._order.extend(self._order)
        return clone

    copy = clone

    def delete(
            self,
            key: KeyT,
            default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        """
        Remove ``key`` and return its value.

        Removing a key has to search it in the order list, so this operation
        gets slower as the number of keys grows.

        :param key:
            key that shall be removed.
        :param default:
            value that is returned if ``key`` does not exist. In this case,
            the map is not modified.
        :return:
            value that was associated with ``key`` or ``default``.
        """
        if key not in self._table:
            return default
        self._order.remove(key)
        return self._table.pop(key)

    def exists(self, key: KeyT) -> bool:
        """
        Tell whether ``key`` exists in this map.
        """
        return key in self._table

    @typing.overload
    def get(self, key: KeyT) -> typing.Optional[ValueT]:
        ...

    @typing.overload
    def get(self, key: KeyT, default: ValueT) -> ValueT:
        ...

    @typing.overload
    def get(
        self, key: KeyT, default: typing.Optional[ValueT]
    ) -> typing.Optional[ValueT]:
        ...

    def get(
        self, key: KeyT, default: typing.Optional[ValueT] = None
    ) -> typing.Optional[ValueT]:
        """
        Return the value for ``key`` or ``default`` if the key does not exist.

        Unlike ``ordered_map[key]``, this method never raises a ``KeyError``.

        :param key:
            key that identifies the entry.
        :param default:
            value that is returned if ``key`` is not found.
        :return:
            value for ``key`` or ``default`` if ``key`` is not found.
        """
        return self._table.get(key, default)

    def is_empty(self) -> bool:
        """
        Tell whether this map has no entries.
        """
        return not self._order

    def items(self) -> typing.List[typing.Tuple[KeyT, ValueT]]:
        """
        Same as `as_list`.
        """
        return self.as_list()

    def iterator(self) -> OrderedMapIterator[KeyT, ValueT]:
        """
        Return a cursor over the current entries.

        The cursor visits the keys that exist when this method is called, in
        their current order. Reordering or extending the map afterwards does
        not affect the cursor. Values are looked up when the cursor reaches a
        key, so a value that is changed before that is returned with its new
        value and a key that is deleted before that is returned with a value
        of ``None``.

        The cursor does not keep a reference to this map object, only to its
        lookup table.

        :return:
            cursor yielding ``(key, value)`` tuples.
        """
        return OrderedMapIterator(self._order, self._table.get)

    def keys(self) -> typing.List[KeyT]:
        """
        Return the keys of this map in order.

        The returned list is a copy, so it is not affected by later changes to
        the map.
        """
        return list(self._order)

    def pop(self) -> typing.Optional[typing.Tuple[KeyT, ValueT]]:
        """
        Remove the last entry and return it as a ``(key, value)`` tuple.

        :return:
            the removed entry or ``None`` if the map is empty.
        """
        if not self._order:
            return None
        key = self._order.pop()
        return key, self._table.pop(key)

    def push(self, *pairs: typing.Any) -> int:
        """
        Add key-value pairs to the end of this map.

        The pairs are processed from left to right. A key that already exists
        is moved from its current position to the end and gets the new value.

        Example::

            ordered_map = OrderedMap('a', 1, 'b', 2)
            ordered_map.push('a', 10, 'c', 3)
            ordered_map.keys()  # -> ['b', 'a', 'c']

        :param pairs:
            keys and values, alternating.
        :return:
            number of keys after adding the pairs.
        :raise InvalidArgumentError:
            if an odd number of arguments is passed. The map is not modified
            in this case.
        """
        for key, value in split_pairs(pairs, "push()"):
            if key in self._table:
                self._order.remove(key)
                # Both structures have to store the key object that was
                # passed, even if it is only equal to the old one (1 == True).
                del self._table[key]
            self._order.append(key)
            self._table[key] = value
        return len(self._order)

    def set(self, key: KeyT, value: ValueT) -> ValueT:
        """
        Associate ``value`` with ``key`` and return ``value``.

        A new key is added at the end. If the key already exists, only its
        value is replaced and the key stays at its position. Use `push` for
        moving the key to the end.
        """
        if key not in self._table:
            self._order.append(key)
        self._table[key] = value
        return value

    def shift(self) -> typing.Optional[typing.Tuple[KeyT, ValueT]]:
        """
        Remove the first entry and return it as a ``(key, value)`` tuple.

        :return:
            the removed entry or ``None`` if the map is empty.
        """
        if not self._order:
            return None
        key = self._order.pop(0)
        return key, self._table.pop(key)

    def unshift(self, *pairs: typing.Any) -> int:
        """
        Add key-value pairs to the beginning of this map.

        After this operation, the pairs are at the front of the map in the
        order in which they were passed. A key that already exists is moved
        from its current position to the front and gets the new value.

        Example::

            ordered_map = OrderedMap('x', 1)
            ordered_map.unshift('y', 2, 'z', 3)
            ordered_map.keys()  # -> ['y', 'z', 'x']

        :param pairs:
            keys and values, alternating.
        :return:
            number of keys after adding the pairs.
        :raise InvalidArgumentError:
            if an odd number of arguments is passed. The map is not modified
            in this case.
        """
        # We insert the last pair first, so that the first pair ends up in
        # front.
        for key, value in reversed(split_pairs(pairs, "unshift()")):
            if key in self._table:
                self._order.remove(key)
                del self._table[key]
            self._order.insert(0, key)
            self._table[key] = value
        return len(self._order)

    def values(self) -> typing.List[ValueT]:
        """
        Return the values of this map in the order of their keys.
        """
        table = self._table
        return [table[key] for key in self._order]

    def __bool__(self) -> bool:
        return bool(self._order)

    def __contains__(self, key: KeyT) -> bool:
        return key in self._table

    def __copy__(self) -> "OrderedMap[KeyT, ValueT]":
        return self.clone()

    def __delitem__(self, key: KeyT) -> None:
        if key not in self._table:
            raise KeyError(key)
        self.delete(key)

    def __eq__(self, other: typing.Any) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self._order == other._order and self._table == other._table

    def __getitem__(self, key: KeyT) -> ValueT:
        return self._table[key]

    def __iter__(self) -> typing.Iterator[KeyT]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_list()!r})"

    def __setitem__(self, key: KeyT, value: ValueT) -> None:
        self.set(key, value)
