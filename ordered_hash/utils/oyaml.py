"""
YAML loading and dumping that preserves the order of mapping keys.

Regular ``dict``s already preserve insertion order, but they cannot express
order changes like moving a key to the front. This module loads every YAML
mapping as an `~ordered_hash.ordered_map.OrderedMap` (in the order in which
the keys appear in the document) and dumps `OrderedMap` instances as plain
YAML mappings in the order of the map::

    from ordered_hash.utils import oyaml

    config = oyaml.safe_load("b: 1\\na: 2\\n")
    config.unshift('c', 3)
    oyaml.safe_dump(config)  # -> "c: 3\\nb: 1\\na: 2\\n"

Only the "safe" subset of YAML is supported, so loading untrusted documents
cannot instantiate arbitrary Python objects. Dumped documents do not contain
any Python-specific tags and can be read by any YAML parser.

If a key appears more than once in the same mapping, the last value wins and
the key keeps the position of its first occurrence, just like in the
`OrderedMap` constructor. A warning is logged in this case.
"""

import logging
import typing

import yaml
import yaml.constructor
import yaml.resolver

from ordered_hash.ordered_map import OrderedMap
from ordered_hash.utils.synchronized import SynchronizedOrderedMap

logger = logging.getLogger(__name__)


class Loader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """
    Safe YAML loader that creates an `OrderedMap` for each mapping.
    """
    pass


class Dumper(yaml.SafeDumper):  # pylint: disable=too-many-ancestors
    """
    Safe YAML dumper that can represent `OrderedMap` instances.
    """
    pass


def _construct_ordered_map(loader, node):
    ordered_map = OrderedMap()
    # Yielding the (still empty) map first allows for recursive structures
    # (a mapping that contains an alias to itself).
    yield ordered_map
    if not isinstance(node, yaml.MappingNode):
        raise yaml.constructor.ConstructorError(
            None,
            None,
            f"expected a mapping node, but found {node.id}",
            node.start_mark)
    # Resolve merge keys ("<<") first.
    loader.flatten_mapping(node)
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node)
        try:
            hash(key)
        except TypeError as err:
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                f"found unhashable key ({err})",
                key_node.start_mark)
        value = loader.construct_object(value_node)
        if ordered_map.exists(key):
            logger.warning(
                "Duplicate key %r in mapping %s. The last value is used.",
                key,
                str(node.start_mark).strip())
        ordered_map.set(key, value)


def _represent_ordered_map(dumper, data):
    # Passing a list of pairs (instead of an object with an items() method)
    # ensures that the representer never sorts the keys.
    return dumper.represent_mapping(
        yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, data.as_list())


Loader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_ordered_map)
Dumper.add_multi_representer(OrderedMap, _represent_ordered_map)
Dumper.add_representer(SynchronizedOrderedMap, _represent_ordered_map)


def safe_load(stream: typing.Union[str, bytes, typing.IO]) -> typing.Any:
    """
    Parse the first YAML document in ``stream``.

    :param stream:
        string, bytes, or file-like object that contains the YAML document.
    :return:
        parsed data. Mappings are returned as `OrderedMap` instances, all
        other types are returned like ``yaml.safe_load`` returns them.
    """
    return yaml.load(stream, Loader=Loader)


def safe_load_all(
        stream: typing.Union[str, bytes, typing.IO]) -> typing.Iterator[
            typing.Any]:
    """
    Parse all YAML documents in ``stream``.

    This works like `safe_load`, but returns an iterator that yields one
    object per document.
    """
    return yaml.load_all(stream, Loader=Loader)


def safe_dump(
        data: typing.Any,
        stream: typing.Optional[typing.IO] = None,
        **kwargs) -> typing.Optional[str]:
    """
    Serialize ``data`` as YAML.

    `OrderedMap` (and `SynchronizedOrderedMap`) instances are written as
    regular YAML mappings, keeping the order of their keys. Regular ``dict``s
    are written in their insertion order as well, unless ``sort_keys=True`` is
    passed explicitly.

    :param data:
        object that shall be serialized.
    :param stream:
        file-like object to which the YAML document is written. If ``None``,
        the document is returned as a string.
    :param kwargs:
        additional keyword arguments that are passed to ``yaml.dump``. By
        default, the block style is used (``default_flow_style=False``) and
        keys are not sorted (``sort_keys=False``).
    :return:
        YAML document as a ``str`` if ``stream`` is ``None``, otherwise
        ``None``.
    """
    kwargs.setdefault("default_flow_style", False)
    kwargs.setdefault("sort_keys", False)
    return yaml.dump(data, stream, Dumper=Dumper, **kwargs)
