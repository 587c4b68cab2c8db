"""Conversion of a YAML event stream into a TreeNode tree.

The converter reads PyYAML parse events rather than constructed Python
objects, which lets it:

- resolve plain scalars with YAML 1.1 rules while keeping every quoted or
  block scalar a string (see ``resolver``);
- keep mapping keys in document order;
- report duplicate mapping keys instead of silently dropping them;
- hand each built node, together with the event it came from, to an
  optional hook (for source mapping or annotation).

Only the first document of a stream is converted.  An empty stream yields
``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import IO, TypeVar

import yaml
from yaml.events import (
    DocumentEndEvent,
    DocumentStartEvent,
    Event,
    MappingEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceEndEvent,
    SequenceStartEvent,
    StreamEndEvent,
    StreamStartEvent,
)

from json_rule_diff.errors import UnsupportedConstructError
from json_rule_diff.tree.nodes import TreeNode
from json_rule_diff.yaml_tree.resolver import resolve_plain_scalar

__all__ = ["DuplicateKeyCallback", "NodeBuiltHook", "YamlTreeConverter", "convert"]

logger = logging.getLogger(__name__)

DuplicateKeyCallback = Callable[[ScalarEvent], None]
NodeBuiltHook = Callable[[TreeNode, Event], TreeNode]

_E = TypeVar("_E", bound=Event)


class _Events:
    """One-event lookahead over a PyYAML event iterator."""

    def __init__(self, events: Iterator[Event]) -> None:
        self._events = events
        self._peeked: Event | None = None

    def peek(self) -> Event:
        if self._peeked is None:
            self._peeked = next(self._events)
        return self._peeked

    def take(self) -> Event:
        event = self.peek()
        self._peeked = None
        return event

    def expect(self, kind: type[_E]) -> _E:
        event = self.take()
        if not isinstance(event, kind):
            raise UnsupportedConstructError(type(event).__name__)
        return event


@dataclass
class YamlTreeConverter:
    """Builds a TreeNode tree from the events of one YAML document.

    Attributes:
        on_duplicate_key: Called with the key's scalar event each time a key
            repeats within one mapping.  Conversion continues and the later
            value replaces the earlier one; the key keeps its first position.
        on_node_built: Called with every node right after it is built and the
            event it was built from; the returned node is used in its place.
            Member values are passed once more with their key's event, and
            that return value is ignored.

    Example::

        converter = YamlTreeConverter(on_duplicate_key=lambda e: print(e.value))
        tree = converter.convert("a: 1\\nb: [x, 'y']\\na: 2\\n")
        # prints "a"; tree is {"a": 2, "b": ["x", "y"]}
    """

    on_duplicate_key: DuplicateKeyCallback | None = None
    on_node_built: NodeBuiltHook | None = None

    def convert(self, stream: str | IO[str]) -> TreeNode | None:
        """Convert the first document of ``stream``.

        Args:
            stream: YAML text, or a readable text stream.

        Returns:
            The document's tree, or None when the stream holds no document.

        Raises:
            UnsupportedConstructError: On aliases, non-scalar mapping keys,
                or any other event the tree model cannot represent.
            yaml.YAMLError: When the input is not well-formed YAML.
        """
        events = _Events(iter(yaml.parse(stream, Loader=yaml.SafeLoader)))
        events.expect(StreamStartEvent)
        if isinstance(events.peek(), StreamEndEvent):
            return None

        events.expect(DocumentStartEvent)
        result = self._convert_node(events)
        events.expect(DocumentEndEvent)
        return result

    # ------------------------------------------------------------------
    # Recursive conversion
    # ------------------------------------------------------------------

    def _built(self, node: TreeNode, event: Event) -> TreeNode:
        if self.on_node_built is None:
            return node
        return self.on_node_built(node, event)

    def _convert_node(self, events: _Events) -> TreeNode:
        event = events.take()

        if isinstance(event, ScalarEvent):
            # PyYAML reports plain scalars with style None
            if event.style is None:
                return self._built(resolve_plain_scalar(event.value), event)
            return self._built(TreeNode.string(event.value), event)

        if isinstance(event, SequenceStartEvent):
            elements: list[TreeNode] = []
            while not isinstance(events.peek(), SequenceEndEvent):
                elements.append(self._convert_node(events))
            events.take()
            return self._built(TreeNode.array_of(elements), event)

        if isinstance(event, MappingStartEvent):
            return self._built(self._convert_mapping(events), event)

        raise UnsupportedConstructError(type(event).__name__)

    def _convert_mapping(self, events: _Events) -> TreeNode:
        members: dict[str, TreeNode] = {}
        while not isinstance(events.peek(), MappingEndEvent):
            key = events.expect(ScalarEvent)

            if key.value in members:
                logger.debug(
                    "duplicate key %r at line %d", key.value, key.start_mark.line + 1
                )
                if self.on_duplicate_key is not None:
                    self.on_duplicate_key(key)

            value = self._convert_node(events)
            if self.on_node_built is not None:
                # Key-event call; its result is discarded
                self.on_node_built(value, key)
            members[key.value] = value
        events.take()
        return TreeNode.object_of(members)


def convert(
    stream: str | IO[str],
    on_duplicate_key: DuplicateKeyCallback | None = None,
    on_node_built: NodeBuiltHook | None = None,
) -> TreeNode | None:
    """Convert the first YAML document in ``stream`` to a TreeNode tree.

    See ``YamlTreeConverter`` for the callback contracts.
    """
    converter = YamlTreeConverter(
        on_duplicate_key=on_duplicate_key, on_node_built=on_node_built
    )
    return converter.convert(stream)
