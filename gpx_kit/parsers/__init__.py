from .xml_node import XMLNode
from .base import TreeBuilder, decode_entities
from .factory import TreeBuilderFactory, DEFAULT_BUILDER
from .scanner import BufferScanner
from .event_builder import EventTreeBuilder

# Register the tree builders
TreeBuilderFactory.register_builder('scanner', BufferScanner)
TreeBuilderFactory.register_builder('events', EventTreeBuilder)

__all__ = [
    'XMLNode',
    'TreeBuilder',
    'decode_entities',
    'TreeBuilderFactory',
    'DEFAULT_BUILDER',
    'BufferScanner',
    'EventTreeBuilder',
]
