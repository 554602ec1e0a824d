from typing import Dict, List, Type

from .base import TreeBuilder

# Builder used when none is requested
DEFAULT_BUILDER = 'scanner'


class TreeBuilderFactory:
    """Factory for creating tree builders by name."""

    _builders: Dict[str, Type[TreeBuilder]] = {}

    @classmethod
    def register_builder(cls, name: str, builder_class: Type[TreeBuilder]) -> None:
        """
        Register a tree builder under a name.

        Args:
            name: Builder name (e.g., 'scanner', 'events')
            builder_class: Builder class to register
        """
        cls._builders[name] = builder_class

    @classmethod
    def get_builder(cls, name: str = DEFAULT_BUILDER) -> TreeBuilder:
        """
        Get a tree builder by name.

        Args:
            name: Builder name

        Returns:
            TreeBuilder instance

        Raises:
            ValueError: If no builder is registered under the name
        """
        builder_class = cls._builders.get(name)
        if builder_class is None:
            raise ValueError(f"No tree builder registered for name: {name}")
        return builder_class()

    @classmethod
    def get_supported_builders(cls) -> List[str]:
        """Get list of registered builder names."""
        return list(cls._builders.keys())
