"""
Plugin registry for managing hatching strategies.
"""

from typing import Dict, Type, Optional, List
from .base import HatchingPlugin, HatchingStrategy


class HatchingRegistry:
    """
    Registry for managing hatching plugins.

    This singleton class maps each hatching strategy to the plugin class
    that implements it.
    """

    _instance = None
    _plugins: Dict[HatchingStrategy, Type[HatchingPlugin]] = {}

    def __new__(cls):
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super(HatchingRegistry, cls).__new__(cls)
            cls._instance._plugins = {}
        return cls._instance

    def register(self, strategy: HatchingStrategy, plugin_class: Type[HatchingPlugin]) -> None:
        """
        Register a hatching plugin.

        Args:
            strategy: The hatching strategy enum value
            plugin_class: The plugin class (not instance) to register

        Raises:
            TypeError: If plugin_class is not a subclass of HatchingPlugin
        """
        if not isinstance(plugin_class, type) or not issubclass(plugin_class, HatchingPlugin):
            name = getattr(plugin_class, "__name__", repr(plugin_class))
            raise TypeError(f"{name} must be a subclass of HatchingPlugin")

        self._plugins[strategy] = plugin_class

    def unregister(self, strategy: HatchingStrategy) -> None:
        """Unregister a hatching plugin, if present."""
        self._plugins.pop(strategy, None)

    def get_plugin(self, strategy: HatchingStrategy) -> Optional[HatchingPlugin]:
        """
        Get an instance of a registered plugin.

        Args:
            strategy: The hatching strategy to retrieve

        Returns:
            Instance of the plugin, or None if not found
        """
        plugin_class = self._plugins.get(strategy)
        if plugin_class:
            return plugin_class()
        return None

    def list_strategies(self) -> List[HatchingStrategy]:
        """List all registered hatching strategies."""
        return list(self._plugins.keys())

    def is_registered(self, strategy: HatchingStrategy) -> bool:
        return strategy in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, strategy: HatchingStrategy) -> bool:
        return strategy in self._plugins


# Global registry instance
registry = HatchingRegistry()
