"""BaseService — abstract foundation for issuelink services.

Every service receives the ``[link]`` configuration and a
:class:`GitReader` at construction time, plus an optional plugin
manager for post-resolution hooks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from issuelink.config.models import LinkConfig
    from issuelink.infrastructure.git import GitReader
    from issuelink.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes."""

    def __init__(
        self,
        config: LinkConfig,
        git: GitReader,
        plugins: PluginManager | None = None,
    ) -> None:
        self._config = config
        self._git = git
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
