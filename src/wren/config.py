"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, shared by
every match on the router that owns it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(placeholder="<{name}>", log_matches=True)
    """

    # Printing — ``{name}`` is replaced by the capture's matcher name
    placeholder: str = ":{name}"

    # Logging — emit a debug record for every match outcome
    log_matches: bool = False

    def render_placeholder(self, name: str) -> str:
        """Render the placeholder for a capture called *name*."""
        return self.placeholder.replace("{name}", name)


DEFAULT_CONFIG = RouterConfig()
