"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(skip_known_fallbacks=False)
    """

    # Treat a param already present in the fallback list like a bound param
    skip_known_fallbacks: bool = True

    # Reject route groups and parallel routes in pathnames parsed on our behalf
    normalized_routes: bool = True


DEFAULT_CONFIG = ResolverConfig()
