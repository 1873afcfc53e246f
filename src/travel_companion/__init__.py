"""Travel Companion - group coordination gateway.

Trip participants form groups, invite or join members and exchange
messages within a group.
"""

__version__ = "0.1.0"

from travel_companion.infrastructure.api.app import app

__all__ = ["app", "__version__"]
