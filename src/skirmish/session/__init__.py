"""Session state and snapshot management.

Architecture Note:
    session/ is the stateful layer: it holds the two combatants and
    produces or applies GameState snapshots. Storing snapshots is the job
    of tracing/.
"""

from skirmish.session.models import GameState
from skirmish.session.session import MissingEntityError, Session

__all__ = [
    "GameState",
    "MissingEntityError",
    "Session",
]
