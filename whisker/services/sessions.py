"""
In-memory registry of scaling sessions.

One ScalingState per recipe-editing session. Nothing here is persisted; the
oldest session is evicted once the store is full.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional, Sequence, Tuple

from .scaling import ScalingEngine, ScalingState

logger = logging.getLogger("whisker.sessions")


class ScalingSessionStore:
    def __init__(self, max_sessions: int = 1000, engine: Optional[ScalingEngine] = None):
        self.max_sessions = max_sessions
        self._engine = engine or ScalingEngine()
        self._sessions: "OrderedDict[str, ScalingState]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self, ingredients: Sequence[str]) -> Tuple[str, ScalingState]:
        session_id = str(uuid.uuid4())
        state = ScalingState(ingredients, engine=self._engine)
        with self._lock:
            self._sessions[session_id] = state
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info(f"Evicted scaling session {evicted}")
        return session_id, state

    def get(self, session_id: str) -> Optional[ScalingState]:
        with self._lock:
            state = self._sessions.get(session_id)
            if state is not None:
                self._sessions.move_to_end(session_id)
            return state

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self):
        with self._lock:
            return len(self._sessions)
