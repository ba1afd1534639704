"""FastAPI dependencies for the Whisker API.

Provides:
- Shared, stateless converter and scaling engine
- The in-memory scaling session store
- Session lookup (404 on unknown id)
"""

from fastapi import Depends, HTTPException

from .services.scaling import ScalingEngine, ScalingState
from .services.sessions import ScalingSessionStore
from .services.unit_conversion import UnitConverter
from .settings import settings

_converter = UnitConverter()
_engine = ScalingEngine()
_session_store = ScalingSessionStore(max_sessions=settings.max_scaling_sessions, engine=_engine)


def get_converter() -> UnitConverter:
    return _converter


def get_engine() -> ScalingEngine:
    return _engine


def get_session_store() -> ScalingSessionStore:
    return _session_store


def get_session(
    session_id: str,
    store: ScalingSessionStore = Depends(get_session_store),
) -> ScalingState:
    state = store.get(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Scaling session not found")
    return state
