"""
Router for recipe scaling.

Stateless endpoints scale or render a list of ingredient lines in one call.
Session endpoints keep a ScalingState per editing session so the client can
switch between presets and custom scaling without resending its baseline.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from ..deps import get_converter, get_engine, get_session, get_session_store
from ..schemas import (
    FactorRequest,
    FactorResponse,
    IngredientsResponse,
    PresetsResponse,
    RenderRequest,
    ScaleRequest,
    ScalingSessionOut,
    SessionCreate,
    SessionCustomScaling,
    SessionFactorUpdate,
    SessionIngredientsUpdate,
)
from ..services.scaling import ScalingEngine, ScalingState, render_ingredients
from ..services.sessions import ScalingSessionStore
from ..services.unit_conversion import UnitConverter
from ..settings import settings

router = APIRouter()


def _session_out(session_id: str, state: ScalingState) -> ScalingSessionOut:
    return ScalingSessionOut(id=session_id, **state.snapshot().model_dump())


@router.get("/presets", response_model=PresetsResponse)
def get_presets():
    return PresetsResponse(presets=settings.scale_presets)


@router.post("/scale", response_model=IngredientsResponse)
def scale(req: ScaleRequest, engine: ScalingEngine = Depends(get_engine)):
    return IngredientsResponse(ingredients=engine.scale_many(req.ingredients, req.factor))


@router.post("/factor", response_model=FactorResponse)
def derive_factor(req: FactorRequest, engine: ScalingEngine = Depends(get_engine)):
    """Factor that brings the first quantity of `ingredient` to `target_value`."""
    factor = engine.factor_from_target(req.ingredient, req.target_value)
    if factor is None:
        raise HTTPException(status_code=400, detail="No measurement found to scale from")
    return FactorResponse(factor=factor)


@router.post("/render", response_model=IngredientsResponse)
def render(
    req: RenderRequest,
    converter: UnitConverter = Depends(get_converter),
    engine: ScalingEngine = Depends(get_engine),
):
    lines = render_ingredients(
        req.ingredients,
        factor=req.factor,
        target_system=req.target_system,
        converter=converter,
        engine=engine,
    )
    return IngredientsResponse(ingredients=lines)


# --- Sessions ---

@router.post("/sessions", response_model=ScalingSessionOut, status_code=201)
def create_session(
    req: SessionCreate,
    store: ScalingSessionStore = Depends(get_session_store),
):
    session_id, state = store.create(req.ingredients)
    return _session_out(session_id, state)


@router.get("/sessions/{session_id}", response_model=ScalingSessionOut)
def get_scaling_session(session_id: str, state: ScalingState = Depends(get_session)):
    return _session_out(session_id, state)


@router.put("/sessions/{session_id}/ingredients", response_model=ScalingSessionOut)
def replace_ingredients(
    session_id: str,
    req: SessionIngredientsUpdate,
    state: ScalingState = Depends(get_session),
):
    state.set_original(req.ingredients)
    return _session_out(session_id, state)


@router.post("/sessions/{session_id}/factor", response_model=ScalingSessionOut)
def apply_factor(
    session_id: str,
    req: SessionFactorUpdate,
    state: ScalingState = Depends(get_session),
):
    state.apply_factor(req.factor)
    return _session_out(session_id, state)


@router.post("/sessions/{session_id}/custom", response_model=ScalingSessionOut)
def apply_custom_scaling(
    session_id: str,
    req: SessionCustomScaling,
    state: ScalingState = Depends(get_session),
):
    """
    Scale the whole list so one ingredient reaches a target quantity.
    A bad index or a line without a quantity leaves the session unchanged.
    """
    state.apply_custom_scaling(req.index, req.target_value)
    return _session_out(session_id, state)


@router.post("/sessions/{session_id}/reset", response_model=ScalingSessionOut)
def reset_session(session_id: str, state: ScalingState = Depends(get_session)):
    state.reset()
    return _session_out(session_id, state)


@router.delete("/sessions/{session_id}", status_code=204)
def delete_session(
    session_id: str,
    store: ScalingSessionStore = Depends(get_session_store),
):
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="Scaling session not found")
    return Response(status_code=204)
