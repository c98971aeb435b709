# shampoo/webapp.py
from __future__ import annotations

import uuid
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import RedirectResponse
from loguru import logger

from shampoo.errors import GameNotFinishedError, GameOverError, InvalidActionError
from shampoo.game import get_snapshot, had_chaos, init_game, on_game_end, submit_action
from shampoo.models import GameState

app = FastAPI(title="Shampoo Strategist")

# In-memory sessions, one play-through each. Nothing is persisted.
SESSIONS: Dict[str, GameState] = {}


def _get_session(sid: str) -> GameState:
    state = SESSIONS.get(sid)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Unknown game: {sid}")
    return state


@app.get("/")
def root(seed: Optional[int] = None):
    # create a session and redirect to it
    sid = str(uuid.uuid4())
    SESSIONS[sid] = init_game(seed=seed)
    return RedirectResponse(url=f"/game/{sid}", status_code=303)


@app.get("/game/{sid}")
def game_view(sid: str):
    state = SESSIONS.get(sid)
    if not state:
        return RedirectResponse(url="/", status_code=303)
    return {"sid": sid, "state": jsonable_encoder(get_snapshot(state))}


@app.post("/game/{sid}/play")
def play(sid: str, action: str = Form(...)):
    state = _get_session(sid)

    try:
        outcome = submit_action(state, action)
    except InvalidActionError as e:
        logger.warning("Rejected action for {}: {}", sid, e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    except GameOverError as e:
        logger.warning("Action after game over for {}", sid)
        raise HTTPException(status_code=409, detail=str(e)) from e

    # Only surface chaos the player should see as a toast
    chaos_message = ""
    if outcome.record is not None and had_chaos(outcome.record):
        chaos_message = outcome.record.chaos.message

    return {
        "sid": sid,
        "outcome": jsonable_encoder(outcome),
        "chaos_message": chaos_message,
        "state": jsonable_encoder(get_snapshot(state)),
    }


@app.get("/game/{sid}/result")
def result(sid: str):
    state = _get_session(sid)
    try:
        game_result = on_game_end(state)
    except GameNotFinishedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return {"sid": sid, "result": jsonable_encoder(game_result)}
