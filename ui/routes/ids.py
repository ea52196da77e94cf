"""ID issuance and inspection routes."""

from fastapi import APIRouter, HTTPException, Query

from ident.parser import parse
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["ids"])

# These will be set by app.py
_generator = None
_config = None


def init(generator, config):
    """Initialize with generator and generator/server config references."""
    global _generator, _config
    _generator = generator
    _config = config


@router.post("/ids")
async def issue(hidden: bool | None = None, count: int = Query(1, ge=1)):
    """Issue one or more IDs. hidden defaults to the configured mode."""
    if count > _config.server.max_batch:
        raise HTTPException(status_code=422, detail=f"count exceeds {_config.server.max_batch}")
    if hidden is None:
        hidden = _config.generator.hidden
    return {
        "timestamp": format_timestamp(),
        "hidden": hidden,
        "ids": [_generator.generate(hidden) for _ in range(count)],
    }


@router.get("/ids/{id}")
async def inspect(id: str):
    """Parse an ID into its timestamp, hidden flag and random fragment."""
    return {"id": id, **parse(id).to_dict()}
