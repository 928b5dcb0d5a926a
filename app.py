# app.py
# Thin FastAPI server: exposes the attack-line table, the starting variants
# and the search results of each variant as JSON. The search itself lives in
# bitboard_queens; this module only marshals results into response models.

from __future__ import annotations
from functools import lru_cache
from typing import List, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bitboard_queens import (
    VARIANTS,
    attack_lines,
    algebraic_squares,
    board_rows,
    get_variant,
    line_kind,
    placement_fen,
    solve,
    symmetry_classes,
)

# -----------------------
# Configuration
# -----------------------

HOST = "127.0.0.1"
PORT = 8000

# -----------------------
# Response schemas
# -----------------------

class LineOut(BaseModel):
    index: int
    kind: str
    mask: str
    rows: List[str]

class VariantOut(BaseModel):
    index: int
    name: str
    mask: str
    description: str
    expected_calls: int
    expected_solutions: int
    rows: List[str]

class SolutionOut(BaseModel):
    number: int
    mask: str
    squares: List[str]
    fen: str
    rows: List[str]

class SolveResponse(BaseModel):
    status: str
    variant: int
    calls: int
    solution_count: int
    symmetry_classes: int
    solutions: Optional[List[SolutionOut]] = None


def hex_mask(board: int) -> str:
    return f"0x{board:016X}"


@lru_cache(maxsize=None)
def solve_variant(index: int) -> SolveResponse:
    """Runs the search for one variant; results are cached per process."""
    variant = get_variant(index)
    run = solve(variant.board, lines=attack_lines())
    solutions = [
        SolutionOut(
            number=n,
            mask=hex_mask(board),
            squares=algebraic_squares(board),
            fen=placement_fen(board),
            rows=board_rows(board),
        )
        for n, board in enumerate(run.solutions, start=1)
    ]
    print(f"[Search] variant {index}: {run.calls} calls, {run.solution_count} solutions")
    return SolveResponse(
        status="ok",
        variant=index,
        calls=run.calls,
        solution_count=run.solution_count,
        symmetry_classes=len(symmetry_classes(run.solutions)),
        solutions=solutions,
    )

# -----------------------
# App setup
# -----------------------

app = FastAPI(title="Bitboard Queens", version="0.1.0")

@app.get("/healthz")
def healthz():
    return {"ok": True}

@app.get("/lines", response_model=List[LineOut])
def lines():
    return [
        LineOut(index=k, kind=line_kind(k), mask=hex_mask(line), rows=board_rows(line))
        for k, line in enumerate(attack_lines())
    ]

@app.get("/variants", response_model=List[VariantOut])
def variants():
    return [
        VariantOut(
            index=v.index,
            name=v.name,
            mask=hex_mask(v.board),
            description=v.description,
            expected_calls=v.expected_calls,
            expected_solutions=v.expected_solutions,
            rows=board_rows(v.board),
        )
        for v in VARIANTS
    ]

# -----------------------
# Endpoint
# -----------------------

@app.get("/solve/{variant}", response_model=SolveResponse)
def solve_endpoint(variant: int):
    # Validate variant index
    if not 0 <= variant < len(VARIANTS):
        return JSONResponse(
            status_code=400,
            content={
                "status": "bad_request",
                "message": f"variant must be one of: {', '.join(str(v.index) for v in VARIANTS)}",
            },
        )
    return solve_variant(variant)

# Optional: run via `python app.py`
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host=HOST, port=PORT, reload=True)
