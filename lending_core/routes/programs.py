# This project was developed with assistance from AI tools.
"""Loan program catalog routes."""

from fastapi import APIRouter, HTTPException, status

from ..schemas.programs import LoanProgram
from ..services.programs import PROGRAMS, get_program

router = APIRouter()


@router.get("", response_model=list[LoanProgram])
async def list_programs() -> list[LoanProgram]:
    """Return every registered loan program."""
    return PROGRAMS


@router.get("/{program_id}", response_model=LoanProgram)
async def read_program(program_id: str) -> LoanProgram:
    program = get_program(program_id)
    if program is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Loan program {program_id!r} not found",
        )
    return program
