import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import PlainTextResponse

from snippetblog import dependencies as deps
from snippetblog.services.code_runner import CodeRunner, CodeRunnerError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/run", response_class=PlainTextResponse)
async def run_code(
    code: str = Form(""),
    runner: CodeRunner = Depends(deps.get_code_runner),
):
    """
    Run a code snippet on the remote runner and relay its output as text.
    """
    if not code:
        raise HTTPException(status_code=404, detail="No code provided")

    try:
        output = await runner.run(code)
    except CodeRunnerError as e:
        logger.error(f"Code run failed: {e}")
        raise HTTPException(status_code=502, detail="Code runner unavailable")

    return PlainTextResponse(output)
