from typing import List, Optional

from pydantic import BaseModel, Field


class RunnerFile(BaseModel):
    name: str
    content: str


class RunnerRequest(BaseModel):
    files: List[RunnerFile] = Field(default_factory=list)

    # {
    #   "files": [{ "name": "main.p6", "content": "say 'hi'" }]
    # }


class RunnerResult(BaseModel):
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    error: Optional[str] = None
