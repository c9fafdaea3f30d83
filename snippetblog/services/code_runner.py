import logging

import httpx
from pydantic import ValidationError

from snippetblog.schemas.runner import RunnerFile, RunnerRequest, RunnerResult
from snippetblog.utils import strip_zero_width

logger = logging.getLogger(__name__)


class CodeRunnerError(Exception):
    pass


class CodeRunner:
    """
    Client for a glot.io style "run this code" API.

    One outbound request per call, no retries. Anything other than a 2xx JSON
    reply in the expected shape becomes a CodeRunnerError.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        token: str,
        filename: str = "main.p6",
        timeout: float = 10.0,
    ):
        self.client = client
        self.url = url
        self.token = token
        self.filename = filename
        self.timeout = timeout

    def build_request(self, code: str) -> RunnerRequest:
        return RunnerRequest(
            files=[RunnerFile(name=self.filename, content=strip_zero_width(code))]
        )

    async def run(self, code: str) -> str:
        payload = self.build_request(code)
        headers = {
            "Content-type": "application/json",
            "Authorization": f"Token {self.token}",
        }

        try:
            response = await self.client.post(
                self.url,
                json=payload.model_dump(),
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = RunnerResult.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.error(f"Code runner request failed: {e}")
            raise CodeRunnerError("Code runner request failed") from e
        except (ValueError, ValidationError) as e:
            logger.error(f"Code runner returned an unreadable response: {e}")
            raise CodeRunnerError("Code runner returned an unreadable response") from e

        return format_output(result)


def format_output(result: RunnerResult) -> str:
    parts = []
    if result.stdout is not None:
        parts.append(result.stdout)
    if result.stderr:
        parts.append(f"STDERR:\n{result.stderr}")
    return "\n".join(parts).strip()
