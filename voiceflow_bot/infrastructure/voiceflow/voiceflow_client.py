"""Voiceflow Client - Dialog API (interact) and Transcripts API over httpx."""

import logging
import httpx

from voiceflow_bot.application.dto import InteractBodyDTO, TranscriptEntryDTO, TranscriptSubmissionDTO
from voiceflow_bot.domain.entities import InteractionRequest, Trace, TranscriptEntry, parse_traces
from voiceflow_bot.domain.exceptions import EngineCallFailedError, TranscriptSubmitFailedError
from voiceflow_bot.domain.ports import EngineClient
from voiceflow_bot.domain.value_objects import ChatId

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error detail from a Voiceflow error response."""
    error_detail = response.text
    try:
        error_data = response.json()
        if isinstance(error_data, dict):
            error_detail = error_data.get("message") or error_data.get("detail") or error_detail
    except ValueError:
        pass
    return error_detail


class VoiceflowClient(EngineClient):
    """EngineClient backed by the Voiceflow HTTP APIs."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        project_id: str,
        runtime_url: str = "https://general-runtime.voiceflow.com",
        api_url: str = "https://api.voiceflow.com",
        version_id: str | None = None,
    ):
        self._http = http_client
        self._api_key = api_key
        self._project_id = project_id
        self._runtime_url = runtime_url.rstrip("/")
        self._api_url = api_url.rstrip("/")
        self._version_id = version_id or None

    def _headers(self) -> dict[str, str]:
        headers = {"Authorization": self._api_key}
        if self._version_id:
            headers["versionID"] = self._version_id
        return headers

    async def interact(self, chat_id: ChatId, request: InteractionRequest) -> list[Trace]:
        url = f"{self._runtime_url}/state/user/{chat_id}/interact"
        body = InteractBodyDTO.from_request(request).to_json()

        try:
            response = await self._http.post(url, json=body, headers=self._headers())
        except httpx.HTTPError as e:
            raise EngineCallFailedError(
                f"Interact request failed: {type(e).__name__}: {e}", detail=str(e)
            ) from e

        if not response.is_success:
            detail = _error_detail(response)
            raise EngineCallFailedError(
                f"Interact API error ({response.status_code}): {detail}",
                status_code=response.status_code,
                detail=detail,
            )

        traces = parse_traces(response.json())
        logger.debug(
            "[VOICEFLOW] interact chat=%s request=%s -> %d traces",
            chat_id,
            request.type,
            len(traces),
        )
        return traces

    async def submit_transcript(
        self, chat_id: ChatId, entries: list[TranscriptEntry]
    ) -> None:
        url = f"{self._api_url}/v2/transcripts"
        body = TranscriptSubmissionDTO(
            project_id=self._project_id,
            session_id=str(chat_id),
            transcripts=[TranscriptEntryDTO.from_entry(entry) for entry in entries],
        ).to_json()

        try:
            response = await self._http.put(
                url,
                json=body,
                headers={"Authorization": self._api_key, "Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise TranscriptSubmitFailedError(
                f"Transcript request to {url} failed: {type(e).__name__}: {e}",
                detail=str(e),
            ) from e

        if not response.is_success:
            detail = _error_detail(response)
            raise TranscriptSubmitFailedError(
                f"Transcripts API error at {url} ({response.status_code}): {detail}",
                status_code=response.status_code,
                detail=detail,
            )

        logger.info("Transcripts updated successfully for chat %s", chat_id)
