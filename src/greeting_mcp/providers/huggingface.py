"""
Hugging Face image generation — the one external network dependency

One text-to-image request per call through the Hugging Face inference
router. The credential is handed in by the caller; nothing here reads
the environment.
"""

from typing import Optional

import httpx

from greeting_mcp.server.errors import ExternalError, PreconditionError
from greeting_mcp.server.logger import get_logger

log = get_logger("providers.huggingface")

ROUTER_URL = "https://router.huggingface.co"
DEFAULT_MODEL = "black-forest-labs/FLUX.1-schnell"
# The route and raw-bytes response below are specific to this provider
PROVIDER = "hf-inference"
DEFAULT_STEPS = 5


class ImageGenerator:
    """Text-to-image adapter with a fixed model and step count."""

    def __init__(
        self,
        credential: Optional[str],
        model: str = DEFAULT_MODEL,
        steps: int = DEFAULT_STEPS,
        timeout: float = 120.0,
        base_url: str = ROUTER_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._credential = credential or None
        self.model = model
        self.steps = steps
        self.timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def configured(self) -> bool:
        return self._credential is not None

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/{PROVIDER}/models/{self.model}"

    async def generate(self, prompt: str) -> bytes:
        """Return the generated image bytes or raise ExternalError."""
        if not self.configured:
            raise PreconditionError("HF_TOKEN is not set; a Hugging Face API token is required")

        payload = {"inputs": prompt, "parameters": {"num_inference_steps": self.steps}}
        headers = {
            "Authorization": f"Bearer {self._credential}",
            "Accept": "image/png",
        }

        log.info(f"Generating image model={self.model} provider={PROVIDER} steps={self.steps}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            log.error(f"Image request failed: {exc}")
            raise ExternalError(str(exc) or type(exc).__name__) from exc

        if resp.status_code >= 400:
            message = _provider_message(resp)
            log.error(f"Provider returned {resp.status_code}: {message}")
            raise ExternalError(message, status_code=resp.status_code)

        content_type = resp.headers.get("content-type", "")
        if not content_type.startswith("image/"):
            raise ExternalError(f"Unexpected response type from provider: {content_type or 'unknown'}")

        log.info(f"Image generated ({len(resp.content)} bytes)")
        return resp.content


def _provider_message(resp: httpx.Response) -> str:
    """The provider's own error text, verbatim when it sent one."""
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            error = error.get("message")
        if error:
            return str(error)

    text = resp.text.strip()
    return text or f"HTTP {resp.status_code}"
