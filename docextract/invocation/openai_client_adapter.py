import httpx
import openai

from docextract.invocation.client_base import BaseVisionClient
from docextract.invocation.exceptions import InvocationError, InvocationNetworkError
from docextract.invocation.models import TokenUsage, VisionCompletion


class OpenAIClientAdapter(BaseVisionClient):
    """Vision client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_vision_completion(
        self,
        *,
        model: str,
        instruction: str,
        image_url: str,
        max_tokens: int,
    ) -> VisionCompletion:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise InvocationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise InvocationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise InvocationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise InvocationError("AI returned empty response")
        return VisionCompletion(content=content, usage=_usage_from(response.usage))


def _usage_from(usage: object | None) -> TokenUsage:
    if usage is None:
        return TokenUsage()
    return TokenUsage(
        prompt_tokens=getattr(usage, "prompt_tokens", None) or 0,
        completion_tokens=getattr(usage, "completion_tokens", None) or 0,
        total_tokens=getattr(usage, "total_tokens", None) or 0,
    )
