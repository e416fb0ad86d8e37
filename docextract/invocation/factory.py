from docextract.config.settings import Settings
from docextract.invocation.client_base import BaseVisionClient
from docextract.invocation.example_client_adapter import ExampleClientAdapter
from docextract.invocation.invoker import ModelInvoker
from docextract.invocation.openai_client_adapter import OpenAIClientAdapter
from docextract.invocation.prompt_loader import load_instruction


class VisionClientFactory:
    """Creates the configured vision client and the invoker around it."""

    PROVIDERS = ("example", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> BaseVisionClient:
        """Create a configured client from application settings."""
        provider = settings.inference_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown inference provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def create_invoker(cls, settings: Settings) -> ModelInvoker:
        return ModelInvoker(
            client=cls.create(settings),
            instruction=load_instruction(),
            max_tokens=settings.extraction_max_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = (settings.inference_base_url or "").strip()
        if not url:
            raise ValueError(
                "inference_base_url is required for inference_provider=openai_compatible"
            )
        return url
