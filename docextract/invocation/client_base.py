from abc import ABC, abstractmethod

from docextract.invocation.models import VisionCompletion


class BaseVisionClient(ABC):
    """Contract for provider-specific vision completion clients."""

    @abstractmethod
    def create_vision_completion(
        self,
        *,
        model: str,
        instruction: str,
        image_url: str,
        max_tokens: int,
    ) -> VisionCompletion:
        """Send one instruction plus one inlined image and return the completion.

        Raises:
            InvocationError: when the provider fails or returns no content.
        """
