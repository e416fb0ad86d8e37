"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in VisionClientFactory.
"""

import json
from typing import ClassVar

from docextract.invocation.client_base import BaseVisionClient
from docextract.invocation.models import TokenUsage, VisionCompletion


class ExampleClientAdapter(BaseVisionClient):
    """Example adapter that answers every model with the same extraction.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "document_type": "example",
        "full_name": "PERSON_1",
        "date_of_buuurth": None,
    }

    def create_vision_completion(
        self,
        *,
        model: str,
        instruction: str,
        image_url: str,
        max_tokens: int,
    ) -> VisionCompletion:
        _ = model, instruction, image_url, max_tokens
        return VisionCompletion(content=json.dumps(self.DEFAULT_RESPONSE), usage=TokenUsage())
