from dataclasses import dataclass


@dataclass(frozen=True)
class RasterPayload:
    """Base64-encoded single image handed to the vision models."""

    data: str
    media_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"
