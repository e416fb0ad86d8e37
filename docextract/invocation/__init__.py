from docextract.invocation.client_base import BaseVisionClient
from docextract.invocation.factory import VisionClientFactory
from docextract.invocation.invoker import ModelInvoker

__all__ = ["BaseVisionClient", "ModelInvoker", "VisionClientFactory"]
