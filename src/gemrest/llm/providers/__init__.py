from .gemini import GeminiRestClient

__all__ = ["GeminiRestClient"]
