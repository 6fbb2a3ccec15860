"""Google Cloud Vision text detection client."""

from dataclasses import dataclass

import httpx

from ava_health.services.ocr import TextExtractor


@dataclass
class HttpxGoogleVisionClient(TextExtractor):
    """HTTPX-backed Google Vision client."""

    api_key: str
    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, url: str) -> "HttpxGoogleVisionClient":
        """Create a Google Vision client with a managed httpx session."""
        return cls(api_key=api_key, url=url, http_client=httpx.AsyncClient())

    async def extract_text(self, image_base64: str) -> str:
        """Return the full-text annotation, or an empty string."""
        response = await self.http_client.post(
            self.url,
            params={"key": self.api_key},
            json={
                "requests": [
                    {
                        "image": {"content": image_base64},
                        "features": [{"type": "TEXT_DETECTION"}],
                    }
                ]
            },
            timeout=30,
        )
        response.raise_for_status()
        responses = response.json().get("responses") or [{}]
        annotations = responses[0].get("textAnnotations") or []
        if not annotations:
            return ""
        return str(annotations[0].get("description", ""))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
