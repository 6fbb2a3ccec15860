"""Mistral OCR API client."""

from dataclasses import dataclass

import httpx

from ava_health.services.ocr import TextExtractor


@dataclass
class HttpxMistralOcrClient(TextExtractor):
    """HTTPX-backed Mistral OCR client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    model: str = "mistral-ocr-latest"

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxMistralOcrClient":
        """Create a Mistral OCR client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def extract_text(self, image_base64: str) -> str:
        """Run OCR and join the markdown of every returned page."""
        response = await self.http_client.post(
            f"{self.base_url}/v1/ocr",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={
                "model": self.model,
                "document": {
                    "type": "image_url",
                    "image_url": f"data:image/jpeg;base64,{image_base64}",
                },
            },
            timeout=30,
        )
        response.raise_for_status()
        pages = response.json().get("pages", [])
        return "".join(f"{page.get('markdown', '')}\n" for page in pages)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
