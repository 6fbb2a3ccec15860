"""OpenAI Responses API client for assistant replies."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from ava_health.services.assistant import ResponseGenerator


@dataclass
class OpenAIResponseGenerator(ResponseGenerator):
    """Response generator backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    max_output_tokens: int = 1000

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIResponseGenerator":
        """Create an OpenAI response generator."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(self, prompt: str, system_prompt: str) -> str:
        """Call OpenAI with the system instructions and user prompt."""
        response = await self.client.responses.create(
            model=self.model,
            instructions=system_prompt,
            input=prompt,
            max_output_tokens=self.max_output_tokens,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text
