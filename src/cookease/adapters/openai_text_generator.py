"""OpenAI Responses API client for free-form text generation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from cookease.services.recommendations import TextGenerator


@dataclass
class OpenAITextGenerator(TextGenerator):
    """Text generator backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAITextGenerator":
        """Create a generator with its own OpenAI client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(self, prompt: str) -> str:
        """Return the model's text output for the prompt."""
        response = await self.client.responses.create(model=self.model, input=prompt)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
