"""Google Gemini LLM provider using google-genai SDK."""

from ..base import LLMAuthError, LLMError, LLMProvider, LLMRateLimitError

DEFAULT_MODEL = "gemini-2.5-flash"


def _handle_gemini_error(e: Exception):
    err_str = str(e).lower()
    if "api key" in err_str or "authentication" in err_str or "permission" in err_str:
        raise LLMAuthError(f"Gemini auth failed: {e}") from e
    if ("resource" in err_str and "exhausted" in err_str) or "rate" in err_str:
        raise LLMRateLimitError(f"Gemini rate limit: {e}") from e
    raise LLMError(f"Gemini API error: {e}") from e


class GeminiProvider(LLMProvider):
    """Google Gemini provider (google-genai SDK)."""

    provider_name = "gemini"

    def __init__(self, api_key: str | None = None, model: str | None = None, client=None):
        self.model_name = model or DEFAULT_MODEL
        self._api_key = api_key

        if client:
            self.client = client
            return

        from google import genai

        self.client = genai.Client(api_key=api_key)

    def generate(
        self, messages: list[dict], system: str | None = None, max_tokens: int = 2000
    ) -> str:
        from google.genai import types

        prompt = "\n".join(msg["content"] for msg in messages)

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system,
                    max_output_tokens=max_tokens,
                ),
            )
            return response.text or ""
        except Exception as e:
            _handle_gemini_error(e)

    def generate_json(self, prompt: str, schema: dict, max_tokens: int = 1000) -> str:
        from google.genai import types

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                    max_output_tokens=max_tokens,
                ),
            )
            return response.text or ""
        except Exception as e:
            _handle_gemini_error(e)
