"""LLM provider factory with auto-detection."""

import os

from .base import LLMError, LLMProvider

_PROVIDER_ENV_KEYS = {
    "gemini": "GOOGLE_API_KEY",
}

_FALLBACK_ENV_KEYS = {
    "gemini": ("GEMINI_API_KEY", "API_KEY"),
}

_AUTO_DETECT_ORDER = ["gemini"]


def resolve_api_key(provider: str = "gemini") -> str | None:
    """First non-empty API key env var for ``provider``."""
    names = (_PROVIDER_ENV_KEYS.get(provider),) + _FALLBACK_ENV_KEYS.get(provider, ())
    for name in names:
        if name and os.getenv(name):
            return os.getenv(name)
    return None


def create_llm_provider(
    provider: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    client=None,
) -> LLMProvider:
    """Create an LLM provider instance.

    Args:
        provider: "gemini", "auto", or None (auto-detect)
        api_key: Explicit API key (overrides env var)
        model: Model name (None = provider default)
        client: Pre-built SDK client for testing/DI

    Returns:
        LLMProvider instance
    """
    resolved = provider or "auto"

    if resolved == "auto":
        resolved = _auto_detect_provider(api_key)

    if not api_key and not client:
        api_key = resolve_api_key(resolved)

    if resolved == "gemini":
        from .providers.gemini import GeminiProvider

        return GeminiProvider(api_key=api_key, model=model, client=client)
    raise LLMError(f"Unknown provider: {resolved}. Use: gemini")


def _detect_provider_from_key(api_key: str) -> str | None:
    """Infer provider from API key prefix."""
    if api_key.startswith("AI"):
        return "gemini"
    return None


def _auto_detect_provider(api_key: str | None = None) -> str:
    """Detect provider from explicit key prefix, then env vars."""
    if api_key:
        inferred = _detect_provider_from_key(api_key)
        if inferred:
            return inferred
        # Unrecognised prefix: only one provider is supported anyway
        return "gemini"

    for name in _AUTO_DETECT_ORDER:
        if resolve_api_key(name):
            return name
    raise LLMError("No LLM API key found. Set one of: GOOGLE_API_KEY, GEMINI_API_KEY, API_KEY")
