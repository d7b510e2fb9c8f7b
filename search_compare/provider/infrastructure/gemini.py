"""GeminiProvider — Google Generative Language API with Google Search grounding."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from search_compare.provider.domain.citation import Citation, add_if_new
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.domain.usage import TokenUsage
from search_compare.provider.infrastructure.errors import ProviderQueryError
from search_compare.provider.infrastructure.http import JsonObject
from search_compare.provider.infrastructure.rest import RestProvider

_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class _Wire(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _Part(_Wire):
    text: str = ""


class _Content(_Wire):
    parts: list[_Part] = Field(default_factory=list)


class _WebSource(_Wire):
    uri: str = ""
    title: str = ""


class _GroundingChunk(_Wire):
    web: _WebSource | None = None


class _GroundingMetadata(_Wire):
    grounding_chunks: list[_GroundingChunk] = Field(default_factory=list)


class _Candidate(_Wire):
    content: _Content | None = None
    grounding_metadata: _GroundingMetadata | None = None


class _UsageMetadata(_Wire):
    prompt_token_count: int = 0
    candidates_token_count: int = 0


class _Response(_Wire):
    candidates: list[_Candidate] = Field(default_factory=list)
    usage_metadata: _UsageMetadata | None = None


class GeminiProvider(RestProvider):
    name = "gemini"
    display_name = "Gemini 3 Pro"
    emoji = "🔵"
    default_model = "gemini-3-pro-preview"
    api_key_env_vars = ("GOOGLE_API_KEY", "GEMINI_API_KEY")
    request_detail = "sending request with Google Search grounding"

    def endpoint(self) -> str:
        return _ENDPOINT.format(model=self.model)

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {"x-goog-api-key": api_key, "content-type": "application/json"}

    def build_payload(self, text: str) -> JsonObject:
        return {
            "contents": [{"role": "user", "parts": [{"text": text}]}],
            "tools": [{"google_search": {}}],
        }

    def parse_response(self, body: JsonObject) -> ProviderResult:
        return parse_gemini_response(body=body)


def parse_gemini_response(body: JsonObject) -> ProviderResult:
    """Read the first candidate's text parts and its grounding chunks.

    A response with no candidates is a valid, empty answer.

    Raises:
        ProviderQueryError: if the body is not a generateContent response.
    """
    try:
        response = _Response.model_validate(body)
    except ValidationError as exc:
        raise ProviderQueryError(provider="gemini", reason=f"parse error: {exc}") from exc

    usage = TokenUsage()
    if response.usage_metadata is not None:
        usage = TokenUsage(
            input_tokens=response.usage_metadata.prompt_token_count,
            output_tokens=response.usage_metadata.candidates_token_count,
        )

    candidate = response.candidates[0] if response.candidates else None
    if candidate is None or candidate.content is None:
        return ProviderResult(usage=usage)

    text = "".join(part.text for part in candidate.content.parts)

    citations: list[Citation] = []
    seen: set[str] = set()
    if candidate.grounding_metadata is not None:
        for chunk in candidate.grounding_metadata.grounding_chunks:
            if chunk.web is None:
                continue
            add_if_new(
                citations, seen, Citation(url=chunk.web.uri, title=chunk.web.title)
            )

    return ProviderResult(text=text, citations=citations, usage=usage)
