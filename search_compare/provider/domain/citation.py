"""Citation value object and the dedup helper every adapter uses."""

from pydantic import BaseModel, ConfigDict


class Citation(BaseModel):
    """A web source referenced by a provider's answer. Identity is the URL."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str = ""
    domain: str = ""


def add_if_new(collection: list[Citation], seen: set[str], candidate: Citation) -> None:
    """Append candidate and mark its URL seen, unless the URL is empty or already seen."""
    if not candidate.url or candidate.url in seen:
        return
    seen.add(candidate.url)
    collection.append(candidate)
