from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ModelInfo:
    id: str
    name: str
    publisher: str
    endpoint: str


MODELS: tuple[str, ...] = (
    # OpenAI
    "gpt-4o",
    "gpt-4o-mini",

    # AI21 Labs
    "AI21-Jamba-Instruct",

    # Cohere
    "Cohere-command-r",
    "Cohere-command-r-plus",
    "Cohere-embed-v3-english",
    "Cohere-embed-v3-multilingual",

    # Meta Llama 3, 3.1 and 3.2
    "Meta-Llama-3-70B-Instruct",
    "Meta-Llama-3-8B-Instruct",
    "Meta-Llama-3.1-405B-Instruct",
    "Meta-Llama-3.1-70B-Instruct",
    "Meta-Llama-3.1-8B-Instruct",
    "Meta-Llama-3.2-11B-Vision-Instruct",
    "Meta-Llama-3.2-1B-Instruct",
    "Meta-Llama-3.2-3B-Instruct",
    "Meta-Llama-3.2-90B-Vision-Instruct",

    # Mistral
    "Mistral-large-2407",
    "Mistral-Nemo",
    "Mistral-small",

    # Microsoft Phi 3.5
    "Phi-3.5-mini-instruct",
    "Phi-3.5-MoE-instruct",
    "Phi-3.5-vision-instruct",

    # Qwen
    "Qwen2.5-72B-Instruct",
    "Qwen2.5-Coder-32B-Instruct",
)

# Evaluated in order, first match wins. Prefixes are case-sensitive.
PUBLISHER_PREFIXES: tuple[tuple[str, str], ...] = (
    ("gpt-", "OpenAI"),
    ("Meta-Llama", "Meta"),
    ("Mistral", "Mistral"),
    ("Phi-", "Microsoft"),
    ("Cohere", "Cohere"),
    ("AI21", "AI21 Labs"),
    ("Qwen", "Qwen"),
)
UNKNOWN_PUBLISHER = "Unknown"

_MODEL_SET = frozenset(MODELS)


def get_publisher(model_id: str) -> str:
    for prefix, publisher in PUBLISHER_PREFIXES:
        if model_id.startswith(prefix):
            return publisher
    return UNKNOWN_PUBLISHER


def is_model_allowed(model_id: str) -> bool:
    return model_id in _MODEL_SET


def find_invalid_models(model_ids: Iterable[str]) -> list[str]:
    """Return every identifier outside the registry, keeping input order."""
    return [m for m in model_ids if not is_model_allowed(m)]


def chat_endpoint(model_id: str) -> str:
    return f"/api/models/{model_id}/chat?q=your_message"


def list_models() -> list[ModelInfo]:
    return [
        ModelInfo(
            id=model_id,
            name=model_id,
            publisher=get_publisher(model_id),
            endpoint=chat_endpoint(model_id),
        )
        for model_id in MODELS
    ]
