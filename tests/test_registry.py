from __future__ import annotations

import pytest

from src.modules.registry.models import (
    MODELS,
    PUBLISHER_PREFIXES,
    UNKNOWN_PUBLISHER,
    find_invalid_models,
    get_publisher,
    is_model_allowed,
    list_models,
)


@pytest.mark.parametrize(
    ("model_id", "publisher"),
    [
        ("gpt-4o", "OpenAI"),
        ("gpt-4o-mini", "OpenAI"),
        ("Meta-Llama-3.1-8B-Instruct", "Meta"),
        ("Mistral-Nemo", "Mistral"),
        ("Phi-3.5-MoE-instruct", "Microsoft"),
        ("Cohere-command-r-plus", "Cohere"),
        ("AI21-Jamba-Instruct", "AI21 Labs"),
        ("Qwen2.5-Coder-32B-Instruct", "Qwen"),
        ("claude-3", UNKNOWN_PUBLISHER),
        ("", UNKNOWN_PUBLISHER),
    ],
)
def test_get_publisher(model_id: str, publisher: str) -> None:
    assert get_publisher(model_id) == publisher


def test_get_publisher_is_case_sensitive() -> None:
    assert get_publisher("GPT-4o") == UNKNOWN_PUBLISHER
    assert get_publisher("meta-llama-3") == UNKNOWN_PUBLISHER
    assert get_publisher("Phi3") == UNKNOWN_PUBLISHER


def test_every_registry_entry_has_a_known_publisher() -> None:
    labels = {label for _, label in PUBLISHER_PREFIXES}
    assert len(labels | {UNKNOWN_PUBLISHER}) == 8
    for model_id in MODELS:
        assert get_publisher(model_id) in labels


def test_registry_is_fixed_and_unique() -> None:
    assert len(MODELS) == 24
    assert len(set(MODELS)) == len(MODELS)
    assert MODELS[0] == "gpt-4o"
    assert MODELS[-1] == "Qwen2.5-Coder-32B-Instruct"


def test_is_model_allowed() -> None:
    assert is_model_allowed("Mistral-small")
    assert not is_model_allowed("mistral-small")
    assert not is_model_allowed(" gpt-4o")


def test_find_invalid_models_keeps_order_and_duplicates() -> None:
    ids = ["nope", "gpt-4o", "also-nope", "nope", "Mistral-small"]
    assert find_invalid_models(ids) == ["nope", "also-nope", "nope"]
    assert find_invalid_models(["gpt-4o", "Mistral-small"]) == []


def test_list_models_follows_registry_order() -> None:
    models = list_models()
    assert [m.id for m in models] == list(MODELS)
    llama = next(m for m in models if m.id == "Meta-Llama-3.1-8B-Instruct")
    assert llama.name == llama.id
    assert llama.publisher == "Meta"
    assert llama.endpoint == "/api/models/Meta-Llama-3.1-8B-Instruct/chat?q=your_message"
