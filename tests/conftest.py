from __future__ import annotations

from typing import Sequence

import pytest


class FakeTagger:
    """Whitespace tokenizer with a fixed word -> tag table; one sentence per line."""

    def __init__(self, tags: dict[str, str], default: str = "NN"):
        self.tags = tags
        self.default = default
        self.calls = 0

    def tokenize(self, text: str) -> list[list[str]]:
        return [line.split() for line in text.splitlines() if line.strip()]

    def tag_sentences(self, sentences: Sequence[Sequence[str]]) -> list[list[tuple[str, str]]]:
        self.calls += 1
        return [[(w, self.tags.get(w, self.default)) for w in sentence] for sentence in sentences]


@pytest.fixture
def fake_tagger() -> FakeTagger:
    return FakeTagger(
        {
            "The": "DT",
            "the": "DT",
            "a": "DT",
            "and": "CC",
            "cat": "NN",
            "cats": "NNS",
            "sat": "VBD",
            "ran": "VBD",
            "mat": "NN",
            "on": "IN",
            "she": "PRP",
            "can": "MD",
            ".": ".",
            ",": ",",
        }
    )


@pytest.fixture
def lemma_table():
    table = {("cats", "NNS"): "cat", ("sat", "VBD"): "sit", ("ran", "VBD"): "run"}
    return lambda word, tag: table.get((word, tag), word)


@pytest.fixture
def make_tagger():
    return FakeTagger
