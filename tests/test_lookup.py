"""Tests for definition lookups."""

from unittest import mock

import pytest
import requests

from freestyle.core.errors import DefinitionUnavailableError
from freestyle.lookup.anthropic import AnthropicProvider
from freestyle.lookup.base import AIProvider
from freestyle.lookup.dictionary import FreeDictionaryLookup, extract_definition
from freestyle.lookup.generator import AIDefinitionLookup
from freestyle.lookup.openai import OpenAIProvider


SAMPLE_RESPONSE = [
    {
        "word": "dawn",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "The time each morning at which daylight first begins."},
                    {"definition": "The beginning of something."},
                ],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "To begin to shine."}],
            },
        ],
    }
]


def make_response(status_code=200, payload=None, json_error=False):
    response = mock.Mock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return response


class TestExtractDefinition:

    def test_first_definition_of_first_meaning(self):
        assert extract_definition(SAMPLE_RESPONSE) == (
            "The time each morning at which daylight first begins."
        )

    @pytest.mark.parametrize("data", [
        None,
        [],
        {"title": "No Definitions Found"},
        [{"meanings": []}],
        [{"meanings": [{"definitions": []}]}],
        [{"meanings": [{"definitions": [{"definition": "  "}]}]}],
        [{"meanings": [{"definitions": [{"definition": 42}]}]}],
    ])
    def test_malformed_structures(self, data):
        assert extract_definition(data) is None


class TestFreeDictionaryLookup:

    def setup_method(self):
        self.session = mock.Mock()
        self.lookup = FreeDictionaryLookup(
            base_url="https://dict.example/api/", timeout=2, session=self.session
        )

    def test_lookup(self):
        self.session.get.return_value = make_response(payload=SAMPLE_RESPONSE)
        assert self.lookup.lookup("dawn").startswith("The time each morning")
        self.session.get.assert_called_once_with("https://dict.example/api/dawn", timeout=2)

    def test_word_is_url_quoted(self):
        self.session.get.return_value = make_response(payload=SAMPLE_RESPONSE)
        self.lookup.lookup("ad hoc")
        self.session.get.assert_called_once_with("https://dict.example/api/ad%20hoc", timeout=2)

    def test_slash_is_url_quoted(self):
        self.session.get.return_value = make_response(payload=SAMPLE_RESPONSE)
        self.lookup.lookup("and/or")
        self.session.get.assert_called_once_with("https://dict.example/api/and%2For", timeout=2)

    def test_available_with_base_url(self):
        assert self.lookup.is_available()
        assert not FreeDictionaryLookup(base_url="", session=self.session).is_available()

    def test_not_found_is_none(self):
        self.session.get.return_value = make_response(status_code=404)
        assert self.lookup.lookup("qwzx") is None

    def test_network_error(self):
        self.session.get.side_effect = requests.ConnectionError("offline")
        with pytest.raises(DefinitionUnavailableError):
            self.lookup.lookup("dawn")

    def test_server_error(self):
        self.session.get.return_value = make_response(status_code=500)
        with pytest.raises(DefinitionUnavailableError):
            self.lookup.lookup("dawn")

    def test_non_json_body(self):
        self.session.get.return_value = make_response(json_error=True)
        with pytest.raises(DefinitionUnavailableError):
            self.lookup.lookup("dawn")

    def test_unexpected_shape_is_none(self):
        self.session.get.return_value = make_response(payload={"unexpected": True})
        assert self.lookup.lookup("dawn") is None


class StubProvider(AIProvider):
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def is_available(self):
        return True

    def generate(self, prompt, system=None, max_tokens=200):
        self.prompts.append((prompt, system, max_tokens))
        if self.error:
            raise self.error
        return self.reply


class TestAIDefinitionLookup:

    def test_lookup(self):
        provider = StubProvider('"The first light of day."\nExtra line')
        lookup = AIDefinitionLookup(provider, language="English")
        assert lookup.lookup("dawn") == "The first light of day."
        prompt, system, _ = provider.prompts[0]
        assert "English" in prompt and "dawn" in prompt
        assert system

    def test_unknown_word(self):
        lookup = AIDefinitionLookup(StubProvider("UNKNOWN"))
        assert lookup.lookup("qwzx") is None

    def test_empty_reply(self):
        assert AIDefinitionLookup(StubProvider("  ")).lookup("dawn") is None

    def test_provider_error(self):
        lookup = AIDefinitionLookup(StubProvider(error=RuntimeError("rate limited")))
        with pytest.raises(DefinitionUnavailableError):
            lookup.lookup("dawn")


class TestProviders:

    def test_anthropic_key_from_env(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "key")
        assert AnthropicProvider().is_available()

    def test_openai_without_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        provider = OpenAIProvider()
        assert not provider.is_available()
        with pytest.raises(ValueError):
            provider.generate("Define dawn")
