# SPDX-License-Identifier: AGPL-3.0-only

import pytest
import requests

from common.llm_client import LLMClient
from language.catalog import LANGUAGE_CATEGORIES, SPEECH_LANGUAGE_CODES, SUPPORTED_LANGUAGES, language_name
from language.service import TranslationService, language_catalogue, speech_code, speech_payload


class TestTranslationService:
    def test_disabled_returns_original(self, config):
        service = TranslationService(config, LLMClient(config))
        assert service.available is False
        result = service.translate("Pay rent monthly", target_language="hi")
        assert result["translatedText"] == "Pay rent monthly"
        assert result["originalText"] == "Pay rent monthly"
        assert result["targetLanguage"] == "hi"
        assert result["sourceLanguage"] == "en"
        assert result["demoMode"] is True
        assert result["service"] == "client"
        assert "note" in result

    def test_flag_without_credential_is_unavailable(self, config):
        config.translation_enabled = True
        assert TranslationService(config, LLMClient(config)).available is False

    def test_enabled_translates(self, live_config, live_client, reply_with, fake_session):
        reply_with("  किराया मासिक दें  ")
        service = TranslationService(live_config, live_client)
        assert service.available is True
        result = service.translate("Pay rent monthly", target_language="hi")
        assert result["translatedText"] == "किराया मासिक दें"
        assert result["demoMode"] is False
        assert result["service"] == "gemini"
        prompt = fake_session.post.call_args.kwargs["json"]["contents"][0]["parts"][0]["text"]
        assert prompt.startswith("Translate the following text to Hindi")
        assert "Text to translate: Pay rent monthly" in prompt

    def test_upstream_failure_returns_original(self, live_config, live_client, fake_session):
        fake_session.post.side_effect = requests.exceptions.ConnectionError("down")
        result = TranslationService(live_config, live_client).translate("Pay rent", target_language="ta")
        assert result["translatedText"] == "Pay rent"
        assert result["demoMode"] is True
        assert result["degradedReason"] == "network"

    def test_same_language_is_a_no_op(self, live_config, live_client, fake_session):
        result = TranslationService(live_config, live_client).translate("Hello", "en", "en")
        assert result["translatedText"] == "Hello"
        assert result["demoMode"] is False
        fake_session.post.assert_not_called()


class TestSpeech:
    @pytest.mark.parametrize("code,expected", [("hi", "hi-IN"), ("en", "en-US"), ("pt", "pt-PT"),
                                               ("en-GB", "en-GB"), ("xx", "xx")])
    def test_speech_code(self, code, expected):
        assert speech_code(code) == expected

    def test_payload(self):
        payload = speech_payload("Read this aloud", "hi")
        assert payload["text"] == "Read this aloud"
        assert payload["languageCode"] == "hi-IN"
        assert payload["audioContent"] is None
        assert payload["service"] == "web-speech-api"
        assert payload["utterance"] == {"rate": 0.9, "pitch": 1.0, "volume": 1.0}
        assert payload["supportedLanguages"] == list(SPEECH_LANGUAGE_CODES)
        assert "bestPractices" in payload["frontendInstructions"]


class TestCatalogue:
    def test_twenty_six_languages(self):
        catalogue = language_catalogue()
        assert catalogue["total"] == 26
        assert set(catalogue["categories"]) == {"european", "indian", "asian", "other"}
        assert catalogue["features"]["aiPowered"] is False
        assert catalogue["features"]["serverTranslation"] is False

    def test_categories_cover_every_language(self):
        listed = [code for codes in LANGUAGE_CATEGORIES.values() for code in codes]
        assert sorted(listed) == sorted(SUPPORTED_LANGUAGES)

    def test_features(self):
        features = language_catalogue(ai_powered=True, translation_enabled=True)["features"]
        assert features["aiPowered"] is True
        assert features["serverTranslation"] is True

    def test_language_name(self):
        assert language_name("hi") == "Hindi (हिन्दी)"
        assert language_name("EN") == "English"
        assert language_name("tlh") == "tlh"
