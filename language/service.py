# SPDX-License-Identifier: AGPL-3.0-only

"""
Translation and text-to-speech helpers.

Both are client-delegated by default: the server hands back the text plus
language metadata and the browser does the work. Server-side translation is
only attempted when TRANSLATION_ENABLED is set and a model is configured.
"""
import logging
from typing import Any, Dict, Optional

from common.errors import UpstreamError
from common.llm_client import LLMClient

from .catalog import (
    BROWSER_COMPATIBILITY,
    FRONTEND_INSTRUCTIONS,
    LANGUAGE_CATEGORIES,
    SPEECH_LANGUAGE_CODES,
    SUPPORTED_LANGUAGES,
    UTTERANCE_SETTINGS,
    language_name,
)

logger = logging.getLogger(__name__)

TRANSLATION_PROMPT = """Translate the following text to {language}. Only return the translated text, no explanations:

Text to translate: {text}

Translated text:"""

CLIENT_TRANSLATION_NOTE = (
    "Server-side translation is not enabled. The original text is returned; "
    "translate it in the browser if needed."
)


class TranslationService:
    """Translate text with the configured model, or hand it back untouched."""

    def __init__(self, config, llm_client: Optional[LLMClient] = None):
        self.config = config
        self.llm_client = llm_client or LLMClient(config)

    @property
    def available(self) -> bool:
        return bool(self.config.translation_enabled) and self.llm_client.available

    def translate(self, text: str, target_language: str = "hi", source_language: str = "en") -> Dict[str, Any]:
        response = {
            "originalText": text,
            "translatedText": text,
            "sourceLanguage": source_language,
            "targetLanguage": target_language,
            "service": "client",
            "demoMode": True,
        }

        if source_language == target_language:
            response["demoMode"] = False
            return response

        if not self.available:
            response["note"] = CLIENT_TRANSLATION_NOTE
            return response

        prompt = TRANSLATION_PROMPT.format(language=language_name(target_language), text=text)
        try:
            translated = self.llm_client.invoke(prompt).strip()
        except UpstreamError as e:
            logger.warning("Translation to %s failed (%s)", target_language, e.reason)
            response["service"] = "fallback"
            response["note"] = "Translation failed; showing the original text."
            response["degradedReason"] = e.reason
            return response

        if not translated:
            response["service"] = "fallback"
            response["note"] = "Translation failed; showing the original text."
            response["degradedReason"] = "model-error"
            return response

        response.update(translatedText=translated, service=self.llm_client.provider, demoMode=False)
        return response


def speech_code(language_code: str) -> str:
    """Map a short code like "hi" to its speech tag; pass anything else through."""
    return SPEECH_LANGUAGE_CODES.get(language_code, language_code)


def speech_payload(text: str, language_code: str = "en-US") -> Dict[str, Any]:
    """Instructions for playing text with the browser's speechSynthesis API."""
    return {
        "text": text,
        "languageCode": speech_code(language_code),
        "audioContent": None,
        "service": "web-speech-api",
        "instructions": "Use the Web Speech API in your browser to play this text",
        "utterance": dict(UTTERANCE_SETTINGS),
        "frontendInstructions": FRONTEND_INSTRUCTIONS,
        "supportedLanguages": list(SPEECH_LANGUAGE_CODES),
        "browserCompatibility": BROWSER_COMPATIBILITY,
    }


def language_catalogue(ai_powered: bool = False, translation_enabled: bool = False) -> Dict[str, Any]:
    return {
        "languages": SUPPORTED_LANGUAGES,
        "total": len(SUPPORTED_LANGUAGES),
        "categories": LANGUAGE_CATEGORIES,
        "features": {
            "translation": True,
            "serverTranslation": translation_enabled and ai_powered,
            "textToSpeech": True,
            "webSpeechAPI": True,
            "aiPowered": ai_powered,
        },
    }
