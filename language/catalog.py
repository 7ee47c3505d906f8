# SPDX-License-Identifier: AGPL-3.0-only

"""
Static language data for translation and browser speech synthesis.
"""
from typing import Dict

SUPPORTED_LANGUAGES: Dict[str, Dict[str, str]] = {
    # English & European
    "en": {"name": "English", "voice": "en-US-Wavenet-D"},
    "es": {"name": "Spanish (Español)", "voice": "es-ES-Wavenet-B"},
    "fr": {"name": "French (Français)", "voice": "fr-FR-Wavenet-A"},
    "de": {"name": "German (Deutsch)", "voice": "de-DE-Wavenet-A"},
    "it": {"name": "Italian (Italiano)", "voice": "it-IT-Wavenet-A"},
    "pt": {"name": "Portuguese (Português)", "voice": "pt-BR-Wavenet-A"},
    "ru": {"name": "Russian (Русский)", "voice": "ru-RU-Wavenet-A"},
    "nl": {"name": "Dutch (Nederlands)", "voice": "nl-NL-Wavenet-A"},

    # Indian languages
    "hi": {"name": "Hindi (हिन्दी)", "voice": "hi-IN-Wavenet-A"},
    "bn": {"name": "Bengali (বাংলা)", "voice": "bn-IN-Wavenet-A"},
    "te": {"name": "Telugu (తెలుగు)", "voice": "te-IN-Standard-A"},
    "mr": {"name": "Marathi (मराठी)", "voice": "mr-IN-Wavenet-A"},
    "ta": {"name": "Tamil (தமிழ்)", "voice": "ta-IN-Wavenet-A"},
    "ur": {"name": "Urdu (اردو)", "voice": "ur-IN-Wavenet-A"},
    "gu": {"name": "Gujarati (ગુજરાતી)", "voice": "gu-IN-Wavenet-A"},
    "kn": {"name": "Kannada (ಕನ್ನಡ)", "voice": "kn-IN-Wavenet-A"},
    "ml": {"name": "Malayalam (മലയാളം)", "voice": "ml-IN-Wavenet-A"},
    "pa": {"name": "Punjabi (ਪੰਜਾਬੀ)", "voice": "pa-IN-Wavenet-A"},
    "or": {"name": "Odia (ଓଡ଼ିଆ)", "voice": "or-IN-Standard-A"},
    "as": {"name": "Assamese (অসমীয়া)", "voice": "as-IN-Standard-A"},

    # Other Asian languages
    "zh": {"name": "Chinese (中文)", "voice": "zh-CN-Wavenet-A"},
    "ja": {"name": "Japanese (日本語)", "voice": "ja-JP-Wavenet-A"},
    "ko": {"name": "Korean (한국어)", "voice": "ko-KR-Wavenet-A"},
    "th": {"name": "Thai (ไทย)", "voice": "th-TH-Standard-A"},
    "vi": {"name": "Vietnamese (Tiếng Việt)", "voice": "vi-VN-Wavenet-A"},
    "ar": {"name": "Arabic (العربية)", "voice": "ar-XA-Wavenet-A"},
}

LANGUAGE_CATEGORIES: Dict[str, list] = {
    "european": ["en", "es", "fr", "de", "it", "pt", "ru", "nl"],
    "indian": ["hi", "bn", "te", "mr", "ta", "ur", "gu", "kn", "ml", "pa", "or", "as"],
    "asian": ["zh", "ja", "ko", "th", "vi"],
    "other": ["ar"],
}

# Short code -> BCP-47 tag understood by browser speechSynthesis
SPEECH_LANGUAGE_CODES: Dict[str, str] = {
    "en": "en-US",
    "hi": "hi-IN",
    "bn": "bn-IN",
    "te": "te-IN",
    "mr": "mr-IN",
    "ta": "ta-IN",
    "gu": "gu-IN",
    "kn": "kn-IN",
    "ml": "ml-IN",
    "pa": "pa-IN",
    "ur": "ur-IN",
    "es": "es-ES",
    "fr": "fr-FR",
    "de": "de-DE",
    "it": "it-IT",
    "pt": "pt-PT",
    "ru": "ru-RU",
    "ja": "ja-JP",
    "ko": "ko-KR",
    "zh": "zh-CN",
    "ar": "ar-SA",
}

# Utterance settings; slightly slower than default for legal content
UTTERANCE_SETTINGS = {"rate": 0.9, "pitch": 1.0, "volume": 1.0}

FRONTEND_INSTRUCTIONS = {
    "setup": "Check if browser supports speechSynthesis API",
    "usage": "Call speechSynthesis.speak(utterance) to play audio",
    "fallback": "Show text content if speech synthesis is not available",
    "bestPractices": [
        "Check speechSynthesis.speaking before starting new speech",
        "Provide pause/resume controls for longer text",
        "Handle interruptions gracefully",
        "Test across different browsers for voice availability",
    ],
}

BROWSER_COMPATIBILITY = {
    "chrome": "Full support",
    "firefox": "Good support",
    "safari": "Good support",
    "edge": "Full support",
    "mobile": "Varies by platform",
}


def language_name(code: str) -> str:
    entry = SUPPORTED_LANGUAGES.get((code or "").lower())
    return entry["name"] if entry else code
