#!/usr/bin/env python3
"""
Startup script for the LexLink backend
"""

import logging
import os
import sys

import requests
from dotenv import load_dotenv

from app import create_app
from extraction.config import AppConfig

logger = logging.getLogger("lexlink.start")


def check_ollama(base_url: str) -> bool:
    """Check if the local Ollama service is running"""
    try:
        response = requests.get(f"{base_url.rstrip('/')}/api/tags", timeout=5)
        if response.status_code == 200:
            models = response.json().get('models', [])
            if models:
                logger.info("Ollama is running. Available models: %s", ", ".join(m['name'] for m in models))
            else:
                logger.warning("Ollama is running but has no models installed")
            return True
        logger.warning("Ollama responded with status %s", response.status_code)
        return False
    except requests.exceptions.RequestException as e:
        logger.warning("Ollama is not reachable at %s: %s", base_url, e)
        return False


def main():
    load_dotenv()
    config = AppConfig()
    app = create_app(config)

    ai = config.get_ai_config()
    logger.info("=== AI SERVICE CONFIGURATION ===")
    logger.info("AI_SERVICE: %s", ai["service"])
    logger.info("Credential: %s", "SET" if ai["credential_set"] else "NOT SET")
    logger.info("Timeout: %s", ai["timeout"] or "none")

    if config.provider == "ollama":
        check_ollama(config.ollama_base_url)
    elif not config.has_credential:
        logger.warning("No API key for %s; every AI endpoint will answer in demo mode", config.provider)

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3001"))
    logger.info("Health check: http://localhost:%d/api/health", port)

    try:
        app.run(host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
    except OSError as e:
        logger.error("Error starting server: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
