"""
Link keyword table - maps known URLs to human-readable labels.

Loaded once at startup from a JSON object file ({"<url>": "<label>", ...}).
When the file does not exist the built-in table is used.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from voiceflow_bot.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LINK_KEYWORDS: dict[str, str] = {
    "https://partner.bybit.com/b/TIOMACK": "Cadastro Bybit",
    "https://www.bybit.com/pt-BR/sign-up?affiliate_id=100789&group_id=908451&group_type=1&ref_code=TIOMACK": "Cadastro Bybit",
    "https://www.bybit.com/pt-BR/help-center/article/How-to-Add-and-Check-Registered-Affiliate-Code": "Tutorial Código de Afiliado",
    "https://youtu.be/2RNdY6kYu8g": "Tutorial Transferência Titularidade",
}


def load_link_keywords(path: str | Path | None) -> Mapping[str, str]:
    """Load the keyword table as a read-only mapping.

    Raises:
        ConfigurationError: If the file exists but is not a JSON object of strings.
    """
    if not path or not Path(path).is_file():
        logger.info("Link keywords file not found (%s), using built-in table", path)
        return MappingProxyType(dict(DEFAULT_LINK_KEYWORDS))

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in link keywords file {path}: {e}") from e

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ConfigurationError(
            f"Link keywords file {path} must be a JSON object of url -> label strings"
        )

    logger.info("Loaded %d link keywords from %s", len(data), path)
    return MappingProxyType(data)
