"""
URL formatting utilities for outgoing chat messages.

Voiceflow messages carry markdown-style links ``[text](url)``. Telegram is sent
HTML, so known URLs become ``<a href="url">label</a>`` with the label taken
from the keyword table, and any other link collapses to its bare URL.
"""

import re
from typing import Mapping

# Non-greedy on both parts so several links on one line are matched separately
MARKDOWN_LINK_PATTERN = re.compile(r"\[(.*?)\]\((.*?)\)")


def replace_links_with_keywords(text: str, keywords: Mapping[str, str]) -> str:
    """Rewrite markdown links in text using the URL -> label table.

    Args:
        text: Message text from the engine
        keywords: Known URLs mapped to their display labels

    Returns:
        Text with every markdown link replaced; unchanged if there are none
    """

    def _replace(match: re.Match) -> str:
        url = match.group(2)
        label = keywords.get(url)
        if label:
            return f'<a href="{url}">{label}</a>'
        return url

    return MARKDOWN_LINK_PATTERN.sub(_replace, text)


class LinkFormatter:
    """Binds the keyword table loaded at startup to the rewrite function."""

    def __init__(self, keywords: Mapping[str, str]):
        self._keywords = keywords

    @property
    def keywords(self) -> Mapping[str, str]:
        return self._keywords

    def format(self, text: str) -> str:
        return replace_links_with_keywords(text, self._keywords)
