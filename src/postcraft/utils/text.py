"""Text cleanup and post feature detection."""

import re

_WHITESPACE_RE = re.compile(r"\s+")

# Emoticons, symbols & pictographs, transport, alchemical, geometric shapes
# extended, supplemental arrows, supplemental symbols, chess, symbols &
# pictographs extended-A, misc symbols, dingbats.
_EMOJI_RE = re.compile(
    "["
    "\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F700-\U0001F77F"
    "\U0001F780-\U0001F7FF"
    "\U0001F800-\U0001F8FF"
    "\U0001F900-\U0001F9FF"
    "\U0001FA00-\U0001FA6F"
    "\U0001FA70-\U0001FAFF"
    "\U00002600-\U000026FF"
    "\U00002700-\U000027BF"
    "]"
)

_HASHTAG_RE = re.compile(r"(?<![\w#])#\w+")


def clean_text(text: str) -> str:
    """Collapse newlines and whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text.replace("\n", " ")).strip()


def has_emoji(text: str) -> bool:
    return _EMOJI_RE.search(text) is not None


def has_hashtag(text: str) -> bool:
    return _HASHTAG_RE.search(text) is not None
