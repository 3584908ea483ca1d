"""Ordered regex fallbacks for pulling a single field out of PDF text."""

import re
from typing import Callable, Optional, Sequence


class RegexFieldRule:
    """
    One extractable field: patterns are tried in order, first hit wins.

    Args:
        patterns: Regex strings or compiled patterns
        group: Capture group holding the value
        clean: Optional post-processing applied to the captured text
        flags: Regex flags used when compiling string patterns
    """

    def __init__(self, patterns: Sequence, group: int = 1,
                 clean: Optional[Callable[[str], str]] = None, flags: int = re.IGNORECASE):
        self.patterns = [p if isinstance(p, re.Pattern) else re.compile(p, flags) for p in patterns]
        self.group = group
        self.clean = clean

    def search(self, text: str) -> Optional[re.Match]:
        for pattern in self.patterns:
            match = pattern.search(text or "")
            if match:
                return match
        return None

    def extract(self, text: str) -> Optional[str]:
        match = self.search(text)
        if match is None:
            return None
        value = match.group(self.group).strip()
        return self.clean(value) if self.clean else value
