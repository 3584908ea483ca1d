"""Customs broker (despachante) email directory."""

from typing import Iterable, List, Sequence, Tuple

from config import BROKER_EMAILS


class BrokerEmailDirectory:
    """Ordered key -> email(s) lookup with substring and token fallbacks."""

    def __init__(self, entries: Sequence[Tuple[str, str]] = BROKER_EMAILS, *, min_token_len: int = 3):
        self.entries: List[Tuple[str, str]] = [(k.upper(), v) for k, v in entries]
        self.min_token_len = min_token_len

    def lookup(self, broker_name: str) -> str:
        """
        Find the contact emails of a customs broker.

        Matching order, first hit wins:
        1. exact key
        2. substring either direction, in directory order
        3. any name token (3+ chars) contained in any key token

        Returns:
            Semicolon-joined emails, or "" when nothing matches
        """
        if not broker_name:
            return ""
        name = broker_name.upper().strip()
        if not name:
            return ""

        for key, emails in self.entries:
            if key == name:
                return emails

        for key, emails in self.entries:
            if key in name or name in key:
                return emails

        name_tokens = [t for t in name.split() if len(t) >= self.min_token_len]
        for key, emails in self.entries:
            key_tokens = key.split()
            if any(t in kt for t in name_tokens for kt in key_tokens):
                return emails

        return ""

    def contacts_for(self, brokers: Iterable[str]) -> str:
        """
        Build the "BROKER: emails" summary for distinct brokers with a hit.

        Blocks are separated by a blank line, in first-seen order.
        """
        seen = []
        for broker in brokers:
            if broker and broker not in seen:
                seen.append(broker)

        blocks = []
        for broker in seen:
            emails = self.lookup(broker)
            if emails:
                blocks.append(f"{broker}: {emails}")
        return "\n\n".join(blocks)
