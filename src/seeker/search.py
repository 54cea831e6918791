"""Fixed-corpus substring search.

``StaticSearchIndex`` is a placeholder for a real indexing engine: anything
implementing the ``SearchIndex`` protocol can replace it without touching the
metadata store.
"""

from __future__ import annotations

DEFAULT_CORPUS: tuple[str, ...] = (
    "ICP Ledger Canister",
    "Internet Identity",
    "NNS Governance Dapp",
    "OpenChat",
    "DSCVR",
    "Sonic DEX",
    "ICPSwap",
    "Entrepot NFT Marketplace",
    "Yumi NFT Marketplace",
    "Plug Wallet",
    "Distrikt",
    "Taggr",
    "Seeker: discovery for canisters and dApps",
    "DAppStore was launched on the ICP July 24th, 2025",
)

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_ASCII_FOLD = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)


def ascii_fold(text: str) -> str:
    """Lower-case ``A``-``Z`` only; every other character is left as is.

    Unlike ``str.lower()``, non-ASCII letters such as ``"É"`` are never folded.
    """
    return text.translate(_ASCII_FOLD)


class StaticSearchIndex:
    """Case-insensitive substring filter over an immutable corpus."""

    def __init__(self, corpus: tuple[str, ...] = DEFAULT_CORPUS) -> None:
        self._corpus = corpus
        # corpus never changes, so fold it once
        self._folded = tuple(ascii_fold(entry) for entry in corpus)

    @property
    def corpus(self) -> tuple[str, ...]:
        return self._corpus

    def search(self, term: str) -> list[str]:
        """Return corpus entries containing ``term``, in corpus order.

        An empty term matches everything.
        """
        if not term:
            return list(self._corpus)
        needle = ascii_fold(term)
        return [
            entry
            for entry, folded in zip(self._corpus, self._folded, strict=True)
            if needle in folded
        ]
