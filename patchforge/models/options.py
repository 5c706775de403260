from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional


class MatchStrategy(str, enum.Enum):
    """How the search engine lays windows over the document."""

    FIXED_WINDOW = "fixed_window"          # slide the whole block, N-1..N+1 lines
    CONTEXT_ANCHORED = "context_anchored"  # shrink windows, score leading/trailing agreement


DEFAULT_MIN_CONFIDENCE = {
    MatchStrategy.FIXED_WINDOW: 0.7,
    MatchStrategy.CONTEXT_ANCHORED: 0.6,
}

# host setting key -> field name
_SETTING_KEYS = {
    "fuzzyMatch": "fuzzy_match",
    "fuzzy_match": "fuzzy_match",
    "minConfidence": "min_confidence",
    "min_confidence": "min_confidence",
    "contextLines": "context_lines",
    "context_lines": "context_lines",
    "strategy": "strategy",
}


def _parse_flag(value: Any) -> bool:
    """Booleans, 0/1, or the strings "true"/"false" (any case)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"fuzzyMatch must be a boolean, got {value!r}")


@dataclass(frozen=True)
class PatchOptions:
    """
    Tunables for one engine call.

    `min_confidence` and `strategy` may be left as None; `resolved()` fills
    them in once the shape of the input is known.
    """

    fuzzy_match: bool = True
    min_confidence: Optional[float] = None
    context_lines: int = 2
    strategy: Optional[MatchStrategy] = None

    def __post_init__(self) -> None:
        if self.min_confidence is not None and not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be within [0, 1], got {self.min_confidence!r}")
        if self.context_lines < 0:
            raise ValueError(f"context_lines must be >= 0, got {self.context_lines!r}")
        if self.strategy is not None and not isinstance(self.strategy, MatchStrategy):
            # Accept the enum's string value as well.
            object.__setattr__(self, "strategy", MatchStrategy(self.strategy))

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]]) -> "PatchOptions":
        """
        Build options from a host settings mapping.

        Accepts camelCase (`fuzzyMatch`, `minConfidence`, `contextLines`) or
        snake_case keys. Unknown keys and None values are ignored.
        """
        if not settings:
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in settings.items():
            field_name = _SETTING_KEYS.get(key)
            if field_name is None or value is None:
                continue
            kwargs[field_name] = value
        if "fuzzy_match" in kwargs:
            kwargs["fuzzy_match"] = _parse_flag(kwargs["fuzzy_match"])
        if "min_confidence" in kwargs:
            kwargs["min_confidence"] = float(kwargs["min_confidence"])
        if "context_lines" in kwargs:
            kwargs["context_lines"] = int(kwargs["context_lines"])
        return cls(**kwargs)

    def resolved(self, default_strategy: MatchStrategy) -> "PatchOptions":
        """Return a copy with `strategy` and `min_confidence` filled in."""
        strategy = self.strategy or default_strategy
        min_confidence = self.min_confidence
        if min_confidence is None:
            min_confidence = DEFAULT_MIN_CONFIDENCE[strategy]
        return replace(self, strategy=strategy, min_confidence=min_confidence)
