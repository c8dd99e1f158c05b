from enum import Enum


class HitCategory(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    HOME_RUN = "home_run"
    OUT = "out"
    UNKNOWN = "unknown"

    @property
    def color(self) -> str:
        return _HIT_COLORS[self]


_HIT_COLORS: dict[HitCategory, str] = {
    HitCategory.SINGLE: "#4ade80",
    HitCategory.DOUBLE: "#fbbf24",
    HitCategory.TRIPLE: "#f97316",
    HitCategory.HOME_RUN: "#ef4444",
    HitCategory.OUT: "#6b7280",
    HitCategory.UNKNOWN: "#9ca3af",
}

_PLAY_RESULTS: dict[str, HitCategory] = {
    "Single": HitCategory.SINGLE,
    "Double": HitCategory.DOUBLE,
    "Triple": HitCategory.TRIPLE,
    "HomeRun": HitCategory.HOME_RUN,
    "Out": HitCategory.OUT,
    "FieldersChoice": HitCategory.OUT,
    "Sacrifice": HitCategory.OUT,
}


def classify(play_result: str | None) -> HitCategory:
    """Bucket a play result for the spray chart; unrecognized input is UNKNOWN."""
    if not isinstance(play_result, str):
        return HitCategory.UNKNOWN
    return _PLAY_RESULTS.get(play_result, HitCategory.UNKNOWN)


class PitchCallCategory(Enum):
    STRIKE = "strike"
    BALL = "ball"
    IN_PLAY = "in_play"
    OTHER = "other"

    @property
    def color(self) -> str:
        return _CALL_COLORS[self]


_CALL_COLORS: dict[PitchCallCategory, str] = {
    PitchCallCategory.STRIKE: "#ef4444",
    PitchCallCategory.BALL: "#3b82f6",
    PitchCallCategory.IN_PLAY: "#10b981",
    PitchCallCategory.OTHER: "#6b7280",
}

_PITCH_CALLS: dict[str, PitchCallCategory] = {
    "StrikeCalled": PitchCallCategory.STRIKE,
    "StrikeSwinging": PitchCallCategory.STRIKE,
    "Ball": PitchCallCategory.BALL,
    "BallCalled": PitchCallCategory.BALL,
    "InPlay": PitchCallCategory.IN_PLAY,
}


def classify_pitch_call(pitch_call: str | None) -> PitchCallCategory:
    if not isinstance(pitch_call, str):
        return PitchCallCategory.OTHER
    return _PITCH_CALLS.get(pitch_call, PitchCallCategory.OTHER)


PITCH_TYPE_COLORS: dict[str, str] = {
    "Four-Seam": "#ff6b35",
    "Curveball": "#8b5cf6",
    "Slider": "#06b6d4",
    "Changeup": "#96ceb4",
    "Cutter": "#feca57",
    "Sinker": "#ff9ff3",
    "Splitter": "#54a0ff",
}
DEFAULT_PITCH_TYPE_COLOR = "#9ca3af"


def pitch_type_color(pitch_type: str | None) -> str:
    if pitch_type is None:
        return DEFAULT_PITCH_TYPE_COLOR
    return PITCH_TYPE_COLORS.get(pitch_type, DEFAULT_PITCH_TYPE_COLOR)
