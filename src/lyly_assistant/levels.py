from enum import Enum
from typing import Dict, Optional


class CognitiveLevel(str, Enum):
    """Bloom's taxonomy levels a quiz question can target."""
    REMEMBERING = "remembering"
    UNDERSTANDING = "understanding"
    APPLYING = "applying"
    ANALYZING = "analyzing"
    EVALUATING = "evaluating"
    CREATING = "creating"


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    ESSAY = "essay"


# Human-readable labels used in prompts (deployment language is Vietnamese).
LEVEL_LABELS: Dict[CognitiveLevel, str] = {
    CognitiveLevel.REMEMBERING: "Nhận biết",
    CognitiveLevel.UNDERSTANDING: "Thông hiểu",
    CognitiveLevel.APPLYING: "Vận dụng",
    CognitiveLevel.ANALYZING: "Phân tích",
    CognitiveLevel.EVALUATING: "Đánh giá",
    CognitiveLevel.CREATING: "Sáng tạo",
}

_BY_LABEL: Dict[str, CognitiveLevel] = {label.casefold(): level for level, label in LEVEL_LABELS.items()}
_BY_TAG: Dict[str, CognitiveLevel] = {level.value: level for level in CognitiveLevel}


def label_for(level: CognitiveLevel) -> str:
    return LEVEL_LABELS[level]


def parse_level(value: object) -> Optional[CognitiveLevel]:
    """Resolve a machine tag or a human label to a level; None if unknown."""
    if isinstance(value, CognitiveLevel):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().casefold()
    return _BY_TAG.get(key) or _BY_LABEL.get(key)
