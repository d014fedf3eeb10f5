"""노선 정의 및 검증

지원 노선의 데이터 파일 경로와 별칭을 관리한다.
"""

from __future__ import annotations

# 노선 ID → 방향별 시각표 파일 (data_dir 기준 상대 경로)
DATA_FILES: dict[str, dict[str, str]] = {
    "main": {
        "down": "main-line-down.json",
        "up": "main-line-up.json",
    },
    "ikawa": {
        "down": "ikawa-line-down.json",
        "up": "ikawa-line-up.json",
    },
}

# 노선 ID → 표시 이름
LINE_LABELS: dict[str, str] = {
    "main": "大井川本線",
    "ikawa": "井川線",
}

# 별칭 → 노선 ID
LINE_ALIASES: dict[str, str] = {
    "本線": "main",
    "大井川本線": "main",
    "井川線": "ikawa",
    "南アルプスあぷとライン": "ikawa",
}


def validate_line(name: str) -> str:
    """노선 이름 정규화 및 검증.

    별칭(井川線 → ikawa)을 처리하고, 지원하지 않는 노선이면 ValueError.
    """
    normalized = name.strip().replace(" ", "")

    if normalized in LINE_ALIASES:
        normalized = LINE_ALIASES[normalized]

    if normalized not in DATA_FILES:
        lines = ", ".join(sorted(DATA_FILES.keys()))
        raise ValueError(
            f"'{name}'은(는) 지원하지 않는 노선입니다. "
            f"지원 노선: {lines}"
        )
    return normalized


def line_label(line: str) -> str:
    return LINE_LABELS.get(line, line)
