"""Constants and display settings for burndown charts."""

from typing import Dict

from .types import LineKind


DEFAULT_PERIOD_DAYS = 9

CHART_HEIGHT = 200.0
LINE_WIDTH = 2.0

LINE_COLORS: Dict[LineKind, str] = {
    LineKind.IDEAL: "#ff3b30",
    LineKind.ACTUAL: "#007aff",
    LineKind.PLAN: "#34c759",
}

REMAINING_LABEL_FORMAT = "タスク残り: {remaining:.0f}"
REMAINING_LIST_LABEL_FORMAT = "タスク残り: {remaining:d}"

# Literal labels handed to QML as the "labels" context property.
UI_LABELS: Dict[str, str] = {
    "sortProgress": "進捗率順",
    "sortRemaining": "タスク残り順",
    "plan": "計画",
    "actual": "実績",
    "deleteTitle": "警告",
    "deleteMessage": "このプロジェクトを削除しますか？",
    "deleteButton": "削除",
    "newProject": "新規プロジェクト登録",
    "projectsTitle": "Projects",
    "chartTitle": "BurnDown Chart",
    "settingsTitle": "Settings",
    "settingsLink": "設定",
    "addData": "Add Data",
    "save": "Save",
}
