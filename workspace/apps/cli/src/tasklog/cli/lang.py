"""项目语言设定与语言校验

每个项目可设定期望语言（lang.json: {project: code}）。
创建任务时标题和描述需通过语言校验，校验发生在写入事件之前。
"""

import json
from pathlib import Path

import structlog
from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from .exceptions import LanguageMismatchError, UnsupportedLanguageError

log = structlog.get_logger()

# langdetect 默认带随机性，固定种子保证同一文本结果一致
DetectorFactory.seed = 0

# 短于此长度的文本不做检测
MIN_TEXT_LENGTH = 8

# 低于此置信度的检测结果不作为拒绝依据
CONFIDENCE_THRESHOLD = 0.5

# ISO 639-3 -> ISO 639-1
_ISO639_3_TO_1: dict[str, str] = {
    "jpn": "ja",
    "eng": "en",
    "cmn": "zh",
    "zho": "zh",
    "kor": "ko",
    "spa": "es",
    "fra": "fr",
    "deu": "de",
    "ita": "it",
    "por": "pt",
    "rus": "ru",
    "ara": "ar",
    "hin": "hi",
    "nld": "nl",
    "swe": "sv",
    "tur": "tr",
    "vie": "vi",
}

SUPPORTED_LANGS: frozenset[str] = frozenset(_ISO639_3_TO_1.values())


class LangConfig:
    """项目 -> 语言代码 的 JSON 配置文件"""

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, project: str) -> str | None:
        return self._load().get(project)

    def set(self, project: str, code: str) -> None:
        config = self._load()
        config[project] = code
        self._save(config)

    def unset(self, project: str) -> None:
        config = self._load()
        config.pop(project, None)
        self._save(config)

    def _load(self) -> dict[str, str]:
        """读取配置；文件缺失或内容无效时视为空配置"""
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning("lang_config_unreadable", path=str(self._path), error=str(e))
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, config: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(config, ensure_ascii=False),
            encoding="utf-8",
        )


def resolve_lang(code: str) -> str | None:
    """把 ISO 639-1 / 639-3 代码归一化为 639-1，不支持时返回 None"""
    normalized = code.strip().lower()
    if normalized in SUPPORTED_LANGS:
        return normalized
    return _ISO639_3_TO_1.get(normalized)


def _normalize_detected(code: str) -> str:
    # langdetect 对中文返回 zh-cn / zh-tw
    if code.startswith("zh"):
        return "zh"
    return code


def validate_language(text: str, expected_code: str, field: str = "text") -> None:
    """校验文本语言是否与期望一致

    Args:
        text: 待校验文本
        expected_code: 期望语言代码
        field: 字段名（用于错误信息）

    Raises:
        UnsupportedLanguageError: 期望语言代码不受支持
        LanguageMismatchError: 以足够置信度检测到其他语言
    """
    if len(text) < MIN_TEXT_LENGTH:
        return

    expected = resolve_lang(expected_code)
    if expected is None:
        raise UnsupportedLanguageError(expected_code)

    try:
        candidates = detect_langs(text)
    except LangDetectException as e:
        # 没有可识别的语言特征（纯数字、符号等），不拒绝
        log.debug("language_undetected", field=field, error=str(e))
        return

    if not candidates:
        return

    top = candidates[0]
    detected = _normalize_detected(top.lang)
    if top.prob >= CONFIDENCE_THRESHOLD and detected != expected:
        raise LanguageMismatchError(
            field=field,
            expected=expected_code,
            detected=detected,
            confidence=top.prob,
        )
