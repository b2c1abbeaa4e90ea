# -*- coding: utf-8 -*-
"""繁化姬转换参数 — 转换类型、取代规则、比对/文本/日文选项 → 扁平请求参数

每个选项对应 API 的一个固定参数名，``parameter()`` 返回它在请求里的取值。
同一个键出现多次时以最后一次为准。
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Union

logger = logging.getLogger(__name__)

ParamValue = Union[str, bool, int]
RequestParameters = Dict[str, ParamValue]


class ConverterType(Enum):
    """转换的目标用语 / 字形"""
    SIMPLIFIED       = 'simplified'        # 简体化
    TRADITIONAL      = 'traditional'       # 繁体化
    CHINA            = 'china'             # 中国化
    HONGKONG         = 'hongkong'          # 香港化
    TAIWAN           = 'taiwan'            # 台湾化
    PINYIN           = 'pinyin'            # 拼音化
    BOPOMOFO         = 'bopomofo'          # 注音化
    MARS             = 'mars'              # 火星文化
    WIKI_SIMPLIFIED  = 'wikiSimplified'    # 维基简体化
    WIKI_TRADITIONAL = 'wikiTraditional'   # 维基繁体化


# API 的 converter 参数值，改名前务必确认远端兼容
CONVERTER_NAMES = {
    ConverterType.SIMPLIFIED:       'Simplified',
    ConverterType.TRADITIONAL:      'Traditional',
    ConverterType.CHINA:            'China',
    ConverterType.HONGKONG:         'Hongkong',
    ConverterType.TAIWAN:           'Taiwan',
    ConverterType.PINYIN:           'Pinyin',
    ConverterType.BOPOMOFO:         'Bopomofo',
    ConverterType.MARS:             'Mars',
    ConverterType.WIKI_SIMPLIFIED:  'WikiSimplified',
    ConverterType.WIKI_TRADITIONAL: 'WikiTraditional',
}


def converter_name(converter_type: ConverterType) -> str:
    try:
        return CONVERTER_NAMES[converter_type]
    except KeyError:
        raise ValueError(f"不支持的转换类型: {converter_type!r}") from None


class DiffTemplate(Enum):
    """比对结果的输出模板"""
    INLINE       = 'Inline'
    SIDE_BY_SIDE = 'SideBySide'
    UNIFIED      = 'Unified'
    CONTEXT      = 'Context'
    JSON_HTML    = 'JsonHtml'
    JSON_TEXT    = 'JsonText'


class ConversionStrategy(Enum):
    """日文片段的处理策略"""
    NONE                     = 'none'
    PROTECT                  = 'protect'
    PROTECT_ONLY_SAME_ORIGIN = 'protectOnlySameOrigin'
    FIX                      = 'fix'


def _query_string(mapping: Dict[str, str], separator: str = '\n') -> str:
    """{'A': 'B', 'C': 'D'} → 'A=B\\nC=D'（键值中的 = 与换行不做转义）"""
    return separator.join(f"{k}={v}" for k, v in mapping.items())


def _check_int(name: str, value: int, low: int, high: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} 必须是整数: {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} 超出范围 [{low}, {high}]: {value}")


def _check_bool(name: str, value: bool):
    if not isinstance(value, bool):
        raise ValueError(f"{name} 必须是布尔值: {value!r}")


# ══════════════════════════════════════════════════════════════
#  选项基类
# ══════════════════════════════════════════════════════════════

class _Option:
    """所有选项的公共接口: 固定参数名 + 参数值"""
    key: str = ''

    def parameter(self) -> Optional[ParamValue]:
        """返回请求参数值；None 表示省略该键"""
        raise NotImplementedError


@dataclass(frozen=True)
class _FlagOption(_Option):
    enabled: bool = True

    def __post_init__(self):
        _check_bool(self.key, self.enabled)

    def parameter(self) -> bool:
        return self.enabled


# ── 自定义取代 ────────────────────────────────────────────────

class ReplaceType(_Option):
    """自定义取代规则"""


@dataclass(frozen=True)
class Modules(ReplaceType):
    """强制启用 (1) / 停用 (0) 指定模块"""
    mapping: Dict[str, int]
    key = 'modules'

    def parameter(self) -> Optional[str]:
        try:
            return json.dumps(self.mapping, ensure_ascii=False,
                              separators=(',', ':'), allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.warning("modules 参数无法序列化，已忽略: %s", e)
            return None


@dataclass(frozen=True)
class _MappingReplace(ReplaceType):
    mapping: Dict[str, str]

    def parameter(self) -> str:
        return _query_string(self.mapping)


@dataclass(frozen=True)
class UserPostReplace(_MappingReplace):
    """转换后再进行的额外取代"""
    key = 'userPostReplace'


@dataclass(frozen=True)
class UserPreReplace(_MappingReplace):
    """转换前先进行的额外取代"""
    key = 'userPreReplace'


@dataclass(frozen=True)
class UserProtectReplace(_MappingReplace):
    """保护字词不被转换"""
    key = 'userProtectReplace'


# ── 比对输出 ──────────────────────────────────────────────────

class DifferentType(_Option):
    """转换前后的差异比对选项"""


@dataclass(frozen=True)
class DiffCharLevel(_FlagOption, DifferentType):
    """以字符为单位比对"""
    key = 'diffCharLevel'


@dataclass(frozen=True)
class DiffContextLines(DifferentType):
    """差异上下文行数 (0-4)"""
    lines: int
    key = 'diffContextLines'

    def __post_init__(self):
        _check_int(self.key, self.lines, 0, 4)

    def parameter(self) -> int:
        return self.lines


@dataclass(frozen=True)
class DiffEnable(_FlagOption, DifferentType):
    key = 'diffEnable'


@dataclass(frozen=True)
class DiffIgnoreCase(_FlagOption, DifferentType):
    key = 'diffIgnoreCase'


@dataclass(frozen=True)
class DiffIgnoreWhiteSpaces(_FlagOption, DifferentType):
    key = 'diffIgnoreWhiteSpaces'


@dataclass(frozen=True)
class DiffTemplateOption(DifferentType):
    template: DiffTemplate
    key = 'diffTemplate'

    def __post_init__(self):
        if not isinstance(self.template, DiffTemplate):
            raise ValueError(f"未知比对模板: {self.template!r}")

    def parameter(self) -> str:
        return self.template.value


# ── 文本整理 ──────────────────────────────────────────────────

class TextType(_Option):
    """空白 / 格式整理选项"""


@dataclass(frozen=True)
class CleanUpText(_FlagOption, TextType):
    key = 'cleanUpText'


@dataclass(frozen=True)
class EnsureNewlineAtEof(_FlagOption, TextType):
    key = 'ensureNewlineAtEof'


@dataclass(frozen=True)
class TranslateTabsToSpaces(TextType):
    """Tab 转空格数量，-1 表示不转换"""
    spaces: int
    key = 'translateTabsToSpaces'

    def __post_init__(self):
        _check_int(self.key, self.spaces, -1, 8)

    def parameter(self) -> int:
        return self.spaces


@dataclass(frozen=True)
class TrimTrailingWhiteSpaces(_FlagOption, TextType):
    key = 'trimTrailingWhiteSpaces'


@dataclass(frozen=True)
class UnifyLeadingHyphen(_FlagOption, TextType):
    key = 'unifyLeadingHyphen'


# ── 日文处理 ──────────────────────────────────────────────────

class JapaneseConversionStrategy(_Option):
    """日文样式 / 文本的转换策略"""


@dataclass(frozen=True)
class _StrategyOption(JapaneseConversionStrategy):
    strategy: ConversionStrategy

    def __post_init__(self):
        if not isinstance(self.strategy, ConversionStrategy):
            raise ValueError(f"未知转换策略: {self.strategy!r}")

    def parameter(self) -> str:
        return self.strategy.value


@dataclass(frozen=True)
class JpStyleConversionStrategy(_StrategyOption):
    key = 'jpStyleConversionStrategy'


@dataclass(frozen=True)
class JpTextConversionStrategy(_StrategyOption):
    key = 'jpTextConversionStrategy'


# ══════════════════════════════════════════════════════════════
#  参数组装
# ══════════════════════════════════════════════════════════════

def _apply(params: RequestParameters, options: Optional[Iterable[_Option]],
           kind: type):
    if not options:
        return
    for option in options:
        if not isinstance(option, kind):
            raise TypeError(
                f"{type(option).__name__} 不是 {kind.__name__} 选项")
        value = option.parameter()
        if value is None:
            continue
        params[option.key] = value


def build_parameters(text: str, converter_type: ConverterType,
                     replaces: Optional[Iterable[ReplaceType]] = None,
                     differents: Optional[Iterable[DifferentType]] = None,
                     texts: Optional[Iterable[TextType]] = None,
                     strategies: Optional[Iterable[JapaneseConversionStrategy]] = None,
                     ) -> RequestParameters:
    """组装 /convert 的请求参数。每次调用都返回新的 dict。"""
    params: RequestParameters = {
        'text': text,
        'converter': converter_name(converter_type),
    }
    _apply(params, replaces, ReplaceType)
    _apply(params, differents, DifferentType)
    _apply(params, texts, TextType)
    _apply(params, strategies, JapaneseConversionStrategy)
    return params
