# -*- coding: utf-8 -*-
"""繁化姬 API 客户端"""

from .client import ZhConverter, extract_text, parse_http_result
from .config import ZhConvertConfig
from .errors import (
    ConvertError, HttpCodeError, MalformedResponseError, UnknownResponseError,
)
from .options import (
    CONVERTER_NAMES, CleanUpText, ConversionStrategy, ConverterType,
    DiffCharLevel, DiffContextLines, DiffEnable, DiffIgnoreCase,
    DiffIgnoreWhiteSpaces, DiffTemplate, DiffTemplateOption, DifferentType,
    EnsureNewlineAtEof, JapaneseConversionStrategy, JpStyleConversionStrategy,
    JpTextConversionStrategy, Modules, ReplaceType, TextType,
    TranslateTabsToSpaces, TrimTrailingWhiteSpaces, UnifyLeadingHyphen,
    UserPostReplace, UserPreReplace, UserProtectReplace, build_parameters,
)
from .transport import AiohttpTransport, HttpTransport, ResponseInfo, encode_form
