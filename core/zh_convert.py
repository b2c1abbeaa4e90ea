# -*- coding: utf-8 -*-
"""中文用语转换 — 面板用的同步入口，底层调用繁化姬 API"""

import asyncio

from core.zhconvert import (
    CleanUpText, ConversionStrategy, ConverterType, DiffEnable,
    DiffTemplate, DiffTemplateOption, JpTextConversionStrategy, ZhConverter,
    ZhConvertConfig,
)

CONVERTER_LABELS = {
    '简体化':         ConverterType.SIMPLIFIED,
    '繁体化':         ConverterType.TRADITIONAL,
    '中国化':         ConverterType.CHINA,
    '香港化':         ConverterType.HONGKONG,
    '台湾化':         ConverterType.TAIWAN,
    '拼音化':         ConverterType.PINYIN,
    '注音化':         ConverterType.BOPOMOFO,
    '火星文化':       ConverterType.MARS,
    '维基简体化':     ConverterType.WIKI_SIMPLIFIED,
    '维基繁体化':     ConverterType.WIKI_TRADITIONAL,
}

JP_STRATEGY_LABELS = {
    '不处理':         ConversionStrategy.NONE,
    '保护':           ConversionStrategy.PROTECT,
    '仅保护同源字':   ConversionStrategy.PROTECT_ONLY_SAME_ORIGIN,
    '修正':           ConversionStrategy.FIX,
}


def build_options(clean_up=False, jp_strategy='不处理'):
    """由面板开关生成 (texts, strategies) 选项列表"""
    texts = [CleanUpText(True)] if clean_up else []
    strategy = JP_STRATEGY_LABELS.get(jp_strategy)
    if strategy is None:
        raise ValueError(f"不支持的日文策略: {jp_strategy}")
    strategies = []
    if strategy is not ConversionStrategy.NONE:
        strategies.append(JpTextConversionStrategy(strategy))
    return texts, strategies


def convert_zh(text, direction='繁体化', clean_up=False, jp_strategy='不处理',
               show_diff=False, client=None):
    """同步转换，供 QThread 调用。

    show_diff 为 True 时返回完整响应 JSON（含 Unified 比对），否则只返回转换后的文本。
    """
    converter_type = CONVERTER_LABELS.get(direction)
    if converter_type is None:
        raise ValueError(f"不支持的转换方向: {direction}")
    texts, strategies = build_options(clean_up, jp_strategy)
    client = client or ZhConverter(config=ZhConvertConfig.from_env())

    loop = asyncio.new_event_loop()
    try:
        if show_diff:
            differents = [DiffEnable(True),
                          DiffTemplateOption(DiffTemplate.UNIFIED)]
            body = loop.run_until_complete(client.convert(
                text, converter_type, differents=differents,
                texts=texts, strategies=strategies))
            return body.decode('utf-8', errors='replace')
        return loop.run_until_complete(client.convert_text(
            text, converter_type, texts=texts, strategies=strategies))
    finally:
        loop.close()
