# -*- coding: utf-8 -*-
"""两岸三地用语转换面板（繁化姬 API）"""

from functools import partial

from PyQt5.QtWidgets import (
    QHBoxLayout, QVBoxLayout, QComboBox, QLabel, QGroupBox, QCheckBox
)
from .base_panel import BasePanel
from core.zh_convert import convert_zh, CONVERTER_LABELS, JP_STRATEGY_LABELS


class ZhconvPanel(BasePanel):

    def build_controls(self, layout):
        group = QGroupBox("转换选项")
        g = QVBoxLayout(group)

        r1 = QHBoxLayout()
        r1.addWidget(QLabel("转换为:"))
        self._direction = QComboBox()
        self._direction.addItems(list(CONVERTER_LABELS.keys()))
        self._direction.setCurrentText('台湾化')
        self._direction.setMinimumWidth(160)
        r1.addWidget(self._direction)

        r1.addWidget(QLabel("日文:"))
        self._jp = QComboBox()
        self._jp.addItems(list(JP_STRATEGY_LABELS.keys()))
        r1.addWidget(self._jp)
        r1.addStretch()
        g.addLayout(r1)

        r2 = QHBoxLayout()
        self._clean_up = QCheckBox("整理文本")
        r2.addWidget(self._clean_up)
        self._diff = QCheckBox("输出完整响应 (含比对)")
        r2.addWidget(self._diff)
        r2.addStretch()
        g.addLayout(r2)

        note = QLabel("由繁化姬 (zhconvert.org) 提供转换，需要网络连接")
        note.setStyleSheet("color:#888;font-size:11px")
        g.addWidget(note)

        layout.addWidget(group)

    def prepare(self):
        return partial(
            convert_zh,
            direction=self._direction.currentText(),
            clean_up=self._clean_up.isChecked(),
            jp_strategy=self._jp.currentText(),
            show_diff=self._diff.isChecked(),
        )

    def process(self, text):
        return self.prepare()(text)
