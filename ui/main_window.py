# -*- coding: utf-8 -*-
"""主窗口 — 标题栏 + 用语转换面板"""

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel

from .panels.zhconv_panel import ZhconvPanel


class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self.setWindowTitle("繁化姬 — 两岸三地用语转换")
        self.resize(900, 640)
        self.setMinimumSize(640, 480)
        self._build_ui()

    def _build_ui(self):
        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        title = QLabel("  简繁 / 两岸三地用语转换")
        title.setFixedHeight(44)
        title.setStyleSheet(
            "background: qlineargradient(x1:0,y1:0,x2:1,y2:0,"
            "stop:0 #1a1f2e, stop:1 #232939);"
            "color:#ffffff; font-size:15px; font-weight:bold;")
        root.addWidget(title)

        self.panel = ZhconvPanel()
        root.addWidget(self.panel, stretch=1)
        self.setCentralWidget(central)
