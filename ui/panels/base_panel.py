# -*- coding: utf-8 -*-
"""面板基类 — 输入区 / 选项区 / 输出区骨架，process() 在后台线程执行"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTextEdit,
    QPushButton, QLabel, QApplication, QShortcut
)
from PyQt5.QtGui import QFont, QKeySequence
from PyQt5.QtCore import QThread, pyqtSignal


# ── 后台执行线程 ─────────────────────────────────────────────
class ProcessThread(QThread):
    done  = pyqtSignal(str)
    error = pyqtSignal(str, str)      # (异常类名, 信息)

    def __init__(self, func, text):
        super().__init__()
        self._func = func
        self._text = text

    def run(self):
        try:
            self.done.emit(self._func(self._text))
        except Exception as e:
            self.error.emit(type(e).__name__, str(e))


class BasePanel(QWidget):
    """子类实现:
        build_controls(layout)  — 添加选项控件
        process(input_text)     — 返回结果字符串（在后台线程调用，勿操作控件）
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._mono = QFont("Consolas", 10)
        self._mono.setStyleHint(QFont.Monospace)
        self._thread = None
        self._build_ui()

    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(10, 8, 10, 6)
        root.setSpacing(6)

        hdr_in = QHBoxLayout()
        hdr_in.addWidget(QLabel("输入:"))
        hdr_in.addStretch()
        self._char_label = QLabel("")
        hdr_in.addWidget(self._char_label)
        root.addLayout(hdr_in)

        self.input_area = QTextEdit()
        self.input_area.setFont(self._mono)
        self.input_area.setPlaceholderText("在此输入或粘贴中文…")
        self.input_area.setMinimumHeight(100)
        self.input_area.textChanged.connect(self._update_char_count)
        root.addWidget(self.input_area, stretch=3)

        self._ctrl_layout = QVBoxLayout()
        self.build_controls(self._ctrl_layout)
        root.addLayout(self._ctrl_layout)

        btn_row = QHBoxLayout()
        self._exec_btn = QPushButton("▶  转换")
        self._exec_btn.setFixedHeight(34)
        self._exec_btn.setStyleSheet(
            "QPushButton{background:#0078d4;color:#fff;font-weight:bold;"
            "font-size:13px;border-radius:4px;padding:0 22px}"
            "QPushButton:hover{background:#106ebe}"
            "QPushButton:disabled{background:#9bbfe0}")
        self._exec_btn.clicked.connect(self._on_execute)
        btn_row.addWidget(self._exec_btn)
        self._clear_btn = QPushButton("清空")
        self._clear_btn.setFixedHeight(30)
        self._clear_btn.clicked.connect(self._clear)
        btn_row.addWidget(self._clear_btn)
        btn_row.addStretch()
        root.addLayout(btn_row)

        hdr_out = QHBoxLayout()
        hdr_out.addWidget(QLabel("输出:"))
        hdr_out.addStretch()
        self._copy_btn = QPushButton("复制")
        self._copy_btn.setFixedWidth(70)
        self._copy_btn.clicked.connect(self._copy)
        hdr_out.addWidget(self._copy_btn)
        root.addLayout(hdr_out)

        self.output_area = QTextEdit()
        self.output_area.setFont(self._mono)
        self.output_area.setReadOnly(True)
        self.output_area.setPlaceholderText("结果将显示在此…")
        self.output_area.setMinimumHeight(100)
        root.addWidget(self.output_area, stretch=3)

        self._status_label = QLabel("就绪")
        self._status_label.setStyleSheet("color:#666;font-size:11px")
        root.addWidget(self._status_label)

        QShortcut(QKeySequence("Ctrl+Return"), self, self._on_execute)

    # ── 子类接口 ────────────────────────────────────────────
    def build_controls(self, layout):
        """子类重写：向 layout 添加自己的控件"""

    def process(self, input_text: str) -> str:
        raise NotImplementedError

    def prepare(self):
        """执行前在 UI 线程读取控件状态，返回 process 需要的函数"""
        return self.process

    # ── 内部逻辑 ────────────────────────────────────────────
    def _on_execute(self):
        if self._thread and self._thread.isRunning():
            return
        text = self.input_area.toPlainText()
        if not text:
            self._status("请先输入文本")
            return
        self._exec_btn.setEnabled(False)
        self._status("请求中…")
        self._thread = ProcessThread(self.prepare(), text)
        self._thread.done.connect(self._on_done)
        self._thread.error.connect(self._on_error)
        self._thread.start()

    def _on_done(self, result):
        self.output_area.setPlainText(result)
        self._exec_btn.setEnabled(True)
        self._status(f"完成，{len(result)} 字符")

    def _on_error(self, name, msg):
        self.output_area.setPlainText(f"错误 [{name}]: {msg}")
        self._exec_btn.setEnabled(True)
        self._status(f"出错: {name}")

    def _status(self, msg: str):
        self._status_label.setText(msg)

    def _update_char_count(self):
        t = self.input_area.toPlainText()
        self._char_label.setText(f"{len(t)} 字符 / {len(t.encode('utf-8'))} 字节")

    def _clear(self):
        self.input_area.clear()
        self.output_area.clear()
        self._char_label.setText("")
        self._status("已清空")

    def _copy(self):
        t = self.output_area.toPlainText()
        if t:
            QApplication.clipboard().setText(t)
            self._status("已复制到剪贴板")
