#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import sys
from pathlib import Path
from typing import Dict, Any, Optional, Union

from analyzer import TypeChecker
from context import Counters
from parser import parse


class ReportWriter:
    """
    读取源码 -> 语法分析 -> 类型检查 -> 写出统计行
    output 为 None 或 '-' 时写到标准输出
    """

    def __init__(self,
                 output: Optional[Union[str, Path]] = None,
                 config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.output_path = None if output in (None, '-') else Path(output).resolve()

        # 基础配置
        self.encoding = self.config.get("encoding", "utf-8")
        self.overwrite = self.config.get("overwrite", True)

        self.checker = TypeChecker()
        self.counters: Optional[Counters] = None
        self.source_name = "<string>"

    def _log(self, message: str):
        print(message, file=sys.stderr)

    def check_source(self, source: Union[str, Path]) -> 'ReportWriter':
        """检查源代码（文件路径或源码文本），成功后保存统计结果"""
        if isinstance(source, Path) or (isinstance(source, str) and os.path.isfile(source)):
            with open(source, 'r', encoding=self.encoding) as f:
                code = f.read()
            self.source_name = str(source)
        else:
            self.source_name = "<string>"
            code = str(source)

        self._log(f"[Checker] 正在检查: {self.source_name}")

        try:
            # 语法分析
            ast = parse(code)

            # 类型检查
            self.counters = self.checker.check(ast)

            self._log(f"[Checker] 检查通过: {self.counters.format()}")

        except Exception as e:
            self.counters = None
            self._log(f"[Checker] 检查失败: {e}")
            raise

        return self

    def write(self) -> bool:
        """写出统计行，返回是否真正写出"""
        if self.counters is None:
            raise RuntimeError("无法写出：尚未成功完成检查。")

        line = self.counters.format() + "\n"

        if self.output_path is None:
            sys.stdout.write(line)
            sys.stdout.flush()
            return True

        if self.output_path.exists() and not self.overwrite:
            self._log(f"[Report] 文件已存在且不允许覆盖: {self.output_path}")
            return False

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, 'w', encoding=self.encoding) as f:
            f.write(line)

        self._log(f"[Report] 已写入: {self.output_path}")
        return True
