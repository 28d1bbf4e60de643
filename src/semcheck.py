#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
semcheck 命令行类型检查器
用法: semcheck <源文件路径> [输出文件路径(默认标准输出)]

示例:
    semcheck demo.txt
    semcheck demo.txt ./result.txt
    python3 semcheck.py tests/data/loop.txt -
"""

import sys
import os
from pathlib import Path

# 确保能导入同级目录的模块
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from errors import SemanticError
from report_writer import ReportWriter


def print_usage():
    print(__doc__, file=sys.stderr)
    print("参数说明:", file=sys.stderr)
    print("  source   - 源文件路径", file=sys.stderr)
    print("  output   - 统计结果输出文件 (可选, '-' 或省略表示标准输出)", file=sys.stderr)
    print("环境变量:", file=sys.stderr)
    print("  SEMCHECK_DEBUG - 设置后失败时打印完整堆栈", file=sys.stderr)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    # 参数检查
    if len(args) < 1 or len(args) > 2 or args[0] in ('-h', '--help'):
        print_usage()
        return 1

    source_file = args[0]
    output = args[1] if len(args) > 1 else '-'

    # 验证源文件
    source_path = Path(source_file)
    if not source_path.exists():
        print(f"✗ 错误: 源文件不存在: {source_file}", file=sys.stderr)
        return 1

    if not source_path.is_file():
        print(f"✗ 错误: 源路径不是文件: {source_file}", file=sys.stderr)
        return 1

    # 配置
    config = {
        "encoding": "utf-8",
        "overwrite": True,
    }

    print(f"[semcheck] 开始检查 {source_path.absolute()}", file=sys.stderr)

    try:
        writer = ReportWriter(output, config)
        writer.check_source(source_path)
        writer.write()

    except (SemanticError, SyntaxError, OSError) as e:
        kind = "语义错误" if isinstance(e, SemanticError) else "错误"
        print(f"✗ 检查失败! {kind}: {e}", file=sys.stderr)

        # 调试模式显示堆栈
        if os.environ.get("SEMCHECK_DEBUG"):
            import traceback
            traceback.print_exc()

        return 1

    print("✓ 检查成功!", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
