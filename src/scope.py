from typing import Dict

from errors import DuplicateDeclarationError, UndefinedIdentifierError
from my_types import VarType


class SymbolTable:
    """
    符号表 - 标识符到声明类型的映射
    语言没有嵌套作用域，整个分析过程只有一张表，且已有条目不可被覆盖
    """

    def __init__(self):
        self.symbols: Dict[str, VarType] = {}

    def declare(self, name: str, t: VarType):
        """声明变量，重复声明直接报错"""
        if name in self.symbols:
            raise DuplicateDeclarationError(name)
        self.symbols[name] = t

    def lookup(self, name: str) -> VarType:
        """查找变量类型"""
        t = self.symbols.get(name)
        if t is None:
            raise UndefinedIdentifierError(name)
        return t

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

