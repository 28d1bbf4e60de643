from enum import Enum
from typing import Optional


class VarType(Enum):
    """
    语言中仅有的两种标量类型：
    - Number: 由 `num` 声明，整数字面量
    - Bool:   由 `bool` 声明，true / false
    """
    Number = 'num'
    Bool = 'bool'

    def __str__(self):
        return self.name

    def is_numeric(self) -> bool:
        return self is VarType.Number


# 声明关键字 -> 类型
TYPE_KEYWORDS = {
    'num': VarType.Number,
    'bool': VarType.Bool,
}


def type_from_keyword(keyword: str) -> Optional[VarType]:
    """根据声明关键字获取类型，未知关键字返回 None"""
    return TYPE_KEYWORDS.get(keyword)


# 基础类型常量
NUMBER = VarType.Number
BOOL = VarType.Bool
