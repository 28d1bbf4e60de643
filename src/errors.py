"""
语义错误定义
所有错误均为终止性错误：检测到第一个错误即中止分析
"""


class SemanticError(Exception):
    pass


class UndefinedIdentifierError(SemanticError):
    """使用了未声明的标识符"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid use of undefined Identifier {name}")


class DuplicateDeclarationError(SemanticError):
    """同一标识符被声明两次"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Identifier {name} has multiple declarations")


class InvalidConditionTypeError(SemanticError):
    """if / while 的条件不是 bool"""

    def __init__(self):
        super().__init__("Invalid type in condition")


class InvalidAssignmentTypeError(SemanticError):
    """赋值表达式类型与变量声明类型不一致"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid type in assignment of Identifier {name}")


class InvalidOperandTypeError(SemanticError):
    """
    某一优先级层的操作数类型非法
    level: 'boolean', 'comparison', 'addition', 'multiplication', 'unary', 'negation'
    """

    def __init__(self, level: str, got=None, expected=None):
        self.level = level
        self.got = got
        self.expected = expected
        message = f"Invalid type in {level}"
        if got is not None and expected is not None:
            message += f": got {got}, was expecting {expected}"
        super().__init__(message)
