from dataclasses import dataclass, field

from scope import SymbolTable


@dataclass
class Counters:
    """结构统计：声明数、while 数、if 数、运算符数"""
    declarations: int = 0
    whiles: int = 0
    ifs: int = 0
    operators: int = 0

    def format(self) -> str:
        return (f"{{VAR:{self.declarations}, WHILE:{self.whiles}, "
                f"IF:{self.ifs}, OP:{self.operators}}}")

    def __str__(self):
        return self.format()


@dataclass
class AnalysisContext:
    """单次分析的全部可变状态，每次分析新建一份"""
    symbols: SymbolTable = field(default_factory=SymbolTable)
    counters: Counters = field(default_factory=Counters)

    def count_operators(self, ops) -> int:
        """累加一个节点上的运算符个数（按 token 计）"""
        n = len(ops)
        self.counters.operators += n
        return n
