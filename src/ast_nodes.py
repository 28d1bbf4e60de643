from dataclasses import dataclass, field
from typing import List, Optional, Any

@dataclass
class Program:
    stmts: List[Any]
    def __repr__(self): return f"Program({self.stmts})"

@dataclass
class Identifier:
    name: str
    def __repr__(self): return f"Ident({self.name})"

@dataclass
class Declaration:
    type_name: str      # 'num' 或 'bool'
    ident: Identifier
    def __repr__(self): return f"Decl({self.type_name} {self.ident.name})"

@dataclass
class Block:
    stmts: List[Any]
    def __repr__(self): return f"Block({self.stmts})"

@dataclass
class AssignStmt:
    target: Identifier
    expr: Any
    def __repr__(self): return f"Assign({self.target.name} = {self.expr})"

@dataclass
class IfStmt:
    cond: Any
    then_block: Block
    else_branch: Optional[Any] = None   # Block、IfStmt（else if）或 None
    def __repr__(self): return f"If({self.cond}, then={self.then_block}, else={self.else_branch})"

@dataclass
class WhileStmt:
    cond: Any
    body: Block
    def __repr__(self): return f"While({self.cond}, {self.body})"

# Expressions
# 优先级链（由外到内）：BoolExpr -> CompExpr -> AddExpr -> MulExpr -> UnaExpr -> NotExpr -> GenValue
# ops 保存该层出现的所有运算符 token，operands 比 ops 多一个

@dataclass
class BoolExpr:
    operands: List[Any]
    ops: List[str] = field(default_factory=list)     # '&&', '||'
    def __repr__(self): return f"BoolExpr({self.operands}, ops={self.ops})"

@dataclass
class CompExpr:
    left: Any
    op: Optional[str] = None      # '==', '!=', '<', '<=', '>', '>=' 或 None
    right: Optional[Any] = None
    def __repr__(self):
        if self.op is None:
            return f"Comp({self.left})"
        return f"Comp({self.left} {self.op} {self.right})"

@dataclass
class AddExpr:
    operands: List[Any]
    ops: List[str] = field(default_factory=list)     # '+', '-'
    def __repr__(self): return f"AddExpr({self.operands}, ops={self.ops})"

@dataclass
class MulExpr:
    operands: List[Any]
    ops: List[str] = field(default_factory=list)     # '*', '/', '%'
    def __repr__(self): return f"MulExpr({self.operands}, ops={self.ops})"

@dataclass
class UnaExpr:
    operand: Any
    ops: List[str] = field(default_factory=list)     # '-', '+'
    def __repr__(self): return f"Una({''.join(self.ops)}{self.operand})"

@dataclass
class NotExpr:
    operand: Any
    ops: List[str] = field(default_factory=list)     # '!'
    def __repr__(self): return f"Not({''.join(self.ops)}{self.operand})"

@dataclass
class GenValue:
    value: Any      # Identifier、IntValue、BoolValue 或括号内的 BoolExpr
    def __repr__(self): return f"Gen({self.value})"

@dataclass
class IntValue:
    value: int
    def __repr__(self): return f"Int({self.value})"

@dataclass
class BoolValue:
    value: bool
    def __repr__(self): return f"Bool({self.value})"
