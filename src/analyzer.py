from typing import Optional, TextIO

from ast_nodes import *
from context import AnalysisContext, Counters
from scope import SymbolTable
from errors import (
    SemanticError,
    InvalidAssignmentTypeError,
    InvalidConditionTypeError,
    InvalidOperandTypeError,
)
from my_types import *

EQUALITY_OPS = ('==', '!=')
ORDERING_OPS = ('<', '<=', '>', '>=')


class ExpressionAnalyzer:
    """
    表达式分析 - 被 TypeChecker 组合使用
    每一层直接返回自己的结果类型，父层根据返回值检查兄弟操作数
    """

    def __init__(self, ctx: AnalysisContext):
        self.ctx = ctx

    def analyze(self, expr) -> VarType:
        """表达式分析主入口"""
        method_name = f'_analyze_{expr.__class__.__name__}'
        method = getattr(self, method_name, self._analyze_generic)
        return method(expr)

    def _analyze_generic(self, expr) -> VarType:
        raise SemanticError(f"Unknown expression node: {type(expr).__name__}")

    def _analyze_operands(self, operands, ops, level: str, expected: VarType) -> VarType:
        """
        依次分析同一层的操作数
        有运算符时每个操作数一得出类型就立即检查，错误定位到出错的那个操作数
        """
        result = None
        for operand in operands:
            t = self.analyze(operand)
            if ops and t is not expected:
                raise InvalidOperandTypeError(level, t, expected)
            result = t
        return result

    def _analyze_BoolExpr(self, expr: BoolExpr) -> VarType:
        result = self._analyze_operands(expr.operands, expr.ops, 'boolean', BOOL)
        self.ctx.count_operators(expr.ops)
        return BOOL if expr.ops else result

    def _analyze_CompExpr(self, expr: CompExpr) -> VarType:
        left = self.analyze(expr.left)
        if expr.op is None:
            return left

        if expr.op not in EQUALITY_OPS and expr.op not in ORDERING_OPS:
            raise SemanticError(f"Unknown comparison operator: {expr.op}")

        # 大小比较只接受 num；== / != 两侧可以是 num 或 bool
        if expr.op in ORDERING_OPS and left is not NUMBER:
            raise InvalidOperandTypeError('comparison', left, NUMBER)
        right = self.analyze(expr.right)
        if expr.op in ORDERING_OPS and right is not NUMBER:
            raise InvalidOperandTypeError('comparison', right, NUMBER)

        self.ctx.counters.operators += 1
        return BOOL

    def _analyze_AddExpr(self, expr: AddExpr) -> VarType:
        result = self._analyze_operands(expr.operands, expr.ops, 'addition', NUMBER)
        self.ctx.count_operators(expr.ops)
        return NUMBER if expr.ops else result

    def _analyze_MulExpr(self, expr: MulExpr) -> VarType:
        result = self._analyze_operands(expr.operands, expr.ops, 'multiplication', NUMBER)
        self.ctx.count_operators(expr.ops)
        return NUMBER if expr.ops else result

    def _analyze_UnaExpr(self, expr: UnaExpr) -> VarType:
        operand_type = self.analyze(expr.operand)
        if not expr.ops:
            return operand_type

        if not operand_type.is_numeric():
            raise InvalidOperandTypeError('unary', operand_type, NUMBER)
        self.ctx.count_operators(expr.ops)
        return NUMBER

    def _analyze_NotExpr(self, expr: NotExpr) -> VarType:
        operand_type = self.analyze(expr.operand)
        if not expr.ops:
            return operand_type

        if operand_type is not BOOL:
            raise InvalidOperandTypeError('negation', operand_type, BOOL)
        self.ctx.count_operators(expr.ops)
        return BOOL

    def _analyze_GenValue(self, expr: GenValue) -> VarType:
        return self.analyze(expr.value)

    def _analyze_Identifier(self, expr: Identifier) -> VarType:
        return self.ctx.symbols.lookup(expr.name)

    def _analyze_IntValue(self, expr: IntValue) -> VarType:
        return NUMBER

    def _analyze_BoolValue(self, expr: BoolValue) -> VarType:
        return BOOL


class TypeChecker:
    """
    类型检查器主类
    单遍、深度优先遍历语法树，遇到第一个语义错误立即抛出
    成功时返回统计结果，并在提供 writer 时写出 {VAR:n, WHILE:n, IF:n, OP:n}
    """

    def __init__(self, writer: Optional[TextIO] = None):
        self.writer = writer
        self.ctx: Optional[AnalysisContext] = None
        self.expr_analyzer: Optional[ExpressionAnalyzer] = None

    @property
    def symbols(self) -> Optional[SymbolTable]:
        return self.ctx.symbols if self.ctx else None

    @property
    def counters(self) -> Optional[Counters]:
        return self.ctx.counters if self.ctx else None

    def check(self, program: Program) -> Counters:
        """
        主分析入口
        每次调用都使用全新的分析状态，多次分析互不影响
        """
        self.ctx = AnalysisContext()
        self.expr_analyzer = ExpressionAnalyzer(self.ctx)
        self._analyze_stmt(program)
        return self.ctx.counters

    def _analyze_stmt(self, stmt):
        """语句分析分发"""
        method_name = f'_analyze_{stmt.__class__.__name__}'
        method = getattr(self, method_name, self._analyze_generic)
        method(stmt)

    def _analyze_generic(self, stmt):
        raise SemanticError(f"Unknown statement node: {type(stmt).__name__}")

    def _analyze_Program(self, node: Program):
        for s in node.stmts:
            self._analyze_stmt(s)

        if self.writer is not None:
            self.writer.write(self.ctx.counters.format())

    def _analyze_Block(self, node: Block):
        for s in node.stmts:
            self._analyze_stmt(s)

    def _analyze_Declaration(self, node: Declaration):
        """变量声明：登记符号表"""
        t = type_from_keyword(node.type_name)
        if t is None:
            raise SemanticError(f"Unknown type {node.type_name} for Identifier {node.ident.name}")
        self.ctx.symbols.declare(node.ident.name, t)
        self.ctx.counters.declarations += 1

    def _analyze_AssignStmt(self, node: AssignStmt):
        """赋值：表达式类型必须与变量声明类型完全一致"""
        name = node.target.name
        var_type = self.ctx.symbols.lookup(name)
        expr_type = self.expr_analyzer.analyze(node.expr)

        if var_type is not expr_type:
            raise InvalidAssignmentTypeError(name)

    def _check_condition(self, cond):
        if self.expr_analyzer.analyze(cond) is not BOOL:
            raise InvalidConditionTypeError()

    def _analyze_IfStmt(self, node: IfStmt):
        self._check_condition(node.cond)
        self._analyze_stmt(node.then_block)
        if node.else_branch is not None:
            self._analyze_stmt(node.else_branch)
        self.ctx.counters.ifs += 1

    def _analyze_WhileStmt(self, node: WhileStmt):
        self._check_condition(node.cond)
        self._analyze_stmt(node.body)
        self.ctx.counters.whiles += 1


def check_program(program: Program, writer: Optional[TextIO] = None) -> Counters:
    """便捷入口：用新的 TypeChecker 检查一棵语法树"""
    return TypeChecker(writer).check(program)
