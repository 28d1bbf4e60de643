from ply import yacc

from ast_nodes import *
from lexer import new_lexer, tokens

start = 'program'


# ==================== 程序结构 ====================

def p_program(p):
    "program : stmt_list"
    p[0] = Program(p[1])

def p_program_empty(p):
    "program : "
    p[0] = Program([])

def p_stmt_list_multi(p):
    "stmt_list : stmt_list stmt"
    p[0] = p[1] + [p[2]]

def p_stmt_list_single(p):
    "stmt_list : stmt"
    p[0] = [p[1]]

def p_stmt(p):
    """stmt : declaration
            | assign_stmt
            | if_stmt
            | while_stmt
            | block"""
    p[0] = p[1]

def p_declaration(p):
    """declaration : NUM_TYPE IDENT ';'
                   | BOOL_TYPE IDENT ';'"""
    p[0] = Declaration(p[1], Identifier(p[2]))

def p_assign(p):
    "assign_stmt : IDENT '=' expr ';'"
    p[0] = AssignStmt(Identifier(p[1]), p[3])

def p_if_stmt(p):
    "if_stmt : IF '(' expr ')' block else_opt"
    p[0] = IfStmt(p[3], p[5], p[6])

def p_else_opt_with_block(p):
    """else_opt : ELSE block
                | ELSE if_stmt"""
    p[0] = p[2]

def p_else_opt_empty(p):
    "else_opt : "
    p[0] = None

def p_while_stmt(p):
    "while_stmt : WHILE '(' expr ')' block"
    p[0] = WhileStmt(p[3], p[5])

def p_block_with_stmts(p):
    "block : '{' stmt_list '}'"
    p[0] = Block(p[2])

def p_block_empty(p):
    "block : '{' '}'"
    p[0] = Block([])

# ==================== 表达式规则 ====================
# 每个优先级层一条规则，同层的运算符与操作数平铺在同一个节点里

def p_expr(p):
    "expr : bool_expr"
    p[0] = p[1]

def p_bool_expr_multi(p):
    """bool_expr : bool_expr AND comp_expr
                 | bool_expr OR comp_expr"""
    p[1].ops.append(p[2])
    p[1].operands.append(p[3])
    p[0] = p[1]

def p_bool_expr_single(p):
    "bool_expr : comp_expr"
    p[0] = BoolExpr([p[1]])

def p_comp_expr_binary(p):
    """comp_expr : add_expr EQ add_expr
                 | add_expr NE add_expr
                 | add_expr LT add_expr
                 | add_expr LE add_expr
                 | add_expr GT add_expr
                 | add_expr GE add_expr"""
    p[0] = CompExpr(p[1], p[2], p[3])

def p_comp_expr_single(p):
    "comp_expr : add_expr"
    p[0] = CompExpr(p[1])

def p_add_expr_multi(p):
    """add_expr : add_expr PLUS mul_expr
                | add_expr MINUS mul_expr"""
    p[1].ops.append(p[2])
    p[1].operands.append(p[3])
    p[0] = p[1]

def p_add_expr_single(p):
    "add_expr : mul_expr"
    p[0] = AddExpr([p[1]])

def p_mul_expr_multi(p):
    """mul_expr : mul_expr TIMES una_expr
                | mul_expr DIV una_expr
                | mul_expr MOD una_expr"""
    p[1].ops.append(p[2])
    p[1].operands.append(p[3])
    p[0] = p[1]

def p_mul_expr_single(p):
    "mul_expr : una_expr"
    p[0] = MulExpr([p[1]])

def p_una_expr_signed(p):
    "una_expr : sign_list not_expr"
    p[0] = UnaExpr(p[2], p[1])

def p_una_expr_plain(p):
    "una_expr : not_expr"
    p[0] = UnaExpr(p[1])

def p_sign_list_multi(p):
    """sign_list : sign_list MINUS
                 | sign_list PLUS"""
    p[0] = p[1] + [p[2]]

def p_sign_list_single(p):
    """sign_list : MINUS
                 | PLUS"""
    p[0] = [p[1]]

def p_not_expr_negated(p):
    "not_expr : not_list gen_value"
    p[0] = NotExpr(p[2], p[1])

def p_not_expr_plain(p):
    "not_expr : gen_value"
    p[0] = NotExpr(p[1])

def p_not_list_multi(p):
    "not_list : not_list NOT"
    p[0] = p[1] + [p[2]]

def p_not_list_single(p):
    "not_list : NOT"
    p[0] = [p[1]]

# ==================== 基础值 ====================

def p_gen_value_ident(p):
    "gen_value : IDENT"
    p[0] = GenValue(Identifier(p[1]))

def p_gen_value_int(p):
    "gen_value : INT"
    p[0] = GenValue(IntValue(p[1]))

def p_gen_value_true(p):
    "gen_value : TRUE"
    p[0] = GenValue(BoolValue(True))

def p_gen_value_false(p):
    "gen_value : FALSE"
    p[0] = GenValue(BoolValue(False))

def p_gen_value_paren(p):
    "gen_value : '(' expr ')'"
    p[0] = GenValue(p[2])

def p_error(p):
    if p:
        raise SyntaxError(f"Syntax error at '{p.value}' (type: {p.type}) on line {p.lineno}")
    raise SyntaxError("Syntax error at EOF")

def parse(data, debug=False):
    parser = yacc.yacc(debug=debug, write_tables=False)
    return parser.parse(data, lexer=new_lexer())
