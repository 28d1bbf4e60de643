from ply import lex

reserved = {
    'num': 'NUM_TYPE',
    'bool': 'BOOL_TYPE',
    'if': 'IF',
    'else': 'ELSE',
    'while': 'WHILE',
    'true': 'TRUE',
    'false': 'FALSE',
}

tokens = [
    'IDENT', 'INT',
    'PLUS', 'MINUS', 'TIMES', 'DIV', 'MOD',
    'LT', 'GT', 'LE', 'GE', 'EQ', 'NE',
    'AND', 'OR', 'NOT',
] + sorted(set(reserved.values()))

literals = ['=', ';', '{', '}', '(', ')']

t_LE = r'<='
t_GE = r'>='
t_EQ = r'=='
t_NE = r'!='
t_LT = r'<'
t_GT = r'>'

t_AND = r'&&'
t_OR = r'\|\|'
t_NOT = r'!'

t_PLUS = r'\+'
t_MINUS = r'-'
t_TIMES = r'\*'
t_DIV = r'/'
t_MOD = r'%'

t_ignore = ' \t\r'

def t_comment(t):
    r'//[^\n]*'
    pass

def t_multiline_comment(t):
    r'/\*(.|\n)*?\*/'
    t.lexer.lineno += t.value.count('\n')
    pass

def t_INT(t):
    r'\d+'
    t.value = int(t.value)
    return t

def t_IDENT(t):
    r'[A-Za-z_]\w*'
    t.type = reserved.get(t.value, 'IDENT')
    return t

def t_newline(t):
    r'\n+'
    t.lexer.lineno += t.value.count('\n')

def t_error(t):
    raise SyntaxError(f"Illegal character {t.value[0]!r} at line {t.lineno}")

lexer = lex.lex()


def new_lexer():
    """返回一个行号从 1 开始的独立词法分析器，避免多次解析之间共享状态"""
    lx = lexer.clone()
    lx.lineno = 1
    return lx
