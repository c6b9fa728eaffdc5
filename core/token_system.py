"""core/token_system.py"""
import math
import re
from collections import namedtuple
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"            # 数字字面量
    OPERATOR = "operator"        # + - * / ^
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token(namedtuple('Token', ['type', 'symbol', 'value'])):
    """不可变 Token：数字带 value，操作符和括号只带 symbol"""

    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, None, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol, None)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    def __repr__(self):
        if self.is_number:
            return f"Token({self.value!r})"
        return f"Token({self.symbol!r})"


LEFT_PAREN = Token(TokenType.LEFT_PAREN, '(', None)
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ')', None)


# name 对应 Operators 中的方法名
OperatorInfo = namedtuple('OperatorInfo', ['symbol', 'name', 'precedence', 'associativity'])


# 操作符定义（进程级常量，不要修改）
OPERATOR_DEFINITIONS = {
    '+': OperatorInfo('+', 'add', 2, Associativity.LEFT),
    '-': OperatorInfo('-', 'sub', 2, Associativity.LEFT),
    '*': OperatorInfo('*', 'mul', 3, Associativity.LEFT),
    '/': OperatorInfo('/', 'div', 3, Associativity.LEFT),
    '^': OperatorInfo('^', 'pow', 4, Associativity.RIGHT),
}

OPERATOR_SYMBOLS = frozenset(OPERATOR_DEFINITIONS)
# 所有单字符符号：操作符 + 括号
SYMBOLS = OPERATOR_SYMBOLS | {'(', ')'}

# 可选负号、整数部分、至多一个小数点；至少一位数字
NUMBER_PATTERN = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)')


def symbol_token(symbol):
    """单字符符号 -> Token"""
    if symbol == '(':
        return LEFT_PAREN
    if symbol == ')':
        return RIGHT_PAREN
    return Token.operator(symbol)


def parse_number(text):
    """
    显式的数字解析，不依赖隐式类型转换
    Returns:
        有限的 float；text 不是合法数字字面量或超出 float64 范围时返回 None
    """
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value
