"""词法分析器 - 把字符串切分为数字、操作符和括号 Token"""
import logging

import numpy as np

from config.config import CALCULATOR_CONFIG
from core.errors import FormatError
from core.token_system import NUMBER_PATTERN, SYMBOLS, TokenType, parse_number, symbol_token, Token

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')


class Tokenizer:
    """逐字符扫描，维护一个正在构造的字面量缓冲区"""

    @staticmethod
    def tokenize(expression, max_length=None):
        """
        把表达式切分为 Token 列表，每次调用都使用新的列表
        Args:
            expression: 已去除空白的表达式字符串
            max_length: 最大输入长度，None 时取配置
        Returns:
            Token 列表
        Raises:
            FormatError: 非法字符、畸形数字或表达式过长；不返回部分结果
        """
        if max_length is None:
            max_length = CALCULATOR_CONFIG['max_input_length']
        if max_length and len(expression) > max_length:
            raise FormatError(f"expression too long ({len(expression)} > {max_length} characters)")

        tokens = []
        buffer = ''

        for position, char in enumerate(expression):
            if char in DIGITS:
                # 操作符后面的数字开始一个新字面量（一元负号除外）
                if buffer in SYMBOLS and not Tokenizer._is_negative_prefix(buffer, tokens):
                    Tokenizer._flush(buffer, tokens)
                    buffer = char
                else:
                    buffer += char

            elif char == '.':
                if buffer in SYMBOLS and not Tokenizer._is_negative_prefix(buffer, tokens):
                    Tokenizer._flush(buffer, tokens)
                    buffer = '.'
                elif '.' not in buffer:
                    buffer += '.'
                # 同一字面量中的第二个小数点直接忽略

            elif char in SYMBOLS:
                if buffer:
                    Tokenizer._flush(buffer, tokens)
                buffer = char

            else:
                raise FormatError(f"unidentified character {char!r} at position {position}")

        if buffer:
            Tokenizer._flush(buffer, tokens)

        logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
        return tokens

    @staticmethod
    def _is_negative_prefix(buffer, tokens):
        """缓冲区中的 '-' 是否处于一元负号位置：表达式开头、操作符或左括号之后"""
        if buffer != '-':
            return False
        if not tokens:
            return True
        last = tokens[-1]
        return last.type in (TokenType.OPERATOR, TokenType.LEFT_PAREN)

    @staticmethod
    def _flush(buffer, tokens):
        if buffer in SYMBOLS:
            tokens.append(symbol_token(buffer))
            return
        value = parse_number(buffer)
        if value is None:
            if NUMBER_PATTERN.fullmatch(buffer):
                raise FormatError(f"number out of range ({len(buffer)} characters)")
            raise FormatError(f"malformed number {buffer!r}")
        tokens.append(Token.number(value))

    @staticmethod
    def serialize(tokens):
        """Token 序列 -> 规范字符串（可以重新解析）"""
        parts = []
        for token in tokens:
            if token.is_number:
                parts.append(format_literal(token.value))
            else:
                parts.append(token.symbol)
        return ''.join(parts)


def format_literal(value):
    """定点格式输出数字，不使用科学计数法；整数不带 .0"""
    return np.format_float_positional(float(value), trim='-')
