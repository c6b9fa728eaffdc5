"""核心模块 - Token系统、词法分析、调度场转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, Associativity, OperatorInfo, OPERATOR_DEFINITIONS,
    LEFT_PAREN, RIGHT_PAREN, parse_number
)
from .errors import ExpressionError, FormatError, EvalError, CalculationResult
from .tokenizer import Tokenizer
from .shunting_yard import ShuntingYard
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .calculator import evaluate_expression

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorInfo', 'OPERATOR_DEFINITIONS',
    'LEFT_PAREN', 'RIGHT_PAREN', 'parse_number',
    'ExpressionError', 'FormatError', 'EvalError', 'CalculationResult',
    'Tokenizer', 'ShuntingYard', 'RPNEvaluator', 'Operators',
    'evaluate_expression'
]
