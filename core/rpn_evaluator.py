"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import EvalError
from core.operators import Operators
from core.token_system import OPERATOR_DEFINITIONS, TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(postfix_tokens):
        """
        用栈机评估后缀 Token 序列，栈只在本次调用内有效
        Args:
            postfix_tokens: ShuntingYard 输出的 Token 序列
        Returns:
            float 结果
        Raises:
            EvalError: 栈下溢，或结束时栈中不是恰好一个值
        """
        stack = []

        for token in postfix_tokens:
            if token.type == TokenType.NUMBER:
                stack.append(Operators.to_float(token.value))

            elif token.type == TokenType.OPERATOR:
                # 先弹出的是右操作数
                second = RPNEvaluator._pop(stack, token)
                first = RPNEvaluator._pop(stack, token)
                op_method = getattr(Operators, OPERATOR_DEFINITIONS[token.symbol].name)
                stack.append(op_method(first, second))

            else:
                logger.debug(f"Unexpected token in postfix stream: {token!r}")
                raise EvalError("malformed expression")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("malformed expression")

        return float(stack[0])

    @staticmethod
    def _pop(stack, token):
        if not stack:
            logger.debug(f"Insufficient operands for {token.symbol}")
            raise EvalError("stack underflow")
        return stack.pop()
