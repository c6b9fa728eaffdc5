"""中缀 -> 后缀（RPN）转换 - 调度场算法"""
import logging

from config.config import CALCULATOR_CONFIG
from core.errors import FormatError
from core.token_system import Associativity, OPERATOR_DEFINITIONS, TokenType

logger = logging.getLogger(__name__)


class ShuntingYard:

    @staticmethod
    def to_postfix(tokens, strict=None):
        """
        把中缀 Token 序列转换为后缀顺序
        Args:
            tokens: Tokenizer 输出的 Token 序列（不会被修改）
            strict: 是否拒绝不匹配的括号，None 时取配置
        Returns:
            后缀顺序的 Token 列表
        Raises:
            FormatError: 仅在严格模式下括号不匹配时
        """
        if strict is None:
            strict = CALCULATOR_CONFIG['strict_parentheses']

        output_queue = []
        operator_stack = []

        for token in tokens:
            if token.type == TokenType.NUMBER:
                output_queue.append(token)

            elif token.type == TokenType.OPERATOR:
                current = OPERATOR_DEFINITIONS[token.symbol]
                while operator_stack and operator_stack[-1].type == TokenType.OPERATOR:
                    top = OPERATOR_DEFINITIONS[operator_stack[-1].symbol]
                    if ShuntingYard._should_pop(current, top):
                        output_queue.append(operator_stack.pop())
                    else:
                        break
                operator_stack.append(token)

            elif token.type == TokenType.LEFT_PAREN:
                operator_stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while operator_stack and operator_stack[-1].type != TokenType.LEFT_PAREN:
                    output_queue.append(operator_stack.pop())
                if operator_stack:
                    operator_stack.pop()  # 丢弃左括号
                elif strict:
                    raise FormatError("unbalanced parentheses: unmatched ')'")
                else:
                    logger.debug("Unmatched ')' - operator stack drained")

        # 弹出剩余操作符；剩下的左括号没有对应的右括号
        while operator_stack:
            token = operator_stack.pop()
            if token.type == TokenType.LEFT_PAREN:
                if strict:
                    raise FormatError("unbalanced parentheses: unmatched '('")
                logger.debug("Unmatched '(' discarded")
                continue
            output_queue.append(token)

        return output_queue

    @staticmethod
    def _should_pop(current, top):
        # 左结合：同优先级也弹出；右结合：只弹出更高优先级
        if current.associativity == Associativity.LEFT:
            return current.precedence <= top.precedence
        return current.precedence < top.precedence
