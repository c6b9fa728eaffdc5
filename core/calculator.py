"""表达式求值入口 - 串联 Tokenizer / ShuntingYard / RPNEvaluator"""
import logging

from core.errors import CalculationResult, ExpressionError
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYard
from core.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def evaluate_expression(raw, strict=None):
    """
    计算一个已去除空白的中缀表达式
    每次调用都独立分配 Token 序列和栈，可以并发调用
    Returns:
        CalculationResult：成功时带 value，失败时带 FormatError / EvalError
    """
    try:
        tokens = Tokenizer.tokenize(raw)
        postfix = ShuntingYard.to_postfix(tokens, strict=strict)
        value = RPNEvaluator.evaluate(postfix)
    except ExpressionError as e:
        logger.debug(f"Failed to evaluate {raw!r}: {e!r}")
        return CalculationResult(raw, error=e)
    return CalculationResult(raw, value=value)
