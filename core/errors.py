"""core/errors.py - 表达式错误类型和计算结果"""


class ExpressionError(Exception):
    """表达式错误基类，所有错误都带可读的 message"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"


class FormatError(ExpressionError):
    """词法阶段错误：非法字符、畸形数字、表达式过长、（严格模式下）括号不匹配"""


class EvalError(ExpressionError):
    """求值阶段错误：栈下溢或表达式畸形"""


class CalculationResult:
    """一次求值的结果：要么有 value，要么有 error"""

    __slots__ = ('expression', 'value', 'error')

    def __init__(self, expression, value=None, error=None):
        self.expression = expression
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """返回数值；失败时抛出对应的 ExpressionError"""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"CalculationResult({self.expression!r}, value={self.value!r})"
        return f"CalculationResult({self.expression!r}, error={self.error!r})"
