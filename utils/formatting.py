"""utils/formatting.py"""
import math
import re

import numpy as np

WHITESPACE = re.compile(r'\s+')

# 与 JavaScript Number.prototype.toString 相同的定点输出区间
POSITIONAL_MIN = 1e-6
POSITIONAL_MAX = 1e21


def strip_whitespace(expression):
    """去除表达式中的所有空白，核心模块不接受空白字符"""
    return WHITESPACE.sub('', expression)


def format_result(value):
    """
    把结果格式化为回复文本，与原聊天机器人（JS 数字输出）一致：
    整数不带 .0；1e-6 <= |x| < 1e21 用定点；其余用 1e+21 / 1.5e-7 形式；
    inf/nan 输出 Infinity/NaN
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if POSITIONAL_MIN <= abs(value) < POSITIONAL_MAX:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)
