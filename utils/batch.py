"""utils/batch.py - 批量计算表达式，结果汇总为 DataFrame"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core.calculator import evaluate_expression
from utils.formatting import strip_whitespace

logger = logging.getLogger(__name__)


def load_expressions(path, comment_prefix=None):
    """从文本文件读取表达式，一行一个；跳过空行和注释行"""
    if comment_prefix is None:
        comment_prefix = BATCH_CONFIG['comment_prefix']
    expressions = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith(comment_prefix):
                continue
            expressions.append(line)
    logger.info(f"Loaded {len(expressions)} expressions from {path}")
    return expressions


def evaluate_batch(expressions, strict=None):
    """
    逐个计算表达式，每个表达式相互独立
    Returns:
        DataFrame，列为 expression / result / error / error_type；失败行 result 为 NaN
    """
    rows = []
    for expression in expressions:
        result = evaluate_expression(strip_whitespace(expression), strict=strict)
        if result.ok:
            rows.append({'expression': expression, 'result': result.value,
                         'error': None, 'error_type': None})
        else:
            rows.append({'expression': expression, 'result': np.nan,
                         'error': result.error.message,
                         'error_type': type(result.error).__name__})

    df = pd.DataFrame(rows, columns=['expression', 'result', 'error', 'error_type'])
    df['result'] = df['result'].astype(float)

    n_failed = int(df['error'].notna().sum())
    logger.info(f"Evaluated {len(df)} expressions: {len(df) - n_failed} ok, {n_failed} failed")
    return df
