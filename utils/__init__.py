"""工具模块"""
from .formatting import format_result, strip_whitespace
from .batch import evaluate_batch, load_expressions

__all__ = ['format_result', 'strip_whitespace', 'evaluate_batch', 'load_expressions']
