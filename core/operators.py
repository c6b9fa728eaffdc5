"""core/operators.py"""
import numpy as np


class Operators:
    """所有二元操作符的静态方法集合，统一使用 IEEE-754 float64 语义"""

    @staticmethod
    def to_float(operand):
        """确保操作数是 np.float64"""
        return np.float64(operand)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.to_float(operand1) + Operators.to_float(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.to_float(operand1) - Operators.to_float(operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.to_float(operand1) * Operators.to_float(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除数为 0 时得到 inf / -inf / nan，不抛异常"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.divide(Operators.to_float(operand1), Operators.to_float(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：负底数配分数指数得到 nan，溢出得到 inf"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.power(Operators.to_float(operand1), Operators.to_float(operand2))
