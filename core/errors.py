"""引擎异常"""


class InvalidArgument(ValueError):
    """调用方传入了违反约定的参数（负数、非整数期数、非有限值等）"""
