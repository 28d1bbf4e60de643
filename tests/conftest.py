import pytest

from analyzer import TypeChecker
from parser import parse


@pytest.fixture
def check():
    """解析源码并用新的 TypeChecker 检查，返回统计结果"""
    def _check(source: str):
        return TypeChecker().check(parse(source))
    return _check
