"""Infix arithmetic expression evaluation with an operator-precedence table."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_C_SPACE = frozenset(" \t\n\v\f\r")
_NUMBER = re.compile(r"\d+\.?\d*|\.\d+")

_OPERATORS = "+-*/^!()#"
# Rows: operator on top of the stack; columns: incoming operator.
_PRIORITY = (
    ">><<<<<>>",
    ">><<<<<>>",
    ">>>><<<>>",
    ">>>><<<>>",
    ">>>>><<>>",
    ">>>>>> >>",
    "<<<<<<<= ",
    "         ",
    "<<<<<<< =",
)

_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "log": math.log10,
    "ln": math.log,
    "sqrt": math.sqrt,
}


class EvaluationError(Exception):
    """Raised when an expression cannot be evaluated."""


class Stack(Generic[T]):
    """A bounded LIFO stack."""

    def __init__(self, capacity: int = 200) -> None:
        self._items: list[T] = []
        self.capacity = capacity

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, item: T) -> None:
        if self.full():
            raise EvaluationError("栈溢出")
        self._items.append(item)

    def pop(self) -> T:
        if self.empty():
            raise EvaluationError("栈下溢")
        return self._items.pop()

    def peek(self) -> T:
        if self.empty():
            raise EvaluationError("栈空")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def _operator_index(c: str) -> int:
    if c == "\0":
        return _OPERATORS.index("#")
    return _OPERATORS.find(c)


def preprocess(text: str) -> str:
    """Drop whitespace (including U+3000) and map U+3008/U+3009 to parentheses."""
    out = []
    for c in text:
        if c == "\u3000" or c in _C_SPACE:
            continue
        if c == "\u3008":
            out.append("(")
        elif c == "\u3009":
            out.append(")")
        else:
            out.append(c)
    return "".join(out)


def calc(a: float, op: str, b: float) -> float:
    """Apply a binary operator."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if abs(b) < 1e-12:
            raise EvaluationError("除零错误")
        return a / b
    raise EvaluationError("非法双目运算符")


def call_function(name: str, arg: float) -> float:
    """Apply a named unary function; domain errors give inf or nan."""
    try:
        func = _FUNCTIONS[name]
    except KeyError:
        raise EvaluationError("未知函数") from None
    try:
        return func(arg)
    except ValueError:
        if name in ("log", "ln") and arg == 0:
            return -math.inf
        return math.nan


def _to_float(text: str) -> float:
    match = _NUMBER.match(text)
    return float(match.group()) if match else 0.0


def evaluate(expr: str) -> float:
    """Evaluate an infix expression."""
    s = preprocess(expr) + "#"
    operands: Stack[float] = Stack()
    operators: Stack[str] = Stack()
    operators.push("#")

    i = 0
    while i < len(s):
        c = s[i]
        if c in _DIGITS or c == ".":
            j = i
            while j < len(s) and (s[j] in _DIGITS or s[j] == "."):
                j += 1
            operands.push(_to_float(s[i:j]))
            i = j
            continue
        if c in _LETTERS:
            j = i
            while j < len(s) and s[j] in _LETTERS:
                j += 1
            name = s[i:j]
            if j >= len(s) or s[j] != "(":
                raise EvaluationError("函数后必须跟左括号 '('")
            i = j + 1
            start = i
            depth = 1
            while i < len(s):
                if s[i] == "(":
                    depth += 1
                elif s[i] == ")":
                    depth -= 1
                if depth == 0:
                    break
                i += 1
            if depth:
                raise EvaluationError("函数括号不匹配")
            argument = evaluate(s[start:i])
            i += 1
            operands.push(call_function(name, argument))
            continue

        top = operators.peek()
        row, col = _operator_index(top), _operator_index(c)
        if row < 0 or col < 0:
            raise EvaluationError("非法运算符")
        relation = _PRIORITY[row][col]
        if relation == "<":
            operators.push(c)
            i += 1
        elif relation == "=":
            operators.pop()
            i += 1
        elif relation == ">":
            theta = operators.pop()
            b = operands.pop()
            a = operands.pop()
            operands.push(calc(a, theta, b))
        else:
            if top == "#" and c == "#":
                operators.pop()
                i += 1
                break
            raise EvaluationError("运算符优先级错误")

    answer = operands.pop()
    if not operands.empty() or not operators.empty():
        raise EvaluationError("表达式异常")
    return answer


_SAMPLES = (
    "1 + 2 * 3",
    "( 1 + 2 ) * 3",
    "3.5 / 2 + 1",
    "sin(0) + cos(0)",
    "ln(2.718281828)",
    "sqrt(16) * 2 + 1",
    "1 + 2 * (3 + 4) / 5 - 6",
    "tan(3.14159265/4)",
    "log(100)",
    "1 + + 2",
    "5 / 0",
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expressions.")
    parser.parse_args(argv)

    for sample in _SAMPLES:
        print(f"表达式： {sample}")
        try:
            print(f"结果 = {evaluate(sample):g}")
        except EvaluationError as exc:
            print(f"错误: {exc}  => 式子无效")
        print()

    print("请输入表达式（空行退出）：")
    for raw in sys.stdin:
        line = raw.rstrip("\n")
        if not line:
            break
        try:
            print(f"结果 = {evaluate(line):g}")
        except EvaluationError as exc:
            print(f"错误: {exc}")
    return 0