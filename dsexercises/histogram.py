"""Largest rectangle in a histogram, computed with a monotonic stack."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

_DIGITS = "0123456789"


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under the histogram."""
    padded = list(heights) + [0]
    stack: list[int] = []
    best = 0
    for i, height in enumerate(padded):
        while stack and padded[stack[-1]] > height:
            h = padded[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, h * (i - left - 1))
        stack.append(i)
    return best


def parse_heights(line: str) -> list[int]:
    """Read non-negative integers from a line such as ``[2,1,5,6]``."""
    heights: list[int] = []
    num = 0
    in_num = False
    for c in line:
        if c == "[":
            in_num = False
            continue
        if c == "]":
            break
        if c in _DIGITS:
            num = num * 10 + int(c)
            in_num = True
        elif c in ", " and in_num:
            heights.append(num)
            num = 0
            in_num = False
    if in_num:
        heights.append(num)
    return heights


def random_heights(rng: random.Random | None = None) -> list[int]:
    """Return between 1 and 105 random heights in [0, 104]."""
    rng = rng or random.Random()
    n = rng.randint(1, 105)
    return [rng.randint(0, 104) for _ in range(n)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Largest rectangle in a histogram.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("随机测试开始")
    for case in range(1, 11):
        heights = random_heights(rng)
        numbers = "".join(f"{h} " for h in heights)
        print(
            f"第 {case} 组：n = {len(heights)}， 生成的数组中的数：{numbers}"
            f"，最大矩形面积 = {largest_rectangle_area(heights)}"
        )
    print("随机测试结束")

    print("请输入高度数组 heights=[ ]")
    try:
        line = input()
    except EOFError:
        line = ""
    heights = parse_heights(line)
    if not heights:
        print("未读到任何高度，程序退出。")
        return 0
    print(f"输出：{largest_rectangle_area(heights)}")
    return 0