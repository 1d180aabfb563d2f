"""Vectors of complex numbers: searching, de-duplication and sorting by modulus."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections import deque
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from itertools import groupby


@dataclass(frozen=True, order=True)
class Complex:
    """A complex number ordered lexicographically by (re, im)."""

    re: float = 0.0
    im: float = 0.0

    def norm(self) -> float:
        """Return the modulus."""
        return math.sqrt(self.re * self.re + self.im * self.im)

    def __str__(self) -> str:
        return f"({self.re:g},{self.im:g})"


def norm_key(value: Complex) -> tuple[float, float]:
    """Sort key: modulus first, then the real part."""
    return (value.norm(), value.re)


def shuffle_vec(items: MutableSequence[Complex], rng: random.Random | None = None) -> None:
    """Shuffle the items in place."""
    (rng or random).shuffle(items)


def format_vec(items: Iterable[Complex], info: str = "") -> str:
    """Render a vector as ``info size=N: (a,b) (c,d) ...``."""
    items = list(items)
    return f"{info} size={len(items)}:" + "".join(f" {c}" for c in items)


def erase_first(items: list[Complex], key: Complex) -> bool:
    """Remove the first item equal to ``key``; report whether one was found."""
    try:
        items.remove(key)
    except ValueError:
        return False
    return True


def uniquify(items: list[Complex]) -> None:
    """Sort the items and drop duplicates, in place."""
    items[:] = [value for value, _ in groupby(sorted(items))]


def bubble_sort(items: MutableSequence[Complex]) -> None:
    """Sort by modulus in place with bubble sort."""
    n = len(items)
    for i in range(n):
        for j in range(n - 1 - i):
            if not norm_key(items[j]) < norm_key(items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]


def _merge_sorted(seq: Sequence[Complex]) -> list[Complex]:
    if len(seq) <= 1:
        return list(seq)
    mid = (len(seq) + 1) // 2
    left = deque(_merge_sorted(seq[:mid]))
    right = deque(_merge_sorted(seq[mid:]))
    merged: list[Complex] = []
    while left and right:
        if norm_key(left[0]) < norm_key(right[0]):
            merged.append(left.popleft())
        else:
            merged.append(right.popleft())
    merged.extend(left)
    merged.extend(right)
    return merged


def merge_sort(items: MutableSequence[Complex]) -> None:
    """Sort by modulus in place with merge sort."""
    items[:] = _merge_sorted(list(items))


def range_find(items: Iterable[Complex], low: float, high: float) -> list[Complex]:
    """Return the items whose modulus lies in [low, high), sorted by modulus."""
    return sorted((c for c in items if low <= c.norm() < high), key=norm_key)


def timed_sort(
    data: Sequence[Complex],
    sort: Callable[[list[Complex]], None],
    name: str,
) -> float:
    """Sort a copy of ``data``, print and return the CPU time in milliseconds."""
    copy = list(data)
    start = time.process_time()
    sort(copy)
    elapsed = (time.process_time() - start) * 1000.0
    print(f"{name}耗时: {elapsed:g} ms")
    return elapsed


def _size(text: str) -> int:
    value = int(text)
    if value < 20:
        raise argparse.ArgumentTypeError("size must be at least 20")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Complex vector exercises.")
    parser.add_argument("--size", type=_size, default=10000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    n = args.size
    rng = random.Random(args.seed)
    a = [
        Complex((rng.randrange(2000) - 1000) / 100.0, (rng.randrange(2000) - 1000) / 100.0)
        for _ in range(n)
    ]
    a.extend(a[:20])

    print(format_vec(a[:10], "A"))

    shuffle_vec(a, rng)
    print(format_vec(a[:10], "随机打乱后的A"))

    key = a[n // 2]
    print(f"\n查找 key = {key}  " + ("找到" if key in a else "未找到"))

    ins = Complex(3.14, 2.71)
    a.append(ins)
    print(f"插入 {ins} 后 size = {len(a)}")

    ok = erase_first(a, ins)
    print(f"删除 {ins}{' 成功' if ok else ' 失败'}，size = {len(a)}")

    uniquify(a)
    print(f"唯一化后 size = {len(a)}")

    test = list(a)
    print(f"\n===== 排序性能比较 (N={len(test)}) =====")

    test.sort(key=norm_key)
    timed_sort(test, bubble_sort, "顺序 bubbleSort")
    timed_sort(test, merge_sort, "mergeSort ")

    shuffle_vec(test, rng)
    timed_sort(test, bubble_sort, "乱序 bubbleSort")
    timed_sort(test, merge_sort, "mergeSort ")

    test.sort(key=norm_key, reverse=True)
    timed_sort(test, bubble_sort, "逆序 bubbleSort")
    timed_sort(test, merge_sort, "mergeSort ")

    a.sort(key=norm_key)
    m1, m2 = 5.0, 10.0
    sub = range_find(a, m1, m2)
    print(f"\n范围 [{m1:g},{m2:g}) 内找到 {len(sub)} 个元素")
    print(format_vec(sub[:10], "sub"))
    return 0