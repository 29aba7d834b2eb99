"""Assembly generation from a checked parse tree."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path

from tinycomp.tokens import CodeGenError, Node

_log = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\d*")


def t2_to_variable(text: str) -> str:
    """Turn a ``+N`` identifier into the assembly variable name ``pN``."""
    if not text or text[0] != "+":
        raise CodeGenError(
            "Expected a plus sign for the first character of a t2 token."
        )
    return "p" + text[1:]


def t3_to_int(text: str) -> int:
    """Turn a t3 literal into an integer: upper-case positive, lower-case negative."""
    first = text[:1]
    if not first or not ("A" <= first <= "Z" or "a" <= first <= "z"):
        raise CodeGenError("Expected a letter for the first character of a t3 token.")
    sign = 1 if first.isupper() else -1
    digits = _LEADING_DIGITS.match(text, 1).group()
    return sign * int(digits) if digits else 0


def _text(node: Node) -> str:
    return node.token.text if node.token is not None else ""


class CodeGenerator:
    """Emits assembly for a tree, given the declared identifiers."""

    def __init__(self, symbols: Iterable[str]) -> None:
        self._symbols = sorted(set(symbols))
        self._handlers: dict[str, Callable[[Node], bool]] = {
            "S": self._s,
            "A": self._a,
            "B": self._b,
            "C": self._c,
            "D": self._d,
            "E": self._e,
            "F": self._f,
            "G": self._g,
        }
        self._reset()

    def _reset(self) -> None:
        self._temps = 0
        self._labels = 0
        self._active = ""
        self._lines: list[str] = []

    def generate(self, root: Node | None) -> str:
        """Return the assembly program for ``root``, variables listed at the end."""
        self._reset()
        self._visit(root)
        self._emit("STOP")
        for name in self._symbols:
            self._emit(f"{t2_to_variable(name)} 0")
        for index in range(self._temps):
            self._emit(f"T{index} 0")
        return "".join(f"{line}\n" for line in self._lines)

    def _emit(self, line: str) -> None:
        self._lines.append(line)

    def _new_temp(self) -> str:
        name = f"T{self._temps}"
        self._temps += 1
        return name

    def _new_label(self) -> str:
        name = f"L{self._labels}"
        self._labels += 1
        return name

    def _visit(self, node: Node | None) -> None:
        if node is None:
            return
        _log.debug("traverse node %s", node.label)
        handler = self._handlers.get(node.label)
        if handler is not None and handler(node):
            return
        for child in node.children():
            self._visit(child)

    def _s(self, node: Node) -> bool:
        kids = node.children()
        for index in (0, 2, 3):
            if index < len(kids):
                self._visit(kids[index])
        return True

    def _a(self, node: Node) -> bool:
        kids = node.children()
        if not kids or kids[0].label != "t1":
            return False
        self._active = t2_to_variable(_text(kids[1]))
        self._emit("LOAD 0")
        self._emit(f"STORE {self._active}")
        return True

    def _b(self, node: Node) -> bool:
        for child in node.children():
            self._visit(child)
        return True

    def _c(self, node: Node) -> bool:
        kids = node.children()
        symbol = _text(kids[0])
        if symbol == "#":
            self._active = t2_to_variable(_text(kids[1]))
            self._emit(f"READ {self._active}")
            return True
        if symbol == "!":
            self._visit(kids[1])
            self._emit("MULT -1")
            self._emit(f"STORE {self._active}")
            return True
        return False

    def _d(self, node: Node) -> bool:
        self._visit(node.children()[1])
        self._emit(f"WRITE {self._active}")
        return True

    def _e(self, node: Node) -> bool:
        _, low, high, count, *_ = node.children()
        self._visit(low)
        first = self._new_temp()
        self._emit(f"STORE {first}")

        self._visit(high)
        second = self._new_temp()
        self._emit(f"STORE {second}")

        self._visit(count)
        counter = self._new_temp()
        self._emit(f"STORE {counter}")

        skip = self._new_label()
        loop = self._new_label()

        self._emit(f"LOAD {first}")
        self._emit(f"SUB {second}")
        self._emit(f"BRZPOS {skip}")

        self._emit(f"LOAD {counter}")
        self._emit("SUB 1")
        self._emit(f"BRNEG {skip}")

        self._emit(f"{loop}:NOOP")

        self._emit(f"LOAD {counter}")
        self._emit("SUB 1")
        self._emit(f"STORE {counter}")

        self._emit(f"LOAD {counter}")
        self._emit("SUB 1")
        self._emit(f"BRPOS {loop}")

        self._emit(f"{skip}: NOOP")
        return True

    def _f(self, node: Node) -> bool:
        kids = node.children()
        head = kids[0]
        if head.label == "t1" and _text(head) == "&":
            self._visit(kids[1])
            temp = self._new_temp()
            self._emit(f"STORE {temp}")
            self._visit(kids[2])
            self._emit(f"ADD {temp}")
            self._active = self._new_temp()
            self._emit(f"STORE {temp}")
            return True
        if head.label == "t2":
            self._active = t2_to_variable(_text(head))
            self._emit(f"LOAD {self._active}")
            return True
        if head.label == "t3":
            temp = self._new_temp()
            self._emit(f"LOAD {t3_to_int(_text(head))}")
            self._emit(f"STORE {temp}")
            self._active = temp
            return True
        return False

    def _g(self, node: Node) -> bool:
        kids = node.children()
        target = t2_to_variable(_text(kids[0]))
        self._visit(kids[2])
        self._emit(f"STORE {target}")
        return True


def generate(root: Node | None, symbols: Iterable[str]) -> str:
    """Return the assembly program for ``root``."""
    return CodeGenerator(symbols).generate(root)


def write_asm(root: Node | None, base: str, symbols: Iterable[str]) -> Path:
    """Write the assembly program to ``<base>.asm`` and return its path."""
    path = Path(f"{base}.asm")
    path.write_text(generate(root, symbols), encoding="utf-8")
    return path