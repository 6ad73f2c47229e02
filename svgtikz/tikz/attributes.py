"""Draw-statement options: bare settings and key=value parameters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class Attribute:
    """Base for the two option kinds, Setting and Param."""

    __slots__ = ()

    @staticmethod
    def setting(keyword: str) -> Setting:
        return Setting(keyword)

    @staticmethod
    def param(key: str, value: str) -> Param:
        return Param(key, value)


@dataclass(frozen=True)
class Setting(Attribute):
    keyword: str

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class Param(Attribute):
    key: str
    value: str

    def __str__(self) -> str:
        # No quoting: TikZ option values are taken verbatim.
        return f"{self.key}={self.value}"


def attributes_to_tikz(attrs: Iterable[Attribute]) -> str:
    """Join options in order with bare commas."""
    return ",".join(str(a) for a in attrs)
