from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast
from ..types.format_type import FormatType, format_classes
from ..types.color_types import ChannelMaxima, ColorElement, ColorSpace, Scalar, is_hue_space


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    maxima:      ClassVar[ChannelMaxima]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase) -> None:
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise TypeError(
                    f"{self.__class__.__name__} cannot be built from a {value.mode} color; "
                    f"use to_rgb()/to_hsl() instead"
                )
            value = cast(ColorElement, value.value)

        if isinstance(value, (str, bytes)) or not hasattr(value, '__len__'):
            raise TypeError(f"{self.mode} expects a {self.num_channels}-channel sequence, got {value!r}")
        if len(value) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        # type enforcement
        cast_to = format_classes[self.format_type]
        values = tuple(cast_to(v) for v in value)

        # clamp value; unbounded channels pass through
        values = tuple(
            v if m is None else max(cast_to(0), min(v, m))
            for v, m in zip(values, self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = values

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> Scalar:
        return self._value[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


def channel_property(index: int, doc: str) -> property:
    """Read-only accessor for one channel of a ColorBase value."""
    def getter(self: ColorBase) -> Scalar:
        return self._value[index]
    return property(getter, doc=doc)
