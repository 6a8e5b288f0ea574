from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class GenerationType(IntEnum):
    RANDOM = 0
    CRAWLER = 1
    RECURSIVE = 2
    WILSONS = 3
    PRIMS = 4

    @classmethod
    def parse(cls, value: Union[int, str, 'GenerationType']) -> 'GenerationType':
        """Accepts an enum member, its selector number or its name (any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                return cls(int(key))
            try:
                return cls[key]
            except KeyError:
                names = ", ".join(m.name.lower() for m in cls)
                raise ValueError(f"Unknown generation type '{value}' (expected one of: {names})") from None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Generation selector {value} out of range 0-{len(cls) - 1}") from None


@dataclass(frozen=True)
class GenerationConfig:
    width: int = 30
    height: int = 30
    has_border: bool = True
    generation_type: GenerationType = GenerationType.RANDOM
    vertical_crawl_count: int = 5
    horizontal_crawl_count: int = 5
    number_of_rooms: int = 0
    min_room_size: int = 0
    max_room_size: int = 0
    room_distance_from_wall: int = 0
    seed: Optional[int] = None

    def __post_init__(self):
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "generation_type", GenerationType.parse(self.generation_type))
        self.validate()

    def validate(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.vertical_crawl_count < 0 or self.horizontal_crawl_count < 0:
            raise ValueError("Crawl counts cannot be negative")
        if min(self.number_of_rooms, self.min_room_size,
               self.max_room_size, self.room_distance_from_wall) < 0:
            raise ValueError("Room parameters cannot be negative")

        if self.number_of_rooms > 0:
            if self.max_room_size <= self.min_room_size:
                raise ValueError(
                    f"max_room_size ({self.max_room_size}) must exceed min_room_size ({self.min_room_size})")
            if 2 * self.room_distance_from_wall >= min(self.width, self.height):
                raise ValueError(
                    f"room_distance_from_wall ({self.room_distance_from_wall}) leaves no room placement "
                    f"range on a {self.width}x{self.height} grid")


__all__ = ["GenerationType", "GenerationConfig"]
