from dataclasses import dataclass


@dataclass
class DungeonConfig:
    width: int = 100
    height: int = 100
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    max_room_monsters: int = 3
    torch_radius: int = 10
    light_walls: bool = True
    # consecutive overlap rejections tolerated per room slot before giving up
    max_placement_attempts: int = 2000
    strong_monster_chance: float = 0.2
    message_log_size: int = 250

    def validate(self) -> "DungeonConfig":
        """Reject sizes the room placement sampler cannot work with."""
        if self.room_min_size < 1 or self.room_min_size > self.room_max_size:
            raise ValueError(f"invalid room size range {self.room_min_size}..{self.room_max_size}")
        # a max-size room plus the 1-tile border on both sides, with one spare origin column
        min_side = self.room_max_size + 3
        if self.width < min_side or self.height < min_side:
            raise ValueError(
                f"grid {self.width}x{self.height} too small for rooms up to {self.room_max_size} (need >= {min_side})"
            )
        for name in ("max_rooms", "max_room_monsters", "torch_radius", "max_placement_attempts", "message_log_size"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if not 0.0 <= self.strong_monster_chance <= 1.0:
            raise ValueError("strong_monster_chance must be within [0, 1]")
        return self


__all__ = ["DungeonConfig"]
