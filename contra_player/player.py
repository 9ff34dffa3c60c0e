"""Playable characters: movement, tile collision, damage and sprite poses."""

from __future__ import annotations

import logging
import time as _time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Collection, Mapping, Sequence

from contra_player.geometry import (
    TILE_SIZE,
    Color,
    FloatRect,
    IntRect,
    Sprite,
    is_solid_tile,
)

logger = logging.getLogger(__name__)

MAX_HP = 100.0
HIT_DAMAGE = 10.0
FLASH_INTERVAL_MS = 200
FLASH_STEPS = 6
WALK_SPEED = 0.05
JUMP_SPEED = -0.3
GRAVITY = 0.0005
ANIMATION_SPEED = 0.005
ANIMATION_FRAMES = 5
BULLET_SPEED = 0.2
STANDING_WIDTH = 24
LYING_WIDTH = 34


def _monotonic_ms() -> float:
    return _time.monotonic() * 1000.0


class Key(Enum):
    """Keyboard keys the player can be bound to."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    SPACE = "space"
    F = "f"


class Pose(Enum):
    """Sprite poses a character can take."""

    RUN_RIGHT = "run_right"
    RUN_LEFT = "run_left"
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"


@dataclass
class Weapon:
    """A projectile; a template weapon fires copies of itself from a player."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    active: bool = True

    def update(self, time: float, tile_map: Sequence[str]) -> None:
        """Move the projectile; it dies when leaving the map or hitting a tile."""
        if not self.active:
            return
        self.x += self.dx * time
        self.y += self.dy * time
        row = int(self.y // TILE_SIZE)
        col = int(self.x // TILE_SIZE)
        if not (0 <= row < len(tile_map) and 0 <= col < len(tile_map[row])):
            self.active = False
        elif is_solid_tile(tile_map[row][col]):
            self.active = False

    def is_active(self) -> bool:
        return self.active

    def attack(self, player: Player) -> None:
        """Fire a projectile from the player in the direction it faces."""
        rect = player.rect
        x = rect.left + rect.width / 2
        y = rect.top + rect.height / 3
        if player.aiming_up:
            dx, dy = 0.0, -BULLET_SPEED
        elif player.facing_left:
            dx, dy = -BULLET_SPEED, 0.0
        else:
            dx, dy = BULLET_SPEED, 0.0
        player.add_bullet(Weapon(x=x, y=y, dx=dx, dy=dy))


@dataclass(frozen=True)
class _SpriteSheet:
    """Where each pose sits in a character's texture (right-facing frames)."""

    spawn: IntRect
    run_x: int
    run_step: int
    run_y: int
    stand_x: int
    stand_y: int
    up_x: int
    up_y: int
    down_x: int
    down_y: int


_BULLET_RECT = IntRect(51 * 8 - 2, 8 * 2 + 4, 6, 6)


def _facing(x: int, y: int, width: int, height: int, right: bool) -> IntRect:
    if right:
        return IntRect(x, y, width, height)
    return IntRect(x + width, y, -width, height)


class Player:
    """A controllable character moving through a tile map."""

    sheet: ClassVar[_SpriteSheet]
    texture: ClassVar[str]
    bullet_texture: ClassVar[str]

    def __init__(
        self,
        skills: Mapping[str, Weapon] | None = None,
        clock: Callable[[], float] | None = None,
        on_jump: Callable[[], None] | None = None,
    ) -> None:
        if not hasattr(type(self), "sheet"):
            raise TypeError(f"{type(self).__name__} has no sprite sheet")
        self.skills: dict[str, Weapon] = (
            dict(skills) if skills is not None else {"Gun": Weapon()}
        )
        self._clock = clock or _monotonic_ms
        self._on_jump = on_jump
        self.hp = MAX_HP
        self.max_hp = MAX_HP
        self.rect = FloatRect()
        self.dx = 0.0
        self.dy = 0.0
        self.on_ground = False
        self.current_frame = 0.0
        self.facing_left = False
        self.facing_right = True
        self.aiming_up = False
        self.crouching = False
        self.is_hit = False
        self._damage_taken = False
        self.flash_count = 0
        self._hit_started = self._clock()
        self.sprite = Sprite(texture=self.texture)
        self.bullet_sprite = Sprite(texture=self.bullet_texture)
        self.bullets: list[Weapon] = []
        self.offset_x = 0.0
        self.offset_y = 0.0

    def spawn(self, x: float, y: float) -> None:
        """Place the character at (x, y) standing and facing right."""
        self.rect = FloatRect(x, y, 24.0, 35.0)
        self.dx = self.dy = 0.0
        self.current_frame = 0.0
        self.facing_left = False
        self.facing_right = True
        self.aiming_up = False
        self.crouching = False
        self.sprite.texture_rect = self.sheet.spawn
        self.bullet_sprite.texture_rect = _BULLET_RECT

    def take_hit(self) -> None:
        """Mark the character as hit; damage is applied by process_hit."""
        self.is_hit = True

    def process_hit(self) -> None:
        """Apply pending damage once and drive the red/white flashing."""
        if not self.is_hit:
            return
        if not self._damage_taken:
            self._damage_taken = True
            self.hp = self.hp - HIT_DAMAGE if self.hp > 0 else 0.0
            logger.info("Player HP: %s", self.hp)

        if self._clock() - self._hit_started > FLASH_INTERVAL_MS:
            self.sprite.color = Color.RED if self.flash_count % 2 == 0 else Color.WHITE
            self.flash_count += 1
            self._hit_started = self._clock()
            if self.flash_count >= FLASH_STEPS:
                self._damage_taken = False
                self.is_hit = False
                self.flash_count = 0
                self.sprite.color = Color.WHITE

    def control(
        self,
        pressed: Collection[Key],
        left: Key = Key.LEFT,
        right: Key = Key.RIGHT,
        up: Key = Key.UP,
        down: Key = Key.DOWN,
        jump: Key = Key.SPACE,
        shoot: Key = Key.F,
    ) -> None:
        """React to the set of currently pressed keys."""
        if left in pressed:
            self.dx = -WALK_SPEED
            self.facing_left, self.facing_right = True, False
            self.aiming_up = self.crouching = False
        if right in pressed:
            self.dx = WALK_SPEED
            self.facing_left, self.facing_right = False, True
            self.aiming_up = self.crouching = False
        if up in pressed:
            self.aiming_up, self.crouching = True, False
        if down in pressed:
            self.aiming_up, self.crouching = False, True
        if jump in pressed:
            if self.on_ground:
                self.dy = JUMP_SPEED
                self.on_ground = False
                if self._on_jump is not None:
                    self._on_jump()
            self.aiming_up = self.crouching = False
        if shoot in pressed:
            self.attack(self.skills.get("Gun"))

    def collide(self, vertical: bool, tile_map: Sequence[str]) -> None:
        """Push the character out of solid tiles along one axis."""
        rect = self.rect
        # Bounds are re-read every step: resolving a tile moves the rectangle.
        i = int(rect.top / TILE_SIZE)
        while i < (rect.top + rect.height) / TILE_SIZE:
            if 0 <= i < len(tile_map):
                row = tile_map[i]
                j = int(rect.left / TILE_SIZE)
                while j < (rect.left + rect.width) / TILE_SIZE:
                    if 0 <= j < len(row) and is_solid_tile(row[j]):
                        self._resolve(vertical, i, j)
                    j += 1
            i += 1

    def _resolve(self, vertical: bool, i: int, j: int) -> None:
        rect = self.rect
        if vertical:
            if self.dy > 0:
                rect.top = i * TILE_SIZE - rect.height
                self.dy = 0.0
                self.on_ground = True
            if self.dy < 0:
                rect.top = i * TILE_SIZE + TILE_SIZE
                self.dy = 0.0
        else:
            if self.dx > 0:
                rect.left = j * TILE_SIZE - rect.width
            if self.dx < 0:
                rect.left = j * TILE_SIZE + TILE_SIZE

    def add_bullet(self, bullet: Weapon) -> None:
        self.bullets.append(bullet)

    def update_weapons(self, time: float, tile_map: Sequence[str]) -> None:
        """Advance all bullets and drop the ones that are no longer active."""
        for bullet in self.bullets:
            bullet.update(time, tile_map)
        self.bullets = [bullet for bullet in self.bullets if bullet.is_active()]

    def attack(self, weapon: Weapon | None) -> None:
        if weapon is not None:
            weapon.attack(self)

    def update(self, time: float, tile_map: Sequence[str]) -> None:
        """Advance physics, animation and hit flashing by `time` units."""
        rect = self.rect
        rect.left += self.dx * time
        self.collide(False, tile_map)

        if not self.on_ground:
            self.dy += GRAVITY * time
        rect.top += self.dy * time
        self.on_ground = False
        self.collide(True, tile_map)

        self.current_frame += time * ANIMATION_SPEED
        if self.current_frame > ANIMATION_FRAMES:
            self.current_frame = 0.0

        if self.dx > 0:
            self.set_sprite_by_pose(Pose.RUN_RIGHT, self.current_frame)
        elif self.dx < 0:
            self.set_sprite_by_pose(Pose.RUN_LEFT, self.current_frame)
        elif not self.crouching and not self.aiming_up:
            pose = Pose.LEFT if self.facing_left else Pose.RIGHT
            self.set_sprite_by_pose(pose, self.current_frame)
        elif self.aiming_up:
            self.set_sprite_by_pose(Pose.UP, self.current_frame)
        else:
            self._make_room_to_lie_down(tile_map)
            self.set_sprite_by_pose(Pose.DOWN, self.current_frame)

        self.dx = 0.0
        self.process_hit()

    def _make_room_to_lie_down(self, tile_map: Sequence[str]) -> None:
        rect = self.rect
        diff = LYING_WIDTH - STANDING_WIDTH
        first_row = int(rect.top / TILE_SIZE)
        last_row = int((rect.top + rect.height - 1) / TILE_SIZE)
        if self.facing_right:
            col = int((rect.left + rect.width + diff - 1) / TILE_SIZE)
        else:
            col = int((rect.left - diff) / TILE_SIZE)
        blocked = any(
            0 <= i < len(tile_map)
            and 0 <= col < len(tile_map[i])
            and is_solid_tile(tile_map[i][col])
            for i in range(first_row, last_row + 1)
        )
        if blocked:
            rect.left += -diff if self.facing_right else diff

    def set_sprite_by_pose(self, pose: Pose | str, current_frame: float) -> None:
        """Select the texture region for a pose and resize the hitbox to it."""
        pose = Pose(pose)
        sheet = self.sheet
        if pose in (Pose.RUN_RIGHT, Pose.RUN_LEFT):
            x = sheet.run_x + sheet.run_step * int(current_frame)
            region = _facing(x, sheet.run_y, 24, 36, pose is Pose.RUN_RIGHT)
        elif pose in (Pose.RIGHT, Pose.LEFT):
            region = _facing(sheet.stand_x, sheet.stand_y, 24, 36, pose is Pose.RIGHT)
        elif pose is Pose.UP:
            region = _facing(sheet.up_x, sheet.up_y, 18, 46, self.facing_right)
        else:
            region = _facing(sheet.down_x, sheet.down_y, 34, 17, self.facing_right)

        self.sprite.texture_rect = region
        rect = self.rect
        bottom = rect.bottom()
        rect.width = abs(region.width) - 8
        rect.height = abs(region.height) - 6
        self.sprite.position = (
            rect.left - self.offset_x - 8 / 2.0,
            rect.top - self.offset_y - 6,
        )
        rect.top = bottom - rect.height


class Contra(Player):
    """The Contra commando."""

    texture = "Player/Contra.png"
    bullet_texture = "Player/Contra.png"
    sheet = _SpriteSheet(
        spawn=IntRect(25 * 8 - 2, 8 - 4, 24, 36),
        run_x=20 * 8,
        run_step=-40,
        run_y=8 - 4,
        stand_x=25 * 8 - 2,
        stand_y=8 - 4,
        up_x=40 * 8 + 4,
        up_y=0,
        down_x=34 * 8,
        down_y=2 * 8 - 1,
    )


class Lugci(Player):
    """The Lugci character, sharing the Contra bullet texture."""

    texture = "Player/Lugci.png"
    bullet_texture = "Player/Contra.png"
    sheet = _SpriteSheet(
        spawn=IntRect(18 * 8 + 1, 20, 24, 36),
        run_x=18 * 8 - 1,
        run_step=24,
        run_y=17 * 8 - 4,
        stand_x=18 * 8 + 1,
        stand_y=17,
        up_x=25 * 8 + 3,
        up_y=7,
        down_x=18 * 8,
        down_y=22 * 8 - 1,
    )