# contra-player

Game-logic core for the player characters of a side-scrolling run-and-gun
game. It covers movement with gravity and jumping, collision against a text
tile map, hit points with a red/white damage flash, simple bullets, and the
choice of texture rectangle for each pose. Nothing here draws to a screen or
reads a real keyboard, so the logic can be driven and tested headlessly.

## Installation

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Modules

- `contra_player.geometry` holds `FloatRect`, `IntRect`, `Color` and `Sprite`,
  the `TILE_SIZE` constant (16) and `is_solid_tile`.
- `contra_player.player` holds `Key`, `Pose`, `Weapon`, `Player` and the two
  playable characters, `Contra` and `Lugci`.

## Tile maps

A map is a list of strings. Each character is a 16×16 pixel tile, and the
digits `0`–`9` are solid. `is_solid_tile` tells you whether a character
blocks movement. Cells outside the map are treated as empty.

## Usage

```python
from contra_player.player import Contra, Key

level = [" " * 40 for _ in range(9)] + ["0" * 40]

hero = Contra()
hero.spawn(50.0, 50.0)

# Key state comes from whatever input layer you use.
pressed = {Key.RIGHT}
hero.control(pressed, Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN, Key.SPACE, Key.F)
hero.update(10.0, level)

print(hero.rect, hero.sprite.texture_rect)
```

The key bindings passed to `control` default to `Key.LEFT`, `Key.RIGHT`,
`Key.UP`, `Key.DOWN`, `Key.SPACE` (jump) and `Key.F` (shoot), so
`hero.control({Key.RIGHT})` does the same as the call above.

`update(time, tile_map)` moves the character horizontally and then vertically,
resolving collisions after each step, applies gravity while airborne, advances
the animation frame and picks a pose. When crouching next to a wall, the
character is pushed away far enough to lie down. Each pose resizes the hitbox
while keeping its bottom edge in place. `set_sprite_by_pose` takes a `Pose` or
its string value, such as `"run_right"`.

`Contra` and `Lugci` move and collide the same way and differ only in their
sprite sheets. `sprite.texture` and `bullet_sprite.texture` hold texture paths
as plain strings.

### Taking damage

```python
hero.take_hit()      # mark the player as hit
hero.process_hit()   # apply 10 damage once, then advance the flash
print(hero.hp)       # 90.0
```

`update` also calls `process_hit` each time. Once more than 200 ms have passed
since the last switch, the sprite colour changes between red and white. After
six switches the hit state clears, the sprite goes back to white, and damage
can be taken again. The new HP value is logged at INFO level on the
`contra_player.player` logger.

### Weapons

By default a player's `skills` mapping holds a plain `Weapon` under `"Gun"`.
The shoot key calls that weapon's `attack` with the player. This fires a new
`Weapon` bullet from the player's centre, one third of the way down. The
bullet travels up when the player aims up, and otherwise left or right in the
direction the player faces. `update_weapons` advances every bullet and drops
those that left the map or hit a solid tile. Pass your own `skills` mapping,
with `Weapon` subclasses if you like, to change what the shoot key does.
`add_bullet` adds a bullet directly.

### Hooks

The `Player` constructor takes a `clock` callable, which returns the time in
milliseconds, and an `on_jump` callback, which is called whenever a jump
starts from the ground. Pass a controllable clock in tests to step through
the hit flash.

## What this package does not do

It has no game loop, window, rendering, sound playback or image loading, and
it does not read the keyboard. Enemies and level loading are not included
either. You supply the pressed keys, the tile map and the elapsed time, and
you draw from `sprite` yourself.