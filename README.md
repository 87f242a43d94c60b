# theshot

The rules of a small 2D arcade shooter as plain Python objects, with no
rendering attached. You drive the game one frame at a time (it is tuned
for 60 frames a second) and read back positions, colours and texture
coordinates to draw with whatever library you like. The package has no
dependencies outside the standard library.

## Modules

- `theshot.geometry`: the immutable `Vec3` (with `+` and `-`), `Color`,
  the screen `Mode` enum (`TITLE`, `TUTORIAL`, `GAME`, `RESULT`, `EDIT`,
  `RANKING`), `PlayerView` (position, `visible`, `vulnerable`) that the
  other systems look at, and the quad helpers `quad_around`, `diagonal`,
  `rotated_quad` and `fullscreen_quad`. The screen is 1280 x 720.
- `theshot.input`: `Keyboard` and `Joypad` keep the current and previous
  frame's state and answer `press`, `trigger`, `release` and `repeat`.
  `Key` names the keyboard scan codes the game uses and `JoyKey` the pad
  buttons. `Joypad.left_stick_tilted()` reports left-stick tilt and
  `Joypad.right_stick_repeating()` a repeat that fires every 160 ms while
  the right stick is held over. `Joypad.release` and `Joypad.repeat`
  always answer `False`.
- `theshot.timer`: `CountdownTimer` counts down one second every
  `frames_per_second` updates (100 seconds at 60 by default); `digits()`
  gives the hundreds, tens and units and `texture_offsets()` the matching
  u coordinates into a ten-digit number strip.
- `theshot.fade`: `Fade` and `FadeState` (`NONE`, `IN`, `OUT`). `start()`
  fades a black overlay in; when it is fully opaque the optional
  `set_mode` callback is called with the next `Mode` and the overlay fades
  back out. `color` gives the overlay colour.
- `theshot.effect`: `EffectPool` of up to 4096 shrinking glow dots.
- `theshot.particle`: `ParticleEmitter`, bursts that scatter two random
  effects into an `EffectPool` each frame for 15 frames. Pass a seeded
  `random.Random` for repeatable results.
- `theshot.explosion`: `ExplosionPool` of animated explosions;
  `Explosion.texture_coords()` gives the current frame of the strip.
- `theshot.bullet`: `BulletPool` with `BulletType.PLAYER` and
  `BulletType.ENEMY` bullets. `update()` moves them, ages them and calls
  `on_enemy_hit(index, pos)` or `on_player_hit(pos)` on a hit.
  `Bullet.corners()` gives the rotated sprite corners.
- `theshot.item`: `ItemPool` of score items (`ItemType`, `ItemState`)
  that slide towards the middle of the screen and stop there.
  `update(player_pos)` returns the score picked up that frame.
- `theshot.enemy`: `EnemyFleet` with the six `EnemyType` behaviours:
  side to side, up and down, a rectangular `Patrol`, a fixed turret, a
  chaser that homes in on the player and a boss that jumps across the
  screen. Enemies fire into a `BulletPool`; `hit(index, damage)` flashes a
  damaged enemy or, when it dies, returns its score and drops an item and
  a particle burst if an `ItemPool` and `ParticleEmitter` were given.
- `theshot.edit`: `WaveEditor` moves a cursor enemy with the keyboard
  (A/D/W/S to move, Up/Down to change type, Return to place, F7 to save
  when a path was given) and `save()` writes a binary wave file;
  `read_wave_file()` reads one back as a list of `Placement`.
- `theshot.pause`: `PauseMenu` with the `PauseChoice` entries continue,
  retry, quit and ranking. `update()` returns the confirmed choice, and
  `TARGET_MODES` maps each choice but continue to the `Mode` it leads to.
- `theshot.game`: `GameFlow` and `GameState`. `update()` returns `True`
  30 frames after the player is gone, the waves are finished or time has
  run out; `toggle_pause()` flips the pause flag.
- `theshot.app`: `FrameClock` decides when a 60-per-second frame is due
  and measures frames per second; `ModeManager` calls `init`, `uninit`,
  `update` and `draw` on the screen objects you register for each `Mode`
  and runs the fade between them.

## Examples

```python
from theshot.timer import CountdownTimer

timer = CountdownTimer()
for _ in range(60):
    timer.update()
print(timer.digits())  # (0, 9, 9)
```

```python
from theshot.bullet import BulletPool
from theshot.enemy import EnemyFleet, EnemyType
from theshot.geometry import PlayerView, Vec3

bullets = BulletPool()
fleet = EnemyFleet(bullets)
fleet.spawn(Vec3(640.0, 100.0), EnemyType.TWO)

player = PlayerView(Vec3(640.0, 600.0))
fleet.update(player, on_player_hit=lambda pos: print("player hit at", pos))
bullets.update(player, fleet.enemies, on_player_hit=lambda pos: print("shot at", pos))

print(fleet.hit(0, 2))  # 20000
```

Every pool offers `active()`, the objects in use in slot order, which is
all a renderer needs to draw them.

## What this package does not do

- It draws nothing, opens no window, plays no sound and reads no real
  keyboard or pad: you pass the pressed keys and pad state in yourself.
- It has no player ship of its own; the player is only the `PlayerView`
  you hand to the other systems, and you decide what a hit does to it.
- It keeps no running score, saves no ranking and has no title,
  tutorial, result or ranking screens; `ModeManager` runs whatever screen
  objects you register.
- It does not sequence waves during play. `read_wave_file` reads a saved
  layout, and spawning those enemies is up to you.
- There is no command to run; the package is a library.