# neonrpg

Rules and state for a top-down cyberpunk role-playing game. The package has no drawing
or window code. It covers how the player moves and collides with walls, how fights
resolve, what the inventory and consumables do, how the story moves on, which doors
lead where, and how the pause menu and save-file checks work. You pass in the pressed
key codes, the mouse position and a function that samples the collision map. You read
back positions, bar widths, damage, scene changes and story progress.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `neonrpg.textutil` holds the string helpers `count_word`, `split_words`, `split_lines`,
  `is_numeric`, `is_alpha`, `is_lower`, `is_upper`, `is_printable`, `reverse`,
  `contains`, `parse_digits`, `format_number`, `format_message` (it handles `%c`, `%s`,
  `%d`, `%i` and `%%`) and `read_file`. It also has the number helpers `is_prime`,
  `next_prime`, `power` and `integer_sqrt`.
- `neonrpg.geometry` holds `Vector`, `Rect` (with `contains` and `intersects`) and
  `shape_bounds`, the bounds of an outlined rectangle. It also has `Clock`, which
  measures elapsed seconds and takes an injectable time source, and `FrameAnimation`
  for sprite-sheet frames.
- `neonrpg.keys` holds the `Key` codes, `key_name`, `Action` and `Keybinds`.
  `Keybinds.request` marks an action as waiting for a new key. `handle_key` binds that
  key. `is_moving`, `is_sprinting` and `is_idle` check a set of pressed keys.
- `neonrpg.player` holds `Direction` (eight directions) and `Player`:
  - `move` takes a single step.
  - `try_move` reads the held keys and samples the collision map before it steps. A
    colour with a zero channel is a wall.
  - `advance_frame` and `idle_direction` drive the walk animation.
- `neonrpg.story` holds `Story`, the progress flags and the dialogue lines. `layout`
  gives the on-screen position of each line.
- `neonrpg.inventory` holds `Item` and `Inventory`, four slots that each hold one item
  type and a count. Its methods are `add_item`, `load`, `select_left`, `select_right`,
  `clear_empty` and `counts`.
- `neonrpg.effects` holds `Effects`. `use_selected` consumes sugar or a syringe. `tick`
  runs the 30-second sugar countdown.
- `neonrpg.hud` has these parts:
  - `Hud` handles life and energy, with `regenerate`, `recharge`, `life_bar_width`,
    `energy_bar_width` and `animate_prompt`.
  - `prompt_position` gives where the "press E" hint goes.
  - `Death` shows the death delay and then the respawn.
- `neonrpg.enemies` holds `Enemy` (`is_active`, `engage`) and `parse_enemies` /
  `load_enemies`, which read `x,y,dialogue,scene,when,agro` lines. It also has
  `katana_strike`, which returns a `StrikeResult` with dollars, xp, boss damage and
  the enemies killed.
- `neonrpg.boss` holds `Boss` (`face`, `update`: it chases, animates and hits in reach)
  and `BossBar` (`width`, `check_defeat`).
- `neonrpg.hackbot` holds `near_drone` and `HackTerminal`, the drone-hacking terminal.
  `from_text` and `load` split a script into the typed part and the reply part.
  `type_key` and `reply` reveal them in turn. `AnswerBanner` shows "Error" or "Passed"
  for 1.5 seconds.
- `neonrpg.world` holds:
  - `Scene`.
  - `transition`, which maps collision-map door colours to a `Transition`, subject to
    story progress.
  - `house_interaction` and `factory_interaction`.
  - `Zoom`, which handles mouse-wheel zoom and the overlay offsets.
- `neonrpg.menu` holds:
  - `Stats`, with `xp_bar_width`.
  - `validate_save` and `save_available`. A save holds 27 numeric fields separated by
    `;`, read from `save/save.txt` by default.
  - `slider_volume`.
  - `PauseMenu`, with `hover` and `click`. `click` returns `MenuAction` values.

## Examples

```python
from neonrpg.textutil import split_words, count_word

line = "120.5,340,Hello there,1,0,1"
print(split_words(line, ","))   # ['120.5', '340', 'Hello there', '1', '0', '1']
print(count_word(line, ","))    # 6
```

```python
from neonrpg.inventory import Inventory, Item
from neonrpg.effects import Effects

inventory = Inventory()
inventory.load(Item.SUGAR)
inventory.load(Item.SUGAR)
print(inventory.counts())               # (2, 0, 0, 0)
print(Effects().use_selected(inventory))  # Item.SUGAR
print(inventory.counts())               # (1, 0, 0, 0)
```

```python
from neonrpg.story import Story
from neonrpg.world import Scene, transition

door = transition((255, 0, 0), Story())
print(door.scene is Scene.BAR, door.position)  # True Vector(x=160.0, y=360.0)
```

## What it does not do

The package does not open a window, draw sprites or text, or play music or sound. It
has no main menu screen, no settings screen and no command to start a game. Saves can
be checked but not written or loaded into the game state. The game loop is up to the
caller: poll input, call these functions each frame, and render the results.