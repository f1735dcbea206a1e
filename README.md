# hovercat

A small side-scrolling arcade game. A cat hovers across the screen while
pipes scroll in from the right; flap to keep it in the air and steer it
through the gaps. Every pipe passed scores a point, and the pace slowly
quickens the longer you survive.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, draws the game and plays
its sounds.

## Playing

```
hovercat
```

The command takes these options:

- `--windowed`: start in a resizable window instead of a borderless window
  the size of the desktop
- `--mobile`: use tap controls (a mouse click or touch counts as a tap)
- `--assets DIR`: directory that holds the `Data` folder (default: the
  current directory)
- `--highscore FILE`: file that keeps the best score (default:
  `highscore.txt` in the current directory)

The game looks in `Data` for `background.jpg`, `redkat_eyes_open.png`,
`redkat_eyes_closed.png`, `pipe.png`, `fly.mp3`, `hit.mp3`, `ding.mp3` and
`music.mp3`. Any image that is missing is replaced by a plain drawn shape,
and any sound that is missing is simply not played, so the game runs
without assets too. Text is drawn with pygame's built-in font.

### Controls

- **Enter**: start the game, or play again after a crash
- **Space**, **W** or **Up Arrow**: flap
- **P**: pause or resume
- **M**: turn the music on or off
- **Esc**: ask to quit; answer **Y** to quit or **N** (or **Esc**) to carry on
- **Alt+Enter**: switch between the borderless window and a resizable window

When the window loses focus the game pauses until it is focused again.

With `--mobile`, a tap starts the game, flaps, and starts a new round after
a crash. A tap on the strip at the top of the screen pauses the game, and
another tap resumes it.

### How a round goes

- The cat falls under gravity, and each flap sends it upward.
- A round ends when the cat touches a pipe or leaves the top or bottom of
  the screen. After a crash, half a second passes before a new round can
  be started.
- Pipes speed up a little every second, up to a fixed top speed. Their
  spacing stays even as they get faster.
- Each new gap sits no more than a set distance above or below the last
  one, so every gap can be reached.
- The score, the high score and the current speed are shown in the top
  right corner. A new high score is written to the high-score file as soon
  as it is reached.

## Using the game logic on its own

The rules of the game live in `hovercat.world.Hovercat`, which does no
drawing, no sound and no input handling. Call `Hovercat.start()` to leave
the welcome screen, then `Hovercat.update(dt, controls)` with the time step
in seconds and a `hovercat.world.Controls` value describing that frame's
input. It returns a list of `hovercat.world.Cue` values (`FLAP`, `SCORE`,
`CRASH`, `MUSIC_START`, `MUSIC_PAUSE`, `FULLSCREEN`) for the front end to
act on. `Hovercat.reset()`, `flap()`, `toggle_music()`, `spawn_pipe()`,
`collision_box()` and `player_eyes_closed()` are available as well, and
the pipes on screen are in `Hovercat.pipes` as `hovercat.world.Pipe`
values.

Other pieces:

- `hovercat.highscore.HighScoreStore(path)`: `load()` returns the stored
  score, or 0 if the file is missing or unreadable; `save(score)` writes it,
  leaving an unwritable file alone.
- `hovercat.ui.hud_lines(game)` and `hovercat.ui.overlay_lines(game, mobile)`:
  the score panel and the menu text for the current state.
- `hovercat.settings.screen_scale(w, h)` and `letterbox_rect(w, h)`: how the
  960×540 game canvas is scaled and centred in a window of another size.
- `hovercat.app.App`: the pygame window that ties these together.

## What it does not do

The game runs only as a desktop pygame window. It does not detect touch
devices on its own; tap controls are chosen with `--mobile`.

## Running the tests

```
pip install ".[test]"
pytest
```