# climbwall

Two-player games for an augmented climbing wall, drawn with pygame. The picture is
meant to be projected onto the wall, and players take part with their hands and
feet. Limb positions come from a body tracker. When no tracker is in use, each player
steers one paddle from the keyboard.

## Games

### Air hockey

Each player defends one half of the screen and hits a puck with their paddles. The
puck bounces off the top and bottom walls. A goal is scored when the puck leaves the
screen through the left or right edge, and the puck is then served again from the
centre towards the player who conceded. A game goes through these stages:

1. **Preparation.** Each player holds a paddle on their ready button. The button
   turns green while a paddle is on it. The game starts when both buttons are
   green at the same moment.
2. **Game.** Play goes on until `game_length` seconds have passed or one player
   reaches `max_score`.
3. **Result.** The final scores are shown. The winner's colour pushes across the
   screen. After `result_sign_delay` seconds a `>`, `<` or `=` sign appears, and
   after `result_demonstration_time` seconds the game exits.

Start it with:

    climbwall-hockey [--config PATH]

`--config` names a settings file. The default is
`Aerohockey/config/Aerohockey_config.txt`. The left player steers with `W`, `A`,
`S` and `D`, and the right player uses the arrow keys. Closing the window ends the
game.

### Territory

Players paint grid cells of 30 pixels in their colour by moving over them. A player
can capture back a cell that the other player holds. A player's score is the number
of cells they hold. The round lasts 30 seconds. The scoreboard then shows the
scores for 5 seconds before the game exits.

Start it with:

    climbwall-territory

This runs a 1024×768 field at 30 updates per second, with the same keys as air
hockey.

### Media files

Fonts, sounds and textures are loaded from paths relative to the working
directory:

- Air hockey: the paths in `HockeyConfig`, under `aerohockey/media/`.
- Territory: under `territory/media/`.

A file that cannot be loaded is reported on standard output and then skipped. For
example, a missing font means that no text is drawn, and a missing sound means
that it stays silent.

## Configuration

Air hockey settings are the fields of the `HockeyConfig` dataclass in
`climbwall.config`. `load_hockey_config(path, config=None)` reads a plain text file
into a config and returns it:

    # lines starting with '#' are ignored
    fps = 120
    max_score = 5
    game_length = 180
    use_velocity_cap = 1
    max_puck_velocity = 800
    paddle_radius = 54

How each line is read:

- The value is the text after the first `=`.
- Every setting whose name appears anywhere in the line is updated from that
  value.
- Flags are read as integers: `0` is false and any other number is true.
- Paths are read up to the first whitespace.

A missing file leaves the settings unchanged. `HockeyConfig.apply_line(line)`
applies a single line.

Territory settings are in `TerritoryConfig`. Nothing loads them from a file.

## Library pieces

- `climbwall.vectors`:
  - `Vec2`, an immutable 2-D vector.
  - `len2`, `dot` and `dist2`.
  - `initial_velocity(speed, rng)`, which gives a random serve direction that is
    never too vertical.
  - `align_center`.
- `climbwall.server`:
  - `GameServer(host, port, bufsize)` accepts one TCP client (`start()`).
  - `get_data()` receives a chunk and decodes it with `decode_message`. This
    subtracts `'0'` from every byte, so the digits of a message become integers.
  - `send_data(n)` sends back the first `n` bytes of the receive buffer.
  - It is a context manager that closes the client on exit.
  - `MenuState`, `GameId` and `Level` name the values of the first, second and
    fourth message digits.
- `climbwall.keyboard.get_char(is_pressed)` returns the character of the first
  pressed letter or digit key, or `None`. The `B` key reports `'C'`, and `C` is not
  read at all.
- `climbwall.screen.get_window()` opens one full-screen 1920×1080 window and returns
  its surface.
- `climbwall.hockey_starter.Starter` and `climbwall.territory_starter.Starter` run a
  session from given settings, a tracker and a surface:
  - `start(server)` runs the session.
  - If a server is given, its messages are polled at most every half second. A
    button digit of `4` ("back") in any received message ends the game.

## What is not included

- **No body tracker.** Games depend only on the `LimbTracker` protocol, plus
  `BodyMaskTracker` for territory. The two commands use a stand-in tracker that
  sees nobody, so they always run with keyboard control.
- **No game-selection loop.** Nothing here waits for the menu client and starts the
  chosen game, and the commands never open a `GameServer`.
- **No calibration, and no other games.** Wall calibration and the other wall
  games are not part of this package.