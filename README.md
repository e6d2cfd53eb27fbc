# moonfield

A small top-down farming sandbox. You walk a grassy field, bump into rocks,
trees and a wall, dig paths with a shovel, and watch time pass on a calendar
of solar years, lunar months, seasons and moon phases. The light fades at
dusk and returns at dawn, with hours that shift with the season and a night
that is brighter under a full moon.

## Install

```
pip install .
```

## Play

```
moonfield
```

Options:

- `--settings PATH`: settings JSON file (default `assets/config/settings.json`)
- `--assets DIR`: directory holding the images (default `assets`)
- `--save PATH`: world save file (default `save/world.json`)

Images are looked up under the assets directory, for example
`images/tiles/GrassTile.png`, `images/tiles/PathTile.png` and
`images/structures/Stone.png`. An image that cannot be read is logged as a
warning and that object is drawn without a picture.

Controls:

- `W` `A` `S` `D`: move; hold `Left Shift` to run
- `1`–`4`: choose a hotbar slot
- left mouse button: dig the grass tile under the cursor into a path
- `I`: open or close the inventory panel
- `J` / `K`: lose or regain health
- `Q` or closing the window: quit

Settings are read at start (a missing file gives the defaults: 1280×720,
144 FPS) and written back on exit. When the game closes, the player's
position and the game time are saved to the save file and loaded again the
next time it starts.

## Time

One real second is one in-game minute. A day has 24 hours, a lunar month 8
days, a season 2 lunar months, and a solar year 4 seasons. The moon shows a
new phase each day and goes through all 8 once each lunar month. A new world
starts at 06:00 on day 1, lunar 1, solar 1, in spring.

`moonfield.gametime.GameTime` keeps this clock; its `calendar()` gives the
date, season and moon phase, and `format_date()` gives text such as
`Solar 1, Lunar 1, Day 01 - 06:00`. `moonfield.daylight.light_intensity_at`
gives the light level in `[0, 1]` for any hour, season and moon phase, and
`DayNightCycle` tracks it for a running clock.

## What it does not do

- The hotbar and inventory show empty slots only; items cannot be picked up,
  stored or chosen, and the left mouse button always acts as a shovel.
- The interact key (`E`), the right mouse button, `Escape` and `M` are read
  but do nothing: there is no pause menu and no map.
- Only the player's position and the game time are saved; dug paths are lost
  when the game closes.
- Volume, display and key-binding settings are kept in the settings file but
  are not applied; keys are fixed as listed above.

## Development

```
pip install -e ".[test]"
pytest
```