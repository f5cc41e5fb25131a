# guts-sos

Pieces of a short atmospheric game: you are in a basement bunker under
artillery fire, and the secret telegraph wire is all that remains. The
package provides the Morse alphabet, asset loading, a game window, text
widgets, buttons, a fading curtain, a telegraph key, a bunker backdrop and
speaking characters, all built on `pygame`.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `guts_sos.morse`: `decode_letter(bits)` turns a sequence of booleans
  (`True` for a dash, `False` for a dot) into a character and returns
  `None` when there is no match. Eight dots decode to `BACKSPACE`.
  `bits_to_symbols(bits)` renders such a sequence as `•` and `—`.
- `guts_sos.resources`: `Resources(root)` loads every texture, font,
  sound and piece of music from a resource directory with `load()`.
  A texture that cannot be loaded is replaced by the placeholder texture,
  and a font that cannot be loaded is replaced by the default font. A
  missing sound or piece of music, or a missing placeholder texture, raises
  `ResourceError`. When no audio device is available, sounds are replaced
  by silent stand-ins. `Resources.font(name, size)` gives a font at a
  pixel size. `get_scale(window_size)` gives the uniform scale that makes
  1280×720 assets cover a window.
- `guts_sos.window`: `Window(resources)` opens a resizable 1280×720 window
  (it raises `ResourceError` if the resources are not loaded) and can
  `resize(size)`, `change_fullscreen()` and `close()`. The window registers
  itself, and `get_window()`, `check_window()` and `window_size()` reach it;
  they raise `WindowLostError` when no window is registered. `Clock`
  measures elapsed seconds.
- `guts_sos.logger`: `Logger(stream)` writes each logged value on its own
  line; two-number tuples are written as `{x:y}` (see `format_vector`).
- `guts_sos.widget`: `Widget` base class and `OriginState`.
- `guts_sos.label`: `Label`, a line of text positioned around its centre,
  top-left or bottom-left corner.
- `guts_sos.stamp_label`: `StampLabelSound` and `StampLabelMusic`, labels
  that type their text letter by letter with a sound per letter or a voice
  track.
- `guts_sos.buttons`: `BaseButton` and `LabelButton`, which turns red under
  the pointer and runs `on_click`, `on_press` and `on_release` callbacks.
- `guts_sos.curtain`: `Curtain` and `ShowType`, the fade-in, hold and
  fade-out of a black screen. With `should_wait_response=True` it holds
  until `let_go(on_end)` is called, and `on_end` runs once it has closed.
- `guts_sos.telegraph`: `Telegraph(resources)`, the telegraph key. Call
  `key_down()` and `key_up()` as the key moves and `update(delta_time)`
  every frame. A press of a quarter of a second or more is a dash, a
  shorter one a dot. After a pause of 1.7 seconds the dots and dashes
  become a letter; after 4 seconds a space is added between words. Eight
  dots erase the last letter.
- `guts_sos.background`: `BasementBackground(resources)`, the bunker
  picture with a ceiling lamp swaying 1.5 degrees each way over ten seconds.
- `guts_sos.character`: `Character`, a portrait in a lower corner that says
  its phrases one after another; `is_end_of_speech()` tells when it has
  finished.

## What this package does not do

There is no command to start the game and no main loop: the package does
not queue scenes, and it has no opening screen, main menu, intro or level,
and no screen shake. Putting the pieces above into a running game is left
to the code that uses them.