# jigglydrum

A small drum pad toy. A square sits in the middle of a window and jiggles.
Hit a key and a drum sample plays while the square changes colour.

## Install

    pip install jigglydrum

## Playing

    jigglydrum [X [Y [W [H]]]]

The command first prints its name and each argument, one per line.

With no arguments the window opens at 50,50 with size 640x360, borderless and
resizable. Giving any of the window arguments opens a borderless window at
that position and size that grabs keyboard and mouse input, for example:

    jigglydrum 680 15 680 316

Arguments are read leniently: leading digits are used and anything after them
is ignored, so an argument with no leading number counts as 0.

The samples are read from `data/Dry-Kick.wav` and
`data/Ensoniq-ESQ-1-Snare.wav`, relative to the working directory. A missing
sample is reported on standard error and that pad stays silent. If the audio
device cannot be opened, the command prints `Unable to open audio: ...` on
standard error and exits with status 1.

Keys:

| Key              | Effect                                          |
|------------------|-------------------------------------------------|
| `j` or `i`       | snare; the square turns orange                  |
| `Space`          | kick; the square turns purple                   |
| `Shift` + key    | snare plays at full volume (otherwise quietly)  |
| `Alt-q`/`Ctrl-q` | quit                                            |

Holding a key does not retrigger its sample; releasing it turns the square
grey again. Every frame (60 per second) the square's width and height are set
at random to within 1/16 of its resting size of 40 pixels, around the window
centre. The random sequence is the same on every run.

## What it does not do

- Closing the window through the window manager does not quit; use
  `Alt-q` or `Ctrl-q`.
- The window is not kept above other windows.
- On screen the square always jiggles around its resting size, so the
  shrink on a snare and the stretch on a kick are not visible; only the
  colour change is. The shapes are available through the library (below).

## Tag helper

`ctags-dlist` reads a compiler dependency file (as written by `-M ... -MF`)
and writes the header paths it lists to `headers.txt` in the current
directory, one per line, skipping the object target (ending in `o:`), source
files (ending in `cpp`) and `\` line continuations:

    ctags-dlist build/main.d

The list is meant to feed `ctags -L headers.txt`. The command exits with
status 1 and a message if it is not given exactly one file, if a file cannot
be opened, or if the dependency file does not end with a space or newline or
holds a path of 10240 characters or more.

## Using it as a library

- `jigglydrum.me.Me` holds the square's resting size, centre, `color` and
  drawn rectangle (`rect`, as left, top, width, height); `shrink`, `expand`,
  `relax` and `jiggle` reshape it and `set_color` takes a
  `jigglydrum.me.Color`.
- `jigglydrum.performer.Performer` turns `key_down` on a `Pad` into a `Hit`
  (sample name and volume, 0-128), or `None` while the pad is already held,
  and keeps the square's colour and shape in step; `key_up` releases a pad.
  `snare_volume(shift)` gives 128 with Shift and 12 without.
- `jigglydrum.window_info.parse_window_args` builds a `WindowInfo` from
  command-line arguments; `atoi` is the lenient number reader it uses.
- `jigglydrum.app.run` opens the window for a given `WindowInfo`;
  `window_flags` maps its flags to pygame display flags.
- `jigglydrum.ctags_dlist.header_paths` extracts header paths from the text
  of a dependency file, and `write_header_list(dep_path, out_path)` writes
  them to a file (`headers.txt` by default). Both raise
  `DependencyListError` on a malformed list.