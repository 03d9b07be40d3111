# raycast2d

A small interactive top-down 2D ray caster. A camera stands in a flat scene
of three circles and one polygon and casts a fan of rays to either side of
the direction it looks in. Each point where a ray meets an object is plotted
in that object's colour, and the two edges of the camera's field of view are
drawn in white, so the outlines facing the camera appear as it moves and
turns.

## Installing

```
pip install .
```

## Running the viewer

```
raycast2d
```

This opens a 600x600 window titled "FDF". Each key press is printed as
`Keycode: <number>` and the scene is redrawn.

| Key         | Action                         |
|-------------|--------------------------------|
| W / S       | move the camera up / down      |
| A / D       | move the camera left / right   |
| Left/Right  | turn the camera                |
| Esc         | quit                           |

Closing the window also quits.

## Modules

- `raycast2d.scene` – `Vec2`, `Camera`, `Circle`, `Polygon` and `Scene`;
  `rotate`, ray intersection with `hit_circle`, `hit_polygon` and
  `find_hit` (each gives the hit point or `None`), `Scene.handle_key` for the
  keys above, and `default_scene()` for the built-in scene.
- `raycast2d.render` – drawing into an image: `clear`, `draw_camera`,
  `draw_circle_outline` and `draw`, which clears the image and draws the
  camera and the ray hits of a scene. Points off the image are dropped.
- `raycast2d.image` – `Image`, a pixel buffer with rows padded to 32 bits
  (`put_pixel`, `get_pixel`, `fill`, `row`), and `PixelFormat`, whose
  `to_pixel` turns a `0xRRGGBB` colour into a pixel value for visuals of
  fewer than 24 bits; `channel_shifts` reads a channel mask.
- `raycast2d.xpm` – reading XPM images from a file (`xpm_from_file`) or from
  a sequence of lines (`xpm_from_data`) into an `Image`; `parse_color` and
  `strip_comments` are the helpers they use. Bad data raises `XpmError`.
- `raycast2d.colornames` – `find_color(name)` looks up the standard colour
  names used in XPM files, ignoring case; `none` gives -1.
- `raycast2d.text` – `find`, `find_unquoted` and `split_words`, the string
  helpers behind the XPM reader.
- `raycast2d.events` – `Display`, `Window`, `Event`, `EventType` and
  `EventMask`: windows with one hook per event type (`hook`, `key_hook`,
  `mouse_hook`, `expose_hook`), and an event loop (`Display.loop`,
  `loop_hook`, `loop_end`) fed by `Display.post` or by an event source
  function given to `Display`.
- `raycast2d.app` – the viewer; `main()` runs it and `keycode_for` maps
  pygame keys to the key numbers the scene uses.

## Using the library

```python
from raycast2d.image import Image
from raycast2d.scene import default_scene
from raycast2d.render import draw

scene = default_scene()
image = Image(600, 600)
draw(image, scene)
print(hex(image.get_pixel(300, 300)))
```

Loading an XPM image:

```python
from raycast2d.xpm import xpm_from_file

image = xpm_from_file("picture.xpm", 32, 0)
print(image.width, image.height)
```

Running the event loop without a window system:

```python
from raycast2d.events import Display, Event, EventType

display = Display()
window = display.new_window(200, 100, "demo")
window.key_hook(lambda key, param: display.loop_end())
display.post(Event(EventType.KEY_RELEASE, window, key=65307))
display.loop()
```

## What it does not do

The scene is fixed: there is no scene file, and only the built-in scene from
`default_scene()` can be viewed. The viewer shows nothing but that scene;
XPM images are read into memory but are not shown on screen, and `Display`
has no drawing operations of its own. Only the pygame window in
`raycast2d.app` puts pixels on screen.

## Tests

```
pip install .[test]
pytest
```