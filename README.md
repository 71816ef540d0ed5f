# disarray

A small toolkit of building blocks for games, using only the standard library.

## Modules

- `disarray.xmldoc` – `Xml`, a lenient XML document reader and writer.
  `parse(text)` adds the elements it finds under `Xml.root`, `load(filename)`
  reads a UTF-8 file (raising `ValueError` if it holds no text), `dumps()`
  returns the document as text and `write(filename)` saves it, both starting
  with `<?xml version="1.0"?>`.
- `disarray.xmlnode` – `XmlNode` and `XmlAttribute`. Nodes have a `name`, a
  `value`, `attributes` and `children`; `get_node()` looks a child up by
  position or by tag name, `get_attribute()` by position, and both return
  `None` when there is no match.
- `disarray.model` – `Model` reads the mesh part of RM2 data (vertices,
  normals, triangle indices, optional UVs) and `create_unindexed_mesh()`
  expands it to one `(x, y, z, nx, ny, nz)` entry per triangle corner;
  `AssignedBones` holds the bone weights of a vertex. Truncated or malformed
  data raises `RM2Error`.
- `disarray.rm2` – `SubsetCollection.load(filename)` reads an RM2 file into
  `Subset` objects with their bone assignments and per-frame `PoseBone`
  matrices; `framecount()`, `facecount()` and `len()` report on it, and
  `dump(path)` writes a text report of frame 29's pose matrices and every
  vertex's bone weights.
- `disarray.vectors` – `Vector3D` with `+`, `-`, cross product (`^`), dot
  product (`*`), `length()` and in-place `normalize()`.
- `disarray.colors` – `Color`, an immutable RGBA colour defaulting to opaque
  white, with `Color.from_sequence()` and iteration over its components.
- `disarray.gui.text` – `write_text`, `write_small_text`,
  `write_shaded_text`, `write_small_shaded_text` and `draw_number`, which
  queue one sprite per glyph or digit on any object with a `draw(...)` method
  (the `SpritePainter` protocol).
- `disarray.network.udp` – `UdpSocket`, a non-blocking IPv4 UDP socket, and
  the `Message` records it returns.
- `disarray.network.client` – `Client`, which keeps only the datagrams that
  come from its server address.
- `disarray.network.server` – `Server`, which queues incoming datagrams and
  keeps a list of `ClientFootprint` entries to send to.

## Installing

```
pip install .
```

## Examples

The XML reader only recognises a tag when some text, whitespace included,
stands before its `<`, so put each tag on its own line:

```python
from disarray.xmldoc import Xml

doc = Xml()
doc.parse('<?xml version="1.0"?>\n<Sounds>\n  <sound src="boom.ogg"/>\n</Sounds>\n')
sounds = doc.root.get_node("Sounds")
print(sounds.get_node(0).get_attribute(0).value)  # boom.ogg
```

```python
from disarray.rm2 import SubsetCollection

model = SubsetCollection()
model.load("hero.rm2")
print(len(model), model.framecount(0))
```

```python
from disarray.network.server import Server
from disarray.network.client import Client

with Server() as server:
    server.launch(0)
    host, port = server.address
    with Client(("127.0.0.1", port)) as client:
        client.open()
        client.send_data(b"hello")
        message = server.get_data()  # None if the datagram has not arrived yet
```

## What it does not do

- It draws nothing itself: there is no window, renderer or sprite batcher.
  The text helpers only call `draw(...)` on the object you pass in.
- There are no interactive GUI controls such as buttons, edit boxes,
  sliders or menus, and no keyboard, mouse or gamepad handling.
- RM2 models are loaded as data only; the package does not skin or render them.
- There is no audio support.

## Running the tests

```
pip install .[test]
pytest
```