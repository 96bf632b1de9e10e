# negentropy

A small flowchart diagram editor. A diagram is made of rectangular blocks
(Start, Process, Decision, End) on an endless grid that you can pan and zoom.
Diagrams are stored as XML files in a workspace directory.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window and the drawing.
For the tests, install the `test` extra (`pip install .[test]`) and run `pytest`.

## Running

```
negentropy [WORKSPACE]
```

opens a 1280x720 resizable window. `WORKSPACE` is the directory holding the
diagram files; it defaults to `./Workspace`. On start the editor loads
`Default.xml` from the workspace if it can (a missing or unreadable file is
logged and the diagram starts empty) and lists the `.xml` files in the
workspace. If the workspace directory itself cannot be read, the command
prints `Error: ...` and exits with a non-zero status.

### Controls

- Left mouse button: drag a block. The block you pick up is brought to the front.
- Middle mouse button: pan the view.
- Mouse wheel: zoom in (factor 1.1) or out (factor 0.9), centred on the pointer.
- Delete: remove the block that is at the front (the one picked up last).
- Escape, or closing the window: quit.

The toolbar along the top has these buttons:

- **Save** writes the current diagram to `Default.xml` in the workspace.
- **Add Block** adds a Process block labelled `Block N`, placed to the right
  of the others.
- **Properties** shows or hides a panel with the camera position, the number
  of blocks, and each block's label and type.
- **Load <file>**, one per `.xml` file in the workspace, replaces the diagram
  with that file's contents.
- **Exit** quits.

Each block is drawn as a filled rectangle in its colour with a white outline
and its label centred on it. The grid is left out when the view is zoomed out
so far that a grid cell is less than a pixel wide.

## What it does not do

- There is no undo or redo.
- The window cannot edit a block's label, size, colour or type; set these in
  the XML file or through the library.
- Saving always writes to `Default.xml` in the workspace; there is no
  "save as".
- Blocks are not connected by arrows or lines.

## File format

```xml
<?xml version='1.0' encoding='utf-8'?>
<diagram>
	<camera>
		<position x="0" y="0" />
		<zoom>1</zoom>
	</camera>
	<blocks>
		<block>
			<position x="250" y="100" />
			<size x="120" y="60" />
			<label>Block 1</label>
			<type>Process</type>
			<color x="0.35" y="0.47" z="0.78" w="1" />
		</block>
	</blocks>
</diagram>
```

Vector fields are written as attributes named `x`, `y`, `z`, `w`; colours are
RGBA floats between 0 and 1. Block types are written by name. Elements or
attributes that are missing, and type names that are not known, keep their
default values. Loading a file whose root element is not `<diagram>` leaves
an empty diagram.

## Using it as a library

```python
from negentropy.diagram_data import DiagramData, DiagramLoadError
from negentropy.block import Block, BlockType
from negentropy.vectors import Vec2

diagram = DiagramData()            # empty; DiagramData(path) loads a file
try:
    diagram.load("Workspace/Default.xml")
except DiagramLoadError as exc:
    print(exc)

block = Block()
block.data.position = Vec2(40.0, 80.0)
block.data.label = "Start here"
block.data.type = BlockType.START
diagram.blocks.append(block)
diagram.save("Workspace/Default.xml")
```

- `negentropy.vectors`: immutable `Vec2` and `Vec4` with arithmetic;
  `Vec4` also has `r`, `g`, `b`, `a`.
- `negentropy.block`: `Block` with `rect()` and `contains(point)`;
  its saved fields live in `BlockData`.
- `negentropy.camera`: `Camera` with `screen_to_world`, `world_to_screen`
  and `zoom_at`; its saved fields live in `CameraData`.
- `negentropy.event_handler`: `handle_event(event, camera, blocks)` applies
  `MouseButtonDown`, `MouseButtonUp`, `MouseMotion` and `MouseWheel` events.
- `negentropy.renderer`: `Renderer` draws onto a pygame surface;
  `grid_lines` and `block_color` compute what it draws.
- `negentropy.xmlserial`: `auto_serialize` and `auto_deserialize` write and
  read any dataclass of numbers, strings, enums, vectors and nested
  dataclasses as XML elements.
- `negentropy.application`: `Application` (workspace files, `add_block`,
  `delete_block`, `load`, `save`, `run`) and `main`, the command above.