from levelgen.ascii_view import AsciiCanvas, render_text
from levelgen.cells import DEFAULT_TILE_KEYS, CellLabel
from levelgen.grid import LevelGrid
from levelgen.projection import project_grid


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def render(self, tile_key, position):
        self.calls.append((tile_key, position))


def _sample_grid():
    grid = LevelGrid(3, fill=CellLabel.EMPTY)
    grid.fill_cell(2, 0, CellLabel.WALL)
    grid.fill_cell(0, 1, CellLabel.PLAYER)
    grid.fill_cell(1, 2, CellLabel.DOOR)
    return grid


def test_projection_renders_non_empty_cells_in_row_order():
    renderer = RecordingRenderer()
    report = project_grid(_sample_grid(), renderer, DEFAULT_TILE_KEYS)

    assert renderer.calls == [
        ("wall", (2, 0)),
        ("player", (0, 1)),
        ("door", (1, 2)),
    ]
    assert report.rendered == 3
    assert report.skipped == 0
    assert report.missing_labels == set()


def test_missing_tile_key_skips_cell_and_continues():
    tile_keys = {CellLabel.WALL: "stone_wall", CellLabel.PLAYER: "hero"}
    renderer = RecordingRenderer()
    report = project_grid(_sample_grid(), renderer, tile_keys)

    assert renderer.calls == [("stone_wall", (2, 0)), ("hero", (0, 1))]
    assert report.rendered == 2
    assert report.skipped == 1
    assert report.missing_labels == {CellLabel.DOOR}


def test_empty_grid_renders_nothing():
    renderer = RecordingRenderer()
    report = project_grid(LevelGrid(4, fill=CellLabel.EMPTY), renderer, {})
    assert renderer.calls == []
    assert report.rendered == report.skipped == 0


def test_render_text_draws_glyphs():
    grid = LevelGrid(3)
    grid.fill_cell(1, 1, CellLabel.PLAYER)
    assert render_text(grid) == "###\n#@#\n###"


def test_render_text_leaves_unmapped_cells_blank():
    text = render_text(_sample_grid(), {CellLabel.WALL: "wall"})
    assert text == "..#\n...\n..."


def test_ascii_canvas_marks_unknown_tile_keys():
    canvas = AsciiCanvas(2)
    canvas.render("lava", (1, 0))
    canvas.render("key", (0, 1))
    assert canvas.to_text() == ".?\nk."
