import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from life.row import Row
from life.world import Cell, World

D, A = Cell.DEAD, Cell.ALIVE


def test_render_dead_alive_dead():
    assert Row([D, A, D]).render() == " # "
    assert str(Row([D, A, D])) == " # "


def test_render_width_and_glyphs():
    row = Row([A, A, D, D, A])
    text = row.render()
    assert text == "##  #"
    assert len(text) == len(row) == 5
    assert set(text) <= {"#", " "}


def test_render_empty():
    assert Row([]).render() == ""


def test_sequence_access():
    row = Row([D, A, A])
    assert row[1] is A
    assert list(row) == [D, A, A]
    assert row == Row((D, A, A))
    assert row != [A, A, A]


def test_row_taken_before_evolve_keeps_old_generation():
    world = World.from_cells([D, A, D, D, A, D, D, A, D], 3, 3)
    before = world.get_row(1)
    world.evolve()
    assert before == [D, A, D]
    assert world.get_row(1) == [A, A, A]
