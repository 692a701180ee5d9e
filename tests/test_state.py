import pytest

from myrtle.domains.turtle.state import Heading, PenState, TurtleState, clamp


class TestHeading:
    def test_right_cycles_clockwise(self) -> None:
        assert Heading.NORTH.right() is Heading.EAST
        assert Heading.EAST.right() is Heading.SOUTH
        assert Heading.SOUTH.right() is Heading.WEST
        assert Heading.WEST.right() is Heading.NORTH

    def test_left_cycles_counter_clockwise(self) -> None:
        assert Heading.WEST.left() is Heading.SOUTH
        assert Heading.SOUTH.left() is Heading.EAST
        assert Heading.EAST.left() is Heading.NORTH
        assert Heading.NORTH.left() is Heading.WEST

    @pytest.mark.parametrize("heading", list(Heading))
    def test_four_turns_return_to_start(self, heading: Heading) -> None:
        h = heading
        for _ in range(4):
            h = h.left()
        assert h is heading
        for _ in range(4):
            h = h.right()
        assert h is heading


class TestClamp:
    def test_inside_range_unchanged(self) -> None:
        assert clamp(7, 50) == 7

    def test_saturates_at_both_ends(self) -> None:
        assert clamp(-3, 50) == 0
        assert clamp(50, 50) == 49
        assert clamp(1000, 50) == 49


class TestTurtleState:
    def test_defaults(self) -> None:
        t = TurtleState(50, 50)
        assert t.heading is Heading.EAST
        assert t.position == (0, 0)
        assert t.pen == PenState(down=False, glyph=' ')
        assert t.line == 1

    def test_step_follows_heading(self) -> None:
        t = TurtleState(50, 50, row=10, col=10)
        t.step()
        assert t.position == (10, 11)
        t.heading = Heading.SOUTH
        t.step()
        assert t.position == (11, 11)
        t.heading = Heading.WEST
        t.step()
        assert t.position == (11, 10)
        t.heading = Heading.NORTH
        t.step()
        assert t.position == (10, 10)

    def test_backward_step_keeps_heading(self) -> None:
        t = TurtleState(50, 50, row=5, col=5)
        t.step(-1)
        assert t.position == (5, 4)
        assert t.heading is Heading.EAST

    def test_step_into_wall_saturates(self) -> None:
        t = TurtleState(50, 50)
        t.heading = Heading.NORTH
        t.step()
        assert t.position == (0, 0)
        t.move_to(49, 49)
        t.heading = Heading.EAST
        t.step()
        assert t.position == (49, 49)

    def test_move_to_clamps(self) -> None:
        t = TurtleState(50, 50)
        t.move_to(100, -5)
        assert t.position == (49, 0)

    def test_constructor_clamps_position(self) -> None:
        t = TurtleState(10, 20, row=-1, col=99)
        assert t.position == (0, 19)

    def test_turns(self) -> None:
        t = TurtleState(50, 50)
        t.turn_left()
        assert t.heading is Heading.NORTH
        t.turn_right()
        t.turn_right()
        assert t.heading is Heading.SOUTH
