"""
Tests for the SVG path data parser.
"""

import unittest

from svgscene.core.shapes import (
    Point, MoveToSegment, LineToSegment, CubicBezierSegment, ClosePathSegment
)
from svgscene.io.errors import PathDataError, SVGParseError
from svgscene.io.path_data import PathDataParser, parse_path_data, tokenize_path


class TestTokenizer(unittest.TestCase):
    """Test splitting path data into commands."""

    def test_commands_and_params(self):
        commands = tokenize_path("M10 10 L20 20 Z")
        self.assertEqual([c.letter for c in commands], ['M', 'L', 'Z'])
        self.assertEqual(commands[0].params.strip(), "10 10")
        self.assertEqual(commands[2].params, "")

    def test_positions_and_indexes(self):
        commands = tokenize_path("M1 2 L3 4")
        self.assertEqual([c.position for c in commands], [0, 5])
        self.assertEqual([c.index for c in commands], [0, 1])

    def test_exponent_is_not_a_command(self):
        commands = tokenize_path("M1e2 3E-1")
        self.assertEqual(len(commands), 1)
        self.assertEqual(commands[0].params, "1e2 3E-1")

    def test_text_before_first_command_dropped(self):
        commands = tokenize_path("5 5 M1 1")
        self.assertEqual([c.letter for c in commands], ['M'])

    def test_empty(self):
        self.assertEqual(tokenize_path(""), [])


class TestPathDataParser(unittest.TestCase):
    """Test parsing path data into segments."""

    def test_move_line_close(self):
        self.assertEqual(parse_path_data("M10 10 L20 20 Z"), [
            MoveToSegment(Point(10, 10)),
            LineToSegment(Point(20, 20)),
            ClosePathSegment(),
        ])

    def test_cubic(self):
        segments = parse_path_data("M0 0 C1 1 2 2 3 3")
        self.assertEqual(segments[1], CubicBezierSegment(Point(1, 1), Point(2, 2), Point(3, 3)))

    def test_trailing_command_kept(self):
        segments = parse_path_data("M0 0 L5 5")
        self.assertEqual(segments[-1], LineToSegment(Point(5, 5)))

    def test_commas_and_signed_decimals(self):
        segments = parse_path_data("M-1.5,2.25L.5,-3e1")
        self.assertEqual(segments, [
            MoveToSegment(Point(-1.5, 2.25)),
            LineToSegment(Point(0.5, -30.0)),
        ])

    def test_compact_numbers(self):
        self.assertEqual(parse_path_data("M10-5L20,20"), [
            MoveToSegment(Point(10, -5)),
            LineToSegment(Point(20, 20)),
        ])
        self.assertEqual(parse_path_data("M0.5.5"), [MoveToSegment(Point(0.5, 0.5))])

    def test_every_segment_absolute(self):
        segments = parse_path_data("m1 1 l1 1 c1 1 1 1 1 1 z")
        self.assertTrue(all(seg.absolute for seg in segments))

    def test_relative_commands_resolved(self):
        segments = parse_path_data("m10 10 l5 0 c0 5 5 5 5 0 z l1 1")
        self.assertEqual(segments, [
            MoveToSegment(Point(10, 10)),
            LineToSegment(Point(15, 10)),
            CubicBezierSegment(Point(15, 15), Point(20, 15), Point(20, 10)),
            ClosePathSegment(),
            LineToSegment(Point(11, 11)),
        ])

    def test_legacy_relative_keeps_raw_coordinates(self):
        parser = PathDataParser(legacy_relative=True)
        self.assertEqual(parser.parse("m10 10 l5 0"), [
            MoveToSegment(Point(10, 10)),
            LineToSegment(Point(5, 0)),
        ])

    def test_unsupported_command_dropped(self):
        self.assertEqual(parse_path_data("Q10 10 20 20"), [])

    def test_unsupported_command_between_supported(self):
        segments = parse_path_data("M0 0 H50 L1 1")
        self.assertEqual(segments, [MoveToSegment(Point(0, 0)), LineToSegment(Point(1, 1))])

    def test_empty(self):
        self.assertEqual(parse_path_data(""), [])
        self.assertEqual(parse_path_data("   "), [])


class TestPathDataErrors(unittest.TestCase):
    """Test hard failures for recognised commands."""

    def test_malformed_parameter(self):
        with self.assertRaises(PathDataError) as ctx:
            parse_path_data("M10 xx")
        self.assertEqual(ctx.exception.command, 'M')
        self.assertEqual(ctx.exception.position, 0)
        self.assertEqual(ctx.exception.index, 0)

    def test_missing_parameter(self):
        with self.assertRaises(PathDataError) as ctx:
            parse_path_data("M0 0 L5")
        self.assertEqual(ctx.exception.command, 'L')
        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.position, 5)

    def test_non_numeric_token(self):
        with self.assertRaises(PathDataError):
            parse_path_data("M0 0 C1 1 2 2 3 1-")

    def test_out_of_range_number(self):
        with self.assertRaises(PathDataError) as ctx:
            parse_path_data("M0 0 L1e400 0")
        self.assertEqual(ctx.exception.command, 'L')

    def test_junk_between_numbers(self):
        with self.assertRaises(PathDataError):
            parse_path_data("M1 # 2")

    def test_implicit_repeat_is_rejected(self):
        with self.assertRaises(PathDataError):
            parse_path_data("M0 0 10 10")

    def test_close_with_parameters(self):
        with self.assertRaises(PathDataError):
            parse_path_data("M0 0 Z 4")

    def test_error_hierarchy(self):
        with self.assertRaises(SVGParseError):
            parse_path_data("L")
        with self.assertRaises(ValueError):
            parse_path_data("L")


if __name__ == '__main__':
    unittest.main()
