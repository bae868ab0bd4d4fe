import sys

from hex_mc.enums import Color


def ansi_colored(text, color):
    colors = {
        'blue': '\033[34m',
        'red': '\033[31m',
        'reset': '\033[0m',
    }
    return f"{colors.get(color, '')}{text}{colors['reset']}"


def _symbol(color: Color, use_color: bool) -> str:
    if use_color and color is Color.BLUE:
        return ansi_colored(color.value, 'blue')
    if use_color and color is Color.RED:
        return ansi_colored(color.value, 'red')
    return color.value


def render_board(board, include_margins: bool = False, use_color: bool = False) -> str:
    """
    Render a HexBoard as ASCII art.

    Cells are joined by '-' where a horizontal edge exists; the line under
    each row shows the lower-left ('/') and vertical ('\\') edges. Every row
    is shifted right by one more space, which lays the square grid out as a
    rhombus.

    Args:
        board: HexBoard to draw (only read, never mutated)
        include_margins: Draw the full grid including the margin vertices
        use_color: Wrap BLUE/RED labels in ANSI color codes
    """
    pos = board.abs_pos if include_margins else board.rel_pos
    dim = board.abs_dim if include_margins else board.rel_dim

    lines = ["  " + "".join(f"{col:2d}  " for col in range(dim)).rstrip()]
    for row in range(dim):
        row_str = " " * (2 * row) + f"{row:2d} "
        for col in range(dim):
            row_str += _symbol(board.get_vertex_key(pos(row, col)), use_color)
            if col < dim - 1:
                row_str += " - " if board.is_adjacent(pos(row, col), pos(row, col + 1)) else "   "
        lines.append(row_str)

        if row == dim - 1:
            break
        edge_str = " " * (2 * row + 1) + "   "
        for col in range(dim):
            if col > 0:
                edge_str += "/ " if board.is_adjacent(pos(row, col), pos(row + 1, col - 1)) else "  "
            edge_str += "\\ " if board.is_adjacent(pos(row, col), pos(row + 1, col)) else "  "
        lines.append(edge_str.rstrip())

    return "\n".join(lines)


def display_hex_board(board, file=None, include_margins: bool = False) -> None:
    """
    Print a HexBoard, colored when writing to an interactive terminal.

    Args:
        board: HexBoard to draw
        file: file-like object to write to (default: stdout)
        include_margins: Draw the full grid including the margin vertices
    """
    use_color = file is None and sys.stdout.isatty()
    output = render_board(board, include_margins=include_margins, use_color=use_color)
    if file is not None:
        print(output, file=file)
    else:
        print(output)
