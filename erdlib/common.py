class Location:
    """
    Represents a location (point or span) in the parsed input line.

    Attributes:
    input_str: The input string being lexed/parsed.
    start_position(int): The start of the span.
    end_position(int): The end of the span if applicable.
    file_name(str): Optional name of the input origin. Used only in reports.
    line, column (int): The line/column calculated from start_position and
        input_str.
    """

    __slots__ = ['input_str', 'start_position', 'end_position', 'file_name',
                 '_line', '_column']

    def __init__(self, input_str, start_position, end_position=None,
                 file_name=None):
        self.input_str = input_str
        self.start_position = start_position
        self.end_position = start_position if end_position is None \
            else end_position
        self.file_name = file_name

        # Evaluated only when needed, e.g. during error reporting.
        self._line = None
        self._column = None

    @property
    def line(self):
        if self._line is None:
            self.evaluate_line_col()
        return self._line

    @property
    def column(self):
        if self._column is None:
            self.evaluate_line_col()
        return self._column

    def evaluate_line_col(self):
        self._line, self._column = pos_to_line_col(
            self.input_str, self.start_position)

    def is_eof(self):
        return self.start_position >= len(self.input_str)

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return (self.input_str, self.start_position, self.end_position) == \
            (other.input_str, other.start_position, other.end_position)

    def __hash__(self):
        return hash((self.input_str, self.start_position, self.end_position))

    def __str__(self):
        return '{}{}:{}:"{}"'.format(
            f"{self.file_name}:" if self.file_name else "",
            self.line, self.column,
            position_context(self.input_str, self.start_position))

    def __repr__(self):
        return str(self)


def position_context(input_str, position):
    """
    Returns position context string.
    """
    start = max(position-10, 0)
    c = input_str[start:position] + " **> " \
        + input_str[position:position+10]
    return replace_newlines(c)


def replace_newlines(in_str):
    return in_str.replace("\n", "\\n")


def pos_to_line_col(input_str, position):
    """
    Returns position in the (line,column) form.
    """

    if position is None:
        return None, None

    line = input_str[:position].count('\n') + 1
    line_start_pos = input_str.rfind('\n', 0, position)
    column = position - line_start_pos - 1

    return line, column
