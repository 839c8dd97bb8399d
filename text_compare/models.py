from collections import namedtuple

# two files, one per directory, whose names match ignoring case
FilePair = namedtuple("FilePair", ["source_path", "dest_path"])

# dest_line is None when the destination ran out of lines
MismatchRecord = namedtuple("MismatchRecord", ["line_number", "source_line", "dest_line"])


class ComparisonResult:
    """Outcome of comparing two files line by line.

    records      -- MismatchRecord list in line order
    dest_longer  -- destination still had lines once the source was exhausted
    lines_compared -- number of source lines read
    """

    def __init__(self):
        self.records = []
        self.dest_longer = False
        self.lines_compared = 0

    @property
    def has_mismatch(self):
        return bool(self.records)

    def add(self, line_number, source_line, dest_line):
        self.records.append(MismatchRecord(line_number, source_line, dest_line))

    def __repr__(self):
        return (f"ComparisonResult(mismatches={len(self.records)}, "
                f"dest_longer={self.dest_longer}, lines_compared={self.lines_compared})")
