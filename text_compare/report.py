NULL_MARKER = "null"
NO_MISMATCH_MARKER = "No Mismatches found"


def _render(line):
    return NULL_MARKER if line is None else line


def write_report(sink, filename, result):
    """
    Append one block for a compared file to the run's report.

    Every mismatch prints as "{n}:{source line}" then "{n}:{dest line}" and a
    blank line. A file without mismatches gets a single marker line instead.
    """
    sink.write(f"Comparing the file : {filename}\n")
    for record in result.records:
        sink.write(f"{record.line_number}:{_render(record.source_line)}\n")
        sink.write(f"{record.line_number}:{_render(record.dest_line)}\n\n")
    if not result.has_mismatch:
        sink.write(f"{NO_MISMATCH_MARKER}\n\n")


def write_unmatched(sink, source_only, dest_only):
    if not source_only and not dest_only:
        return
    sink.write("Files without a counterpart\n")
    for name in source_only:
        sink.write(f"source only:{name}\n")
    for name in dest_only:
        sink.write(f"destination only:{name}\n")
    sink.write("\n")
