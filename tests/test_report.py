import io

from text_compare.models import ComparisonResult
from text_compare.report import write_report, write_unmatched


def test_report_block_with_mismatches():
    result = ComparisonResult()
    result.add(2, "B", "X")
    result.add(4, "D", None)
    sink = io.StringIO()

    write_report(sink, "orders.txt", result)

    assert sink.getvalue() == (
        "Comparing the file : orders.txt\n"
        "2:B\n"
        "2:X\n"
        "\n"
        "4:D\n"
        "4:null\n"
        "\n"
    )


def test_report_block_without_mismatches():
    sink = io.StringIO()
    write_report(sink, "clean.txt", ComparisonResult())
    assert sink.getvalue() == "Comparing the file : clean.txt\nNo Mismatches found\n\n"


def test_blocks_append_to_one_sink():
    sink = io.StringIO()
    changed = ComparisonResult()
    changed.add(1, "a", "b")
    write_report(sink, "one.txt", changed)
    write_report(sink, "two.txt", ComparisonResult())

    text = sink.getvalue()
    assert text.index("one.txt") < text.index("two.txt")
    assert text.count("Comparing the file : ") == 2


def test_unmatched_block():
    sink = io.StringIO()
    write_unmatched(sink, ["a.txt"], ["z.txt"])
    assert sink.getvalue() == (
        "Files without a counterpart\n"
        "source only:a.txt\n"
        "destination only:z.txt\n"
        "\n"
    )


def test_unmatched_block_skipped_when_empty():
    sink = io.StringIO()
    write_unmatched(sink, [], [])
    assert sink.getvalue() == ""
