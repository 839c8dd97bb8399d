import difflib
import logging
import os
from pathlib import Path

import pandas as pd

from text_compare.errors import FileAccessError

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["FILE_NAME", "LINE_NUMBER", "SOURCE_LINE", "DEST_LINE", "DEST_LONGER"]


def build_summary_frame(results) -> pd.DataFrame:
    """
    One row per mismatch for every compared file.
    Files without mismatches still get a row (empty line columns) so the
    summary lists everything that was compared.
    """
    rows = []
    for file_name, result in results:
        if not result.has_mismatch:
            rows.append({
                "FILE_NAME": file_name,
                "LINE_NUMBER": None,
                "SOURCE_LINE": None,
                "DEST_LINE": None,
                "DEST_LONGER": result.dest_longer,
            })
            continue
        for record in result.records:
            rows.append({
                "FILE_NAME": file_name,
                "LINE_NUMBER": record.line_number,
                "SOURCE_LINE": record.source_line,
                "DEST_LINE": record.dest_line,
                "DEST_LONGER": result.dest_longer,
            })

    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    df["LINE_NUMBER"] = pd.to_numeric(df["LINE_NUMBER"]).astype("Int64")
    return df


def export_summary(df: pd.DataFrame, output_file: str) -> str:
    """Write the summary as Excel when the name ends in .xlsx, otherwise CSV."""
    try:
        os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
        if output_file.lower().endswith(".xlsx"):
            df.to_excel(output_file, index=False, engine="openpyxl")
        else:
            df.to_csv(output_file, index=False)
    except OSError as e:
        raise FileAccessError(output_file, e.strerror or str(e)) from e
    logger.info(f"Summary saved to {output_file} ({len(df)} rows)")
    return output_file


# ---------- side-by-side html ----------

def _read_lines(p: Path, encoding):
    with p.open("r", encoding=encoding, errors="replace") as fh:
        return fh.read().splitlines()


def write_html_diff(pair, out_dir, encoding="utf-8") -> str:
    """Side-by-side HTML diff of one file pair, saved under out_dir."""
    f1 = Path(pair.source_path)
    f2 = Path(pair.dest_path)
    out = Path(out_dir)

    safe_from = f1.stem[:50].replace(" ", "_")
    safe_to = f2.stem[:50].replace(" ", "_")
    html_path = out / f"diff_{safe_from}_vs_{safe_to}.html"

    try:
        out.mkdir(parents=True, exist_ok=True)
        a_lines = _read_lines(f1, encoding)
        b_lines = _read_lines(f2, encoding)
    except OSError as e:
        raise FileAccessError(e.filename or out_dir, e.strerror or str(e)) from e

    html_maker = difflib.HtmlDiff(wrapcolumn=120)
    html = html_maker.make_file(
        a_lines, b_lines,
        fromdesc=f"{f1.parent.name}/{f1.name}",
        todesc=f"{f2.parent.name}/{f2.name}",
        context=False, numlines=3
    )
    try:
        html_path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(str(html_path), e.strerror or str(e)) from e
    logger.debug(f"HTML diff written to {html_path}")
    return str(html_path)
