import argparse
import datetime
import sys

from text_compare.config import CONFIG_FILE, load_config
from text_compare.errors import TextCompareError
from text_compare.http_client import build_session, get_txn_status, update_txn
from text_compare.logger_helper import get_logger
from text_compare.runner import compare_folders, patch_file


def build_parser():
    parser = argparse.ArgumentParser(prog="text_compare", description="Line-by-line file compare and patch")
    parser.add_argument("--config", default=CONFIG_FILE, help="JSON config file (default: %(default)s)")
    parser.add_argument("--log-file", help="rotating log file; overrides config")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING ...; overrides config")
    sub = parser.add_subparsers(dest="command", required=True)

    diff = sub.add_parser("diff", help="compare same-named files of two folders")
    diff.add_argument("--src-dir")
    diff.add_argument("--dest-dir")
    diff.add_argument("--report-file")
    diff.add_argument("--summary-file", help=".xlsx or .csv mismatch summary")
    diff.add_argument("--html-dir", help="folder for side-by-side html reports")
    diff.add_argument("--report-unmatched", action="store_true", default=None)
    diff.add_argument("--continue-on-error", action="store_true", default=None)

    patch = sub.add_parser("patch", help="replace the first line containing a substring")
    patch.add_argument("file")
    patch.add_argument("search")
    patch.add_argument("replacement")

    callback = sub.add_parser("callback", help="call the transaction callback service")
    callback.add_argument("action", choices=["status", "update"])
    callback.add_argument("transaction_id")
    callback.add_argument("--transaction-type", default="OOB")
    callback.add_argument("--transaction-status", default="COMPLETE")
    callback.add_argument("--base-url")
    return parser


def _override(config, args, keys):
    for key in keys:
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value


def run_diff(config, logger):
    if not config["src_dir"] or not config["dest_dir"]:
        logger.error("src_dir and dest_dir are required (flags or config file)")
        return 2
    results = compare_folders(
        config["src_dir"], config["dest_dir"], config["report_file"],
        encoding=config["encoding"],
        report_unmatched=config["report_unmatched"],
        continue_on_error=config["continue_on_error"],
        summary_file=config["summary_file"],
        html_dir=config["html_dir"],
    )
    mismatched = sum(1 for _, result in results if result.has_mismatch)
    logger.info(f"Files compared: {len(results)} | with mismatches: {mismatched}")
    return 0


def run_callback(config, args, logger):
    http = config["http"]
    base_url = args.base_url or http["base_url"]
    if not base_url:
        logger.error("base_url is required (--base-url or http.base_url in config)")
        return 2
    session = build_session(http["cert_file"], http["key_file"], http["verify"])
    with session:
        if args.action == "status":
            status, body = get_txn_status(session, base_url, args.transaction_id,
                                          args.transaction_type, timeout=http["timeout"])
        else:
            status, body = update_txn(session, base_url, args.transaction_id, args.transaction_type,
                                      args.transaction_status, timeout=http["timeout"])
    print(f"{status}-->{body}")
    return 0 if status < 400 else 1


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except TextCompareError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    _override(config, args, ["log_file", "log_level", "src_dir", "dest_dir", "report_file",
                             "summary_file", "html_dir", "report_unmatched", "continue_on_error"])

    try:
        logger = get_logger("text_compare", log_file=config["log_file"], level=config["log_level"])
    except (ValueError, OSError) as e:
        print(f"Logging setup error: {e}", file=sys.stderr)
        return 2
    logger.info(f"**** Process started at: {datetime.datetime.now()}")
    try:
        if args.command == "diff":
            rc = run_diff(config, logger)
        elif args.command == "patch":
            patch_file(args.file, args.search, args.replacement, encoding=config["encoding"])
            rc = 0
        else:
            rc = run_callback(config, args, logger)
    except TextCompareError as e:
        logger.error(str(e))
        rc = 1
    logger.info(f"**** Process completed at: {datetime.datetime.now()}")
    return rc


if __name__ == "__main__":
    sys.exit(main())
